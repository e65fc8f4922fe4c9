"""
Specification compiler: statements in, parsed rules and diagnostics out.

Compilation is a pure function of the input text. Identifier ordinals are
counted per template inside each `compile` call, so compiling the same text
twice yields the same rules apart from timestamps.
"""

from collections import Counter
from collections.abc import Sequence

import structlog

from specguard.core.constants import FALLBACK_CONFIDENCE, PARSE_SUGGESTION
from specguard.core.errors import SpecCompilationError
from specguard.core.models import QualitySpec
from specguard.core.utils.logging import log_operation
from specguard.rules.confidence import overall_confidence, usable_rules
from specguard.rules.grammar import BUILTIN_TEMPLATES, GrammarTemplate, build_fallback_rule
from specguard.rules.models import CompileResult, ParsedRule, ParseError, RuleMetadata, Statement
from specguard.rules.statements import extract_statements
from specguard.rules.validators import validate_rules

logger = structlog.get_logger(__name__)


class SpecCompiler:
    """
    Converts natural-language quality specifications into parsed rules.

    Templates are tried in the given order for every statement; statements no
    template recognises are kept as low-confidence fallback rules.
    """

    def __init__(self, templates: Sequence[GrammarTemplate] = BUILTIN_TEMPLATES):
        self.templates = tuple(templates)

    def compile(self, spec: QualitySpec | str) -> CompileResult:
        """
        Compile a specification.

        Args:
            spec: A QualitySpec or its raw text.

        Returns:
            All parsed rules, the usable subset, diagnostics and confidence.

        Raises:
            SpecCompilationError: Only when compilation breaks down as a whole;
                sloppy input is reported through `errors` and `warnings`.
        """
        content = spec.content if isinstance(spec, QualitySpec) else spec

        try:
            with log_operation("spec_compile"):
                return self._compile(content)
        except Exception as e:
            raise SpecCompilationError(f"Failed to parse quality spec: {e}") from e

    def _compile(self, content: str) -> CompileResult:
        statements = extract_statements(content)
        rules: list[ParsedRule] = []
        errors: list[ParseError] = []
        ordinals: Counter[str] = Counter()

        for position, statement in enumerate(statements, start=1):
            try:
                rules.append(self._compile_statement(statement, position, ordinals))
            except Exception as e:
                logger.debug("statement_build_failed", line=statement.line_number, error=str(e))
                errors.append(
                    ParseError(
                        line=statement.line_number,
                        column=1,
                        message=str(e) or "Unknown parsing error",
                        original_text=statement.text,
                        suggestion=PARSE_SUGGESTION,
                    )
                )

        report = validate_rules(rules)
        errors.extend(report.errors)

        result = CompileResult(
            rules=rules,
            usable_rules=usable_rules(rules),
            total_rules=len(statements),
            successfully_parsed=len(rules),
            overall_confidence=overall_confidence(rules, len(errors), len(statements)),
            warnings=report.warnings,
            errors=errors,
        )
        logger.info("spec_compiled", **result.summary())
        return result

    def _compile_statement(self, statement: Statement, position: int, ordinals: Counter[str]) -> ParsedRule:
        for template in self.templates:
            match = template.match(statement.text)
            if not match:
                continue

            ordinals[template.name] += 1
            rule_id = f"{template.name}_{ordinals[template.name]}"
            metadata = RuleMetadata(original_text=statement.text, confidence=template.confidence)
            return template.builder(match, rule_id, metadata)

        metadata = RuleMetadata(original_text=statement.text, confidence=FALLBACK_CONFIDENCE)
        return build_fallback_rule(statement.text, f"generic_{position}", metadata)


def compile_spec(spec: QualitySpec | str) -> CompileResult:
    """Compile with the built-in grammar templates."""
    return SpecCompiler().compile(spec)
