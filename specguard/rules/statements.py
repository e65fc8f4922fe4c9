from specguard.core.constants import COMMENT_MARKERS
from specguard.rules.models import Statement


def extract_statements(content: str) -> list[Statement]:
    """
    Split specification text into candidate rule statements.

    Lines are trimmed; blank lines and lines starting with a comment marker are
    skipped. Line numbers refer to the original text.
    """
    statements: list[Statement] = []
    for index, raw_line in enumerate(content.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_MARKERS):
            continue
        statements.append(Statement(text=line, line_number=index))
    return statements
