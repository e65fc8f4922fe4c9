"""
Core error classes for the specguard application.
"""

from typing import Any


class SpecGuardError(Exception):
    """Base class for errors raised by specguard collaborators."""

    pass


class SpecCompilationError(SpecGuardError):
    """Raised when compilation fails as a whole, never for sloppy input."""

    pass


class SpecNotFoundError(SpecGuardError):
    """Raised when a quality specification identifier is not registered."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Quality specification '{identifier}' not found")


class SpecFormatError(SpecGuardError):
    """Raised when an imported specification cannot be read in the given format."""

    def __init__(self, format_name: str, reason: str) -> None:
        self.format_name = format_name
        self.reason = reason
        super().__init__(f"Invalid {format_name} specification: {reason}")


class GateConfigError(SpecGuardError):
    """Raised when a quality gate configuration is rejected."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)

    def to_details(self) -> dict[str, Any]:
        return {"errors": self.errors}
