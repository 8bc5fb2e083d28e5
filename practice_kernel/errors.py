"""
Error taxonomy for the practice kernel.

Lookups that fail, misconfigured practices and utility overflow are all
surfaced as recoverable exceptions. Nothing in the kernel terminates the
process; callers decide whether to skip, log, or rebind.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorReport(BaseModel):
    """Machine-readable form of a kernel error."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class PracticeKernelError(Exception):
    """Base exception for the practice kernel."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_report(self) -> ErrorReport:
        """Convert to an error report."""
        return ErrorReport(code=self.code, message=self.message, details=self.details)


class NotFoundError(PracticeKernelError):
    """A role or entity lookup found nothing."""

    def __init__(self, key: Any, message: str, details: Optional[Dict[str, Any]] = None):
        self.key = key
        super().__init__("NOT_FOUND", message, {"key": str(key), **(details or {})})


class RoleNotFoundError(NotFoundError):
    """A role has no registered display name or binding."""

    def __init__(self, role: Any, owner: str):
        super().__init__(
            role,
            f"{owner} doesn't have the role {role}!",
            {"owner": owner},
        )


class EntityNotFoundError(NotFoundError):
    """An entity is not bound to any role of a practice."""

    def __init__(self, entity_id: int, practice_id: int):
        super().__init__(
            entity_id,
            f"Entity {entity_id} has no role in practice {practice_id}.",
            {"practice_id": practice_id},
        )


class MisconfigurationError(PracticeKernelError):
    """Authoring code supplied an inconsistent configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("MISCONFIGURATION", message, details)


class UtilityOverflowError(PracticeKernelError):
    """A utility value left the configured whole-number scale."""

    def __init__(self, rule: str, value: int, minimum: int, maximum: int):
        self.value = value
        super().__init__(
            "UTILITY_OVERFLOW",
            f"{rule} produced utility {value} outside [{minimum}, {maximum}].",
            {"rule": rule, "value": value, "minimum": minimum, "maximum": maximum},
        )
