"""Error Hierarchy — typed, categorized exceptions for every microwave failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error names the offending value (field/value, operation/state, identifier)
    - to_response() produces the REST envelope used by the API layer
    - Persistence failures are NOT part of this hierarchy (adapter swallows them)

Design Decisions:
    - Single hierarchy with MicrowaveError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: int | None = None
    program_identifier: str | None = None
    debug_info: dict[str, Any] | None = None


class MicrowaveError(Exception):
    """Base exception for all microwave errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "program_identifier": self.context.program_identifier,
                },
            }
        }


# ─── Value & State Errors ───────────────────────────────────────

class OutOfRangeError(MicrowaveError):
    """Power, Duration or AddTime result outside its permitted band."""
    def __init__(
        self, field: str, value: Any, minimum: int, maximum: int | None,
        context: ErrorContext | None = None,
    ):
        if maximum is None:
            message = f"{field} must be at least {minimum} (got {value!r})"
        else:
            message = f"{field} must be between {minimum} and {maximum} (got {value!r})"
        super().__init__(
            message, "OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class InvalidTransitionError(MicrowaveError):
    """State machine precondition violated."""
    def __init__(
        self, operation: str, state: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot {operation} a session that is {state}",
            "INVALID_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.operation = operation
        self.state = state


class InvalidSessionError(MicrowaveError):
    """Session parameter fails shape validation (progress character, etc.)."""
    def __init__(self, message: str, field: str, value: Any):
        super().__init__(
            message, "INVALID_SESSION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, None, 400,
        )
        self.field = field
        self.value = value


# ─── Lookup Errors ──────────────────────────────────────────────

class ResourceNotFoundError(MicrowaveError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class SessionNotFoundError(ResourceNotFoundError):
    def __init__(self, session_id: int):
        super().__init__(
            "Session", str(session_id), ErrorContext(session_id=session_id),
        )
        self.session_id = session_id


class ProgramNotFoundError(ResourceNotFoundError):
    def __init__(self, identifier: str):
        super().__init__(
            "Program", identifier, ErrorContext(program_identifier=identifier),
        )
        self.identifier = identifier


class SessionConflictError(MicrowaveError):
    """A session with the same id is already stored."""
    def __init__(self, session_id: int):
        super().__init__(
            f"Session '{session_id}' already exists",
            "SESSION_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ErrorContext(session_id=session_id), 409,
        )
        self.session_id = session_id


# ─── Catalog Errors ─────────────────────────────────────────────

class InvalidProgramError(MicrowaveError):
    """Program fields fail shape validation (one-char identifier, etc.)."""
    def __init__(self, message: str, field: str, identifier: str | None = None):
        super().__init__(
            message, "INVALID_PROGRAM", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(program_identifier=identifier), 400,
        )
        self.field = field


class DuplicateIdentifierError(MicrowaveError):
    """Program identifier already present in the catalog."""
    def __init__(self, identifier: str):
        super().__init__(
            f"A program with identifier '{identifier}' already exists",
            "DUPLICATE_IDENTIFIER", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ErrorContext(program_identifier=identifier), 409,
        )
        self.identifier = identifier


class DuplicateCharError(MicrowaveError):
    """Progress character already used by another program."""
    def __init__(self, progress_char: str, owner: str):
        super().__init__(
            f"Progress character '{progress_char}' is already used by program '{owner}'",
            "DUPLICATE_CHAR", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ErrorContext(program_identifier=owner), 409,
        )
        self.progress_char = progress_char
        self.owner = owner


class ReservedCharError(MicrowaveError):
    """Progress character is the reserved manual-heating default."""
    def __init__(self, progress_char: str):
        super().__init__(
            f"Progress character '{progress_char}' is reserved for manual heating",
            "RESERVED_CHAR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, None, 400,
        )
        self.progress_char = progress_char


class ProtectedProgramError(MicrowaveError):
    """Attempt to mutate or remove a predefined program."""
    def __init__(self, identifier: str):
        super().__init__(
            f"Program '{identifier}' is predefined and cannot be modified",
            "PROTECTED_PROGRAM", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ErrorContext(program_identifier=identifier), 403,
        )
        self.identifier = identifier
