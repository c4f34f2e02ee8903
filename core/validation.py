# =============================================================================
# core/validation.py - Parse-or-Reject Entry Point
# =============================================================================
# Turns pydantic's exception-based validation into a value:
#
#   result = safe_parse(PaymentInput, form_data)
#   if not result.success:
#       return ActionResponse(success=False, error=result.first_error())
#   record = result.to_output()
#
# Also provides the ActionResponse envelope returned by admin actions and
# safe_error_message, which keeps database internals out of user-facing
# error text.
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

DEFAULT_ERROR = "Invalid input"


# =============================================================================
# Validation Result
# =============================================================================

@dataclass(frozen=True)
class ValidationIssue:
    """
    One violated constraint.

    Attributes:
        path: Location of the offending value, e.g. ["subscriberId"]
        message: Human-readable message for the form
        rule: Machine-readable rule name, e.g. "too_small", "invalid_uuid"
    """
    path: list[str | int]
    message: str
    rule: str = "invalid"

    @classmethod
    def from_pydantic(cls, error: dict[str, Any]) -> "ValidationIssue":
        """Build an issue from one entry of ValidationError.errors()."""
        return cls(
            path=list(error.get("loc", ())),
            message=error.get("msg", DEFAULT_ERROR),
            rule=error.get("type", "invalid"),
        )

    def to_dict(self) -> dict[str, Any]:
        """The {path, message} pair consumed by forms."""
        return {"path": self.path, "message": self.message}


@dataclass
class ValidationResult(Generic[SchemaT]):
    """
    Outcome of safe_parse: either a typed model or a list of issues.

    Exactly one of `data` / `errors` is meaningful, as indicated by
    `success`.
    """
    success: bool
    data: SchemaT | None = None
    errors: list[ValidationIssue] = field(default_factory=list)

    def first_error(self, default: str = DEFAULT_ERROR) -> str:
        """Message of the first issue, or `default` if there is none."""
        return self.errors[0].message if self.errors else default

    def to_output(self) -> dict[str, Any]:
        """
        Normalized record keyed by wire names.

        Raises:
            ValueError: If called on a failed result
        """
        if not self.success or self.data is None:
            raise ValueError("Cannot build output from a failed validation result")
        if hasattr(self.data, "to_output"):
            return self.data.to_output()
        return self.data.model_dump(mode="json", by_alias=True)


def issues_from_error(error: ValidationError) -> list[ValidationIssue]:
    """Convert every error inside a ValidationError to a ValidationIssue."""
    return [ValidationIssue.from_pydantic(e) for e in error.errors()]


def safe_parse(schema: type[SchemaT], data: Any) -> ValidationResult[SchemaT]:
    """
    Validate untyped input against a schema without raising.

    Args:
        schema: Pydantic model class (e.g. LocationInput)
        data: Raw input, usually a dict decoded from a form or JSON body

    Returns:
        ValidationResult with the parsed model on success, or every
        violated constraint on failure

    Example:
        result = safe_parse(LocationInput, {"name": "A"})
        result.first_error()  # "Location name must be at least 2 characters"
    """
    try:
        model = schema.model_validate(data)
    except ValidationError as e:
        issues = issues_from_error(e)
        logger.debug(f"{schema.__name__} rejected input: {[i.to_dict() for i in issues]}")
        return ValidationResult(success=False, errors=issues)

    return ValidationResult(success=True, data=model)


# =============================================================================
# Action Responses
# =============================================================================

class ActionResponse(BaseModel):
    """
    Envelope returned by admin actions.

    Example:
        {"success": false, "error": "Amount must be positive"}
    """
    success: bool
    data: Any | None = None
    error: str | None = None


# Substrings that mark a message as leaking database internals
_UNSAFE_PATTERNS = (
    "prisma",
    "unique constraint",
    "foreign key",
    "violates",
    "invalid input syntax",
    "column",
    "relation",
    "connect",
    "p2",
)


def safe_error_message(error: BaseException | Any, fallback: str) -> str:
    """
    Extract a user-facing message from any caught error.

    - ValidationError: first validation message
    - Other exceptions: their message, unless it looks like a database
      internal, in which case `fallback` is returned and the original is
      logged. Unique violations on username/email get a specific message.
    - Anything else: `fallback`

    Args:
        error: The caught exception (or any object)
        fallback: Message to use when nothing safe can be shown

    Returns:
        A message safe to show in the admin UI
    """
    if isinstance(error, ValidationError):
        issues = issues_from_error(error)
        return issues[0].message if issues else fallback

    if not isinstance(error, BaseException):
        return fallback

    message = getattr(error, "message", None) or str(error)
    if not message:
        return fallback

    lower = message.lower()
    if any(pattern in lower for pattern in _UNSAFE_PATTERNS):
        if "unique" in lower and "username" in lower:
            return "This username is already taken"
        if "unique" in lower and "email" in lower:
            return "This email is already in use"
        logger.error(f"Sanitized error: {message}")
        return fallback

    return message
