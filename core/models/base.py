# =============================================================================
# core/models/base.py - Shared Schema Plumbing
# =============================================================================
# Base class and helpers used by every admin input schema:
# - InputSchema: wire-name aliases, unknown keys ignored, normalized output
# - check_uuid: hyphenated UUID check with a caller-chosen message
# - reject_null: "optional" fields accept absence, not an explicit null
# =============================================================================

import re
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic_core import PydanticCustomError

# 8-4-4-4-12 hex groups, matched against the whole string (no trailing
# newline); braces, URNs and bare 32-hex strings are not accepted
UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def check_uuid(value: str, message: str = "Invalid uuid") -> str:
    """
    Validate that a string is a hyphenated UUID.

    Args:
        value: Candidate string
        message: Error message reported on failure

    Returns:
        The value unchanged (case preserved)

    Raises:
        PydanticCustomError: With rule "invalid_uuid" and the given message
    """
    if not UUID_RE.fullmatch(value):
        raise PydanticCustomError("invalid_uuid", message)
    return value


def reject_null(value: Any, message: str = "Expected string, received null") -> Any:
    """Before-validator: an optional field may be omitted but not sent as null."""
    if value is None:
        raise PydanticCustomError("invalid_type", message)
    return value


class InputSchema(BaseModel):
    """
    Base for admin input schemas.

    Fields declare camelCase aliases matching the form payloads; Python code
    uses the snake_case names. Unknown keys are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def to_output(self) -> dict[str, Any]:
        """
        Normalized record keyed by wire names.

        Defaults applied during parsing are included. Fields whose default
        is None are omitted when the input did not supply them, so an
        absent key and an explicit null stay distinguishable.
        """
        output = self.model_dump(mode="json", by_alias=True)
        for name, info in type(self).model_fields.items():
            if info.default is None and name not in self.model_fields_set:
                output.pop(info.alias or name, None)
        return output
