# =============================================================================
# core/services/action_service.py - Admin Action Runner
# =============================================================================
# Every admin mutation follows the same steps:
#   1. Validate the raw form payload against a schema
#   2. Hand the typed record to the persistence call
#   3. Turn any failure into an ActionResponse with a safe message
#
# Persistence is supplied by the caller as a plain callable, so this module
# has no database dependency.
# =============================================================================

import logging
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

from core.validation import ActionResponse, safe_error_message, safe_parse

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def run_action(
    schema: type[SchemaT],
    form_data: Any,
    handler: Callable[[SchemaT], Any],
    fallback: str,
) -> ActionResponse:
    """
    Validate `form_data` and pass the result to `handler`.

    Args:
        schema: Input schema class (e.g. PaymentInput)
        form_data: Raw payload from the admin form
        handler: Persistence call receiving the validated model; its
            return value becomes `data` in the response
        fallback: Message used when an error cannot be shown as-is

    Returns:
        ActionResponse - success with handler result, or failure with the
        first validation message / sanitized error message

    Example:
        run_action(LocationInput, form, repo.create, "Failed to create location")
    """
    result = safe_parse(schema, form_data)
    if not result.success:
        return ActionResponse(success=False, error=result.first_error())

    try:
        data = handler(result.data)
    except Exception as e:
        logger.warning(f"{schema.__name__} action failed: {e}")
        return ActionResponse(success=False, error=safe_error_message(e, fallback))

    return ActionResponse(success=True, data=data)
