# =============================================================================
# tests/test_validation.py - Parse-or-Reject and Action Tests
# =============================================================================
# Tests for core/validation.py and core/services/action_service.py:
# - safe_parse returns values instead of raising
# - ActionResponse envelopes for admin actions
# - safe_error_message keeps database internals out of the UI
#
# Run with: poetry run pytest tests/test_validation.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import LocationInput, PaymentInput
from core.services import run_action
from core.validation import (
    DEFAULT_ERROR,
    ValidationIssue,
    ValidationResult,
    safe_error_message,
    safe_parse,
)


# =============================================================================
# safe_parse Tests
# =============================================================================

class TestSafeParse:
    """Tests for safe_parse and ValidationResult."""

    def test_success_returns_model(self, sample_payment_dict):
        """Valid input yields a typed model and no errors."""
        result = safe_parse(PaymentInput, sample_payment_dict)

        assert result.success is True
        assert isinstance(result.data, PaymentInput)
        assert result.errors == []

    def test_failure_does_not_raise(self):
        """Invalid input yields issues instead of an exception."""
        result = safe_parse(LocationInput, {"name": "A"})

        assert result.success is False
        assert result.data is None
        assert result.errors == [
            ValidationIssue(
                path=["name"],
                message="Location name must be at least 2 characters",
                rule="too_small",
            )
        ]

    def test_first_error(self):
        """first_error returns the first message."""
        result = safe_parse(PaymentInput, {"subscriberId": "nope", "amount": 10, "method": "CASH"})
        assert result.first_error() == "Invalid subscriber"

    def test_first_error_default(self):
        """first_error falls back when there are no issues."""
        assert ValidationResult(success=False).first_error() == DEFAULT_ERROR
        assert ValidationResult(success=False).first_error("Failed") == "Failed"

    def test_oversized_integer_amount(self, sample_payment_dict):
        """An int too large for float is a failed result, not an exception."""
        sample_payment_dict["amount"] = 10 ** 400

        result = safe_parse(PaymentInput, sample_payment_dict)

        assert result.success is False
        assert result.first_error() == "Amount must be positive"

    def test_non_dict_input(self):
        """Non-mapping input is a validation failure, not a crash."""
        result = safe_parse(LocationInput, "Koramangala")

        assert result.success is False
        assert len(result.errors) == 1

    def test_issue_to_dict(self):
        """Issues serialize as {path, message}."""
        issue = ValidationIssue(path=["amount"], message="Amount must be positive", rule="too_small")
        assert issue.to_dict() == {"path": ["amount"], "message": "Amount must be positive"}

    def test_to_output_on_success(self):
        """to_output returns the normalized record."""
        result = safe_parse(LocationInput, {"name": "Koramangala", "parentId": None})
        assert result.to_output() == {"name": "Koramangala", "type": "AREA", "parentId": None}

    def test_to_output_on_failure_raises(self):
        """A failed result has no output."""
        result = safe_parse(LocationInput, {})

        with pytest.raises(ValueError):
            result.to_output()


# =============================================================================
# safe_error_message Tests
# =============================================================================

class TestSafeErrorMessage:
    """Tests for safe_error_message."""

    def test_validation_error_uses_first_message(self):
        """A pydantic ValidationError maps to its first message."""
        with pytest.raises(ValidationError) as exc_info:
            LocationInput.model_validate({"name": "A"})

        message = safe_error_message(exc_info.value, "Failed")
        assert message == "Location name must be at least 2 characters"

    def test_application_message_passes_through(self):
        """Plain business errors are shown as-is."""
        error = ValueError("Invoice is already paid")
        assert safe_error_message(error, "Failed") == "Invoice is already paid"

    @pytest.mark.parametrize("text", [
        "Foreign key constraint failed on the field: `locationId`",
        "insert or update on table \"payment\" violates check constraint",
        "Can't reach database server: connection refused",
        "P2025: Record to update not found",
        "invalid input syntax for type uuid",
    ])
    def test_database_internals_hidden(self, text):
        """Messages that look like database internals are replaced."""
        assert safe_error_message(RuntimeError(text), "Failed to save") == "Failed to save"

    def test_unique_username(self):
        """Unique violations on username get a friendly message."""
        error = RuntimeError("Unique constraint failed on the fields: (`tenantId`,`username`)")
        assert safe_error_message(error, "Failed") == "This username is already taken"

    def test_unique_email(self):
        """Unique violations on email get a friendly message."""
        error = RuntimeError("Unique constraint failed on the fields: (`email`)")
        assert safe_error_message(error, "Failed") == "This email is already in use"

    def test_empty_message_uses_fallback(self):
        """Exceptions without a message fall back."""
        assert safe_error_message(RuntimeError(), "Failed") == "Failed"

    def test_non_exception_uses_fallback(self):
        """Anything that is not an exception falls back."""
        assert safe_error_message("boom", "Failed") == "Failed"
        assert safe_error_message(None, "Failed") == "Failed"


# =============================================================================
# run_action Tests
# =============================================================================

class TestRunAction:
    """Tests for the admin action runner."""

    def test_success_passes_model_to_handler(self, sample_payment_dict):
        """The handler receives the parsed model and its result is returned."""
        received = []

        def handler(payment):
            received.append(payment)
            return {"id": "payment-1"}

        response = run_action(PaymentInput, sample_payment_dict, handler, "Failed to record payment")

        assert response.success is True
        assert response.data == {"id": "payment-1"}
        assert response.error is None
        assert received[0].amount == 499.0

    def test_invalid_input_skips_handler(self, sample_payment_dict):
        """The handler is not called when validation fails."""
        sample_payment_dict["amount"] = "0"

        def handler(payment):
            raise AssertionError("handler should not run")

        response = run_action(PaymentInput, sample_payment_dict, handler, "Failed to record payment")

        assert response.success is False
        assert response.error == "Amount must be positive"

    def test_handler_error_is_sanitized(self):
        """Persistence errors are mapped to a safe message."""
        def handler(location):
            raise RuntimeError("Foreign key constraint failed on the field: `parentId`")

        response = run_action(LocationInput, {"name": "Koramangala"}, handler, "Failed to create location")

        assert response.success is False
        assert response.error == "Failed to create location"

    def test_handler_business_error_shown(self):
        """Business rule messages reach the user."""
        def handler(location):
            raise ValueError("Location limit reached for this plan")

        response = run_action(LocationInput, {"name": "Koramangala"}, handler, "Failed")

        assert response.error == "Location limit reached for this plan"
