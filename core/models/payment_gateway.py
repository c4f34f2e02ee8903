# =============================================================================
# core/models/payment_gateway.py - Payment Gateway Schemas
# =============================================================================
# Input schema for configuring a tenant's online payment gateway.
#
# Credentials are plain strings at this layer. Encrypting them at rest is
# the job of the persistence layer.
# =============================================================================

from enum import Enum
from typing import Annotated

from pydantic import Field, StrictBool, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

from .base import InputSchema, reject_null


class PaymentGatewayProvider(str, Enum):
    """Supported payment-processing integrations."""
    RAZORPAY = "RAZORPAY"
    CASHFREE = "CASHFREE"
    PHONEPE = "PHONEPE"
    STRIPE = "STRIPE"


# Surrounding whitespace is stripped before the length rules apply
TrimmedName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
TrimmedSecret = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]

# Minimum-length messages by field name
_REQUIRED_MESSAGES = {
    "name": (2, "Name must be at least 2 characters"),
    "api_key": (1, "API Key is required"),
    "api_secret": (1, "API Secret is required"),
}


class PaymentGatewayInput(InputSchema):
    """
    Schema for creating a payment gateway configuration.

    Example:
        {
            "provider": "RAZORPAY",
            "name": "Razorpay Live",
            "apiKey": "rzp_live_xxx",
            "apiSecret": "secret",
            "isTestMode": false
        }
    """

    provider: PaymentGatewayProvider = Field(
        ...,
        description="Gateway provider code"
    )

    name: TrimmedName = Field(
        ...,
        description="Display name for the gateway"
    )

    api_key: TrimmedSecret = Field(
        ...,
        alias="apiKey",
        description="Provider API key"
    )

    api_secret: TrimmedSecret = Field(
        ...,
        alias="apiSecret",
        description="Provider API secret"
    )

    webhook_secret: TrimmedSecret | None = Field(
        default=None,
        alias="webhookSecret",
        description="Secret used to verify provider webhooks"
    )

    # Strict: "true"/"1" strings are rejected
    is_test_mode: StrictBool = Field(
        default=True,
        alias="isTestMode",
        description="Use the provider's sandbox environment"
    )

    @field_validator("name", "api_key", "api_secret")
    @classmethod
    def _min_length(cls, value: str, info) -> str:
        minimum, message = _REQUIRED_MESSAGES[info.field_name]
        if len(value) < minimum:
            raise PydanticCustomError("too_small", message)
        return value

    @field_validator("webhook_secret", mode="before")
    @classmethod
    def _webhook_secret_not_null(cls, value):
        return reject_null(value)


CreatePaymentGatewayInput = PaymentGatewayInput
