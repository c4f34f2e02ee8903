# =============================================================================
# core/models/location.py - Location Schemas
# =============================================================================
# Input schema for creating and updating service locations.
#
# Locations form a hierarchy (REGION > CITY > AREA) through parentId.
# The schema only checks the shape of parentId; whether the parent exists
# or would create a cycle is decided by the persistence layer and by
# core/services/location_service.py.
# =============================================================================

from enum import Enum

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from .base import InputSchema, check_uuid


class LocationType(str, Enum):
    """
    Level of a location in the hierarchy.

    - REGION: Top-level area (state, district)
    - CITY: A city or town inside a region
    - AREA: A neighbourhood or locality served by the ISP
    """
    REGION = "REGION"
    CITY = "CITY"
    AREA = "AREA"


class LocationInput(InputSchema):
    """
    Schema for creating or updating a location.

    Example:
        {
            "name": "Koramangala",
            "type": "AREA",
            "parentId": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    # Display name, not trimmed
    name: str = Field(
        ...,
        description="Location name (at least 2 characters)"
    )

    type: LocationType = Field(
        default=LocationType.AREA,
        description="Hierarchy level; AREA when omitted"
    )

    # Three states: omitted, explicit null (detach from parent), or a UUID
    parent_id: str | None = Field(
        default=None,
        alias="parentId",
        description="Parent location UUID, or null for a top-level location"
    )

    @field_validator("name")
    @classmethod
    def _name_min_length(cls, value: str) -> str:
        if len(value) < 2:
            raise PydanticCustomError(
                "too_small",
                "Location name must be at least 2 characters",
            )
        return value

    @field_validator("parent_id")
    @classmethod
    def _parent_id_is_uuid(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return check_uuid(value)

    @property
    def parent_id_provided(self) -> bool:
        """True if the input carried parentId at all (null included)."""
        return "parent_id" in self.model_fields_set


# Create and update accept the same payload
CreateLocationInput = LocationInput
UpdateLocationInput = LocationInput
