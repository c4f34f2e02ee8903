# =============================================================================
# core/services/location_service.py - Location Business Rules
# =============================================================================
# Hierarchy rules that need more than one record's worth of context:
# - An update may not make a location its own parent
# - A location with children, subscribers or NAS devices may not be deleted
# - Flat location rows are nested into a tree for the admin sidebar
#
# Rows are plain dicts as returned by the persistence layer, keyed by the
# same camelCase names the schemas use.
# =============================================================================

import logging
from typing import Any

from app.exceptions import LocationHierarchyError, LocationInUseError
from core.models.location import LocationInput
from core.validation import ValidationResult, safe_parse

logger = logging.getLogger(__name__)


class LocationService:
    """
    Service for location hierarchy rules.

    All methods are pure; loading and saving rows is the caller's job.
    """

    @staticmethod
    def prepare_update(location_id: str, form_data: Any) -> ValidationResult[LocationInput]:
        """
        Validate an update payload for an existing location.

        Args:
            location_id: ID of the location being edited
            form_data: Raw update payload

        Returns:
            ValidationResult from the location schema

        Raises:
            LocationHierarchyError: If parentId points at the location itself
        """
        result = safe_parse(LocationInput, form_data)
        if result.success and result.data.parent_id is not None:
            if result.data.parent_id.lower() == str(location_id).lower():
                raise LocationHierarchyError(str(location_id))
        return result

    @staticmethod
    def ensure_deletable(
        location_id: str,
        children: int = 0,
        subscribers: int = 0,
        nas_devices: int = 0,
    ) -> None:
        """
        Check that nothing still depends on a location.

        Args:
            location_id: ID of the location to delete
            children: Number of child locations
            subscribers: Number of subscribers assigned to it
            nas_devices: Number of NAS devices assigned to it

        Raises:
            LocationInUseError: If any count is non-zero
        """
        details = {
            "location_id": str(location_id),
            "children": children,
            "subscribers": subscribers,
            "nas_devices": nas_devices,
        }
        if children > 0:
            raise LocationInUseError("Cannot delete location with child locations", details)
        if subscribers > 0 or nas_devices > 0:
            raise LocationInUseError(
                "Cannot delete location with assigned subscribers or NAS devices",
                details,
            )

    @staticmethod
    def build_tree(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Nest flat location rows by parentId.

        Rows are ordered by name at every level. A row whose parent is not
        in `rows` is treated as a root. Input rows are not modified.

        Args:
            rows: Location dicts with at least "id", "name" and "parentId"

        Returns:
            Root nodes, each a copy of its row with a "children" list

        Example:
            build_tree([
                {"id": "r", "name": "North", "parentId": None},
                {"id": "c", "name": "Pune", "parentId": "r"},
            ])
            # [{"id": "r", ..., "children": [{"id": "c", ..., "children": []}]}]
        """
        ordered = sorted(rows, key=lambda row: row.get("name") or "")
        nodes = {row["id"]: {**row, "children": []} for row in ordered}

        roots = []
        for row in ordered:
            node = nodes[row["id"]]
            parent_id = row.get("parentId")
            if parent_id and parent_id in nodes and parent_id != row["id"]:
                nodes[parent_id]["children"].append(node)
            else:
                if parent_id and parent_id not in nodes:
                    logger.debug(f"Location {row['id']} has unknown parent {parent_id}; treating as root")
                roots.append(node)

        return roots
