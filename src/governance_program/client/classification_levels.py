"""
governance_program.client.classification_levels

Governance classification levels (confidentiality, criticality, retention ...)
organised as sets of numbered identifiers.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import (
    GovernanceLevelIdentifierElement,
    GovernanceLevelIdentifierSetElement,
)
from governance_program.properties.governance import (
    GovernanceLevelIdentifierProperties,
    GovernanceLevelIdentifierSetProperties,
)


class GovernanceClassificationLevelManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_governance_level_identifier_set(
        self, user_id: str, properties: GovernanceLevelIdentifierSetProperties | None
    ) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/classification-level-sets",
            method_name="create_governance_level_identifier_set",
        )

    def update_governance_level_identifier_set(
        self,
        user_id: str,
        set_guid: str,
        is_merge_update: bool,
        properties: GovernanceLevelIdentifierSetProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            set_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="setGUID",
            properties_parameter_name="properties",
            path="/classification-level-sets/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_level_identifier_set",
        )

    def delete_governance_level_identifier_set(self, user_id: str, set_guid: str) -> None:
        self._client.remove_element(
            user_id,
            set_guid,
            element_guid_parameter_name="setGUID",
            path="/classification-level-sets/{2}/delete",
            method_name="delete_governance_level_identifier_set",
        )

    def create_governance_level_identifier(
        self,
        user_id: str,
        set_guid: str,
        properties: GovernanceLevelIdentifierProperties | None,
    ) -> str | None:
        """Add a level to a set; the set anchors the level, so deleting the set removes it."""

        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/classification-levels",
            method_name="create_governance_level_identifier",
            anchor_guid=set_guid,
            anchor_guid_parameter_name="setGUID",
        )

    def update_governance_level_identifier(
        self,
        user_id: str,
        level_guid: str,
        is_merge_update: bool,
        properties: GovernanceLevelIdentifierProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            level_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="levelGUID",
            properties_parameter_name="properties",
            path="/classification-levels/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_level_identifier",
        )

    def delete_governance_level_identifier(self, user_id: str, level_guid: str) -> None:
        self._client.remove_element(
            user_id,
            level_guid,
            element_guid_parameter_name="levelGUID",
            path="/classification-levels/{2}/delete",
            method_name="delete_governance_level_identifier",
        )

    def get_governance_level_identifier_set_by_guid(
        self, user_id: str, set_guid: str
    ) -> GovernanceLevelIdentifierSetElement | None:
        return self._client.get_element_by_guid(
            user_id,
            set_guid,
            GovernanceLevelIdentifierSetElement,
            element_guid_parameter_name="setGUID",
            path="/classification-level-sets/{2}",
            method_name="get_governance_level_identifier_set_by_guid",
        )

    def get_governance_level_identifier_sets(
        self, user_id: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceLevelIdentifierSetElement]:
        return self._client.get_elements(
            user_id,
            GovernanceLevelIdentifierSetElement,
            start_from,
            page_size,
            path="/classification-level-sets",
            method_name="get_governance_level_identifier_sets",
        )

    def get_governance_level_identifier(
        self, user_id: str, level_guid: str
    ) -> GovernanceLevelIdentifierElement | None:
        return self._client.get_element_by_guid(
            user_id,
            level_guid,
            GovernanceLevelIdentifierElement,
            element_guid_parameter_name="levelGUID",
            path="/classification-levels/{2}",
            method_name="get_governance_level_identifier",
        )
