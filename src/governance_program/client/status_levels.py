from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import (
    GovernanceStatusIdentifierElement,
    GovernanceStatusIdentifierSetElement,
)
from governance_program.properties.governance import (
    GovernanceStatusIdentifierProperties,
    GovernanceStatusIdentifierSetProperties,
)


class GovernanceStatusLevelManager:
    """Sets of governance status levels (for example the stages of a review) and their members."""

    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_governance_status_identifier_set(
        self, user_id: str, properties: GovernanceStatusIdentifierSetProperties | None
    ) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/status-level-sets",
            method_name="create_governance_status_identifier_set",
        )

    def update_governance_status_identifier_set(
        self,
        user_id: str,
        set_guid: str,
        is_merge_update: bool,
        properties: GovernanceStatusIdentifierSetProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            set_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="setGUID",
            properties_parameter_name="properties",
            path="/status-level-sets/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_status_identifier_set",
        )

    def delete_governance_status_identifier_set(self, user_id: str, set_guid: str) -> None:
        self._client.remove_element(
            user_id,
            set_guid,
            element_guid_parameter_name="setGUID",
            path="/status-level-sets/{2}/delete",
            method_name="delete_governance_status_identifier_set",
        )

    def create_governance_status_identifier(
        self,
        user_id: str,
        set_guid: str,
        properties: GovernanceStatusIdentifierProperties | None,
    ) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/status-levels",
            method_name="create_governance_status_identifier",
            anchor_guid=set_guid,
            anchor_guid_parameter_name="setGUID",
        )

    def update_governance_status_identifier(
        self,
        user_id: str,
        status_guid: str,
        is_merge_update: bool,
        properties: GovernanceStatusIdentifierProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            status_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="statusGUID",
            properties_parameter_name="properties",
            path="/status-levels/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_status_identifier",
        )

    def delete_governance_status_identifier(self, user_id: str, status_guid: str) -> None:
        self._client.remove_element(
            user_id,
            status_guid,
            element_guid_parameter_name="statusGUID",
            path="/status-levels/{2}/delete",
            method_name="delete_governance_status_identifier",
        )

    def get_governance_status_identifier_set_by_guid(
        self, user_id: str, set_guid: str
    ) -> GovernanceStatusIdentifierSetElement | None:
        return self._client.get_element_by_guid(
            user_id,
            set_guid,
            GovernanceStatusIdentifierSetElement,
            element_guid_parameter_name="setGUID",
            path="/status-level-sets/{2}",
            method_name="get_governance_status_identifier_set_by_guid",
        )

    def get_governance_status_identifier_sets(
        self, user_id: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceStatusIdentifierSetElement]:
        return self._client.get_elements(
            user_id,
            GovernanceStatusIdentifierSetElement,
            start_from,
            page_size,
            path="/status-level-sets",
            method_name="get_governance_status_identifier_sets",
        )

    def get_governance_status_identifier(
        self, user_id: str, status_guid: str
    ) -> GovernanceStatusIdentifierElement | None:
        return self._client.get_element_by_guid(
            user_id,
            status_guid,
            GovernanceStatusIdentifierElement,
            element_guid_parameter_name="statusGUID",
            path="/status-levels/{2}",
            method_name="get_governance_status_identifier",
        )
