"""
governance_program.client.zones

Governance zones: groupings of assets that share access and processing rules.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient, Identity
from governance_program.properties.elements import GovernanceZoneDefinition, GovernanceZoneElement
from governance_program.properties.governance import GovernanceZoneProperties

ZONE_HIERARCHY = "ZoneHierarchy"

IDENTITY: Identity = (("qualified_name", "qualifiedName"), ("zone_name", "zoneName"))


class GovernanceZoneManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_governance_zone(self, user_id: str, properties: GovernanceZoneProperties | None) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/governance-zones",
            method_name="create_governance_zone",
            identity=IDENTITY,
        )

    def update_governance_zone(
        self,
        user_id: str,
        zone_guid: str,
        is_merge_update: bool,
        properties: GovernanceZoneProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            zone_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="zoneGUID",
            properties_parameter_name="properties",
            path="/governance-zones/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_zone",
            identity=IDENTITY,
        )

    def delete_governance_zone(self, user_id: str, zone_guid: str) -> None:
        self._client.remove_element(
            user_id,
            zone_guid,
            element_guid_parameter_name="zoneGUID",
            path="/governance-zones/{2}/delete",
            method_name="delete_governance_zone",
        )

    def link_zones_in_hierarchy(self, user_id: str, parent_zone_guid: str, nested_zone_guid: str) -> None:
        self._client.setup_relationship(
            user_id,
            parent_zone_guid,
            nested_zone_guid,
            ZONE_HIERARCHY,
            primary_guid_parameter_name="parentZoneGUID",
            secondary_guid_parameter_name="nestedZoneGUID",
            path="/governance-zones/{2}/nested-zone/{3}",
            method_name="link_zones_in_hierarchy",
        )

    def unlink_zones_in_hierarchy(self, user_id: str, parent_zone_guid: str, nested_zone_guid: str) -> None:
        self._client.clear_relationship(
            user_id,
            parent_zone_guid,
            nested_zone_guid,
            ZONE_HIERARCHY,
            primary_guid_parameter_name="parentZoneGUID",
            secondary_guid_parameter_name="nestedZoneGUID",
            path="/governance-zones/{2}/nested-zone/{3}/delete",
            method_name="unlink_zones_in_hierarchy",
        )

    def get_governance_zone_by_guid(self, user_id: str, zone_guid: str) -> GovernanceZoneElement | None:
        return self._client.get_element_by_guid(
            user_id,
            zone_guid,
            GovernanceZoneElement,
            element_guid_parameter_name="zoneGUID",
            path="/governance-zones/{2}",
            method_name="get_governance_zone_by_guid",
        )

    def get_governance_zone_by_name(self, user_id: str, zone_name: str) -> GovernanceZoneElement | None:
        return self._client.get_element_by_name(
            user_id,
            zone_name,
            GovernanceZoneElement,
            name_parameter_name="zoneName",
            path="/governance-zones/by-name",
            method_name="get_governance_zone_by_name",
        )

    def get_governance_zones_for_domain(
        self, user_id: str, domain_identifier: int, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceZoneElement]:
        return self._client.get_elements(
            user_id,
            GovernanceZoneElement,
            start_from,
            page_size,
            domain_identifier,
            path="/governance-zones/by-domain/{2}",
            method_name="get_governance_zones_for_domain",
        )

    def get_governance_zone_definition_by_guid(
        self, user_id: str, zone_guid: str
    ) -> GovernanceZoneDefinition | None:
        return self._client.get_element_by_guid(
            user_id,
            zone_guid,
            GovernanceZoneDefinition,
            element_guid_parameter_name="zoneGUID",
            path="/governance-zones/{2}/with-definitions",
            method_name="get_governance_zone_definition_by_guid",
        )
