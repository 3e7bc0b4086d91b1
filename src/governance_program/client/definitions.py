"""
governance_program.client.definitions

Governance definitions (policies, principles, obligations, controls ...) and the
relationships that structure them.

Responsibilities:
- Create, update, re-status and delete governance definitions.
- Link definitions to the definitions that support them and to their peers.
- Retrieve definitions by GUID, document id, domain or search string, and
  with their surrounding graph.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import GovernanceDefinitionElement, GovernanceDefinitionGraph
from governance_program.properties.governance import (
    GovernanceDefinitionProperties,
    GovernanceDefinitionStatus,
    PeerDefinitionProperties,
    SupportingDefinitionProperties,
)


class GovernanceDefinitionManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def _validate_type_name(self, user_id: str, type_name: str, parameter_name: str, method_name: str) -> None:
        handler = self._client.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(type_name, parameter_name, method_name)

    def create_governance_definition(
        self,
        user_id: str,
        properties: GovernanceDefinitionProperties | None,
        initial_status: GovernanceDefinitionStatus | None = None,
    ) -> str | None:
        """
        Create a governance definition and return its GUID.

        The concrete definition type is carried by `properties.type_name`
        (for example "GovernancePrinciple"); the server defaults it when unset.
        """

        return self._client.create_governance_definition(
            user_id,
            properties,
            initial_status,
            properties_parameter_name="properties",
            path="/governance-definitions",
            method_name="create_governance_definition",
        )

    def update_governance_definition(
        self,
        user_id: str,
        definition_guid: str,
        is_merge_update: bool,
        properties: GovernanceDefinitionProperties | None,
    ) -> None:
        self._client.update_governance_definition(
            user_id,
            definition_guid,
            is_merge_update,
            properties,
            definition_guid_parameter_name="definitionGUID",
            properties_parameter_name="properties",
            path="/governance-definitions/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_definition",
        )

    def update_governance_definition_status(
        self,
        user_id: str,
        definition_guid: str,
        new_status: GovernanceDefinitionStatus | None,
    ) -> None:
        self._client.update_governance_definition_status(
            user_id,
            definition_guid,
            new_status,
            definition_guid_parameter_name="definitionGUID",
            status_parameter_name="newStatus",
            method_name="update_governance_definition_status",
        )

    def delete_governance_definition(self, user_id: str, definition_guid: str) -> None:
        self._client.remove_element(
            user_id,
            definition_guid,
            element_guid_parameter_name="definitionGUID",
            path="/governance-definitions/{2}/delete",
            method_name="delete_governance_definition",
        )

    def link_supporting_definition(
        self,
        user_id: str,
        definition_guid: str,
        supporting_definition_guid: str,
        relationship_type_name: str,
        properties: SupportingDefinitionProperties | None = None,
    ) -> None:
        """
        Record that `supporting_definition_guid` implements or refines `definition_guid`.

        `relationship_type_name` names the kind of support, for example
        "GovernanceImplementation" or "GovernancePolicyLink".
        """

        method_name = "link_supporting_definition"
        self._validate_type_name(user_id, relationship_type_name, "relationshipTypeName", method_name)
        self._client.setup_relationship(
            user_id,
            definition_guid,
            supporting_definition_guid,
            relationship_type_name,
            properties,
            primary_guid_parameter_name="definitionGUID",
            secondary_guid_parameter_name="supportingDefinitionGUID",
            path="/governance-definitions/{2}/supporting-definitions/{3}",
            method_name=method_name,
        )

    def unlink_supporting_definition(
        self,
        user_id: str,
        definition_guid: str,
        supporting_definition_guid: str,
        relationship_type_name: str,
    ) -> None:
        method_name = "unlink_supporting_definition"
        self._validate_type_name(user_id, relationship_type_name, "relationshipTypeName", method_name)
        self._client.clear_relationship(
            user_id,
            definition_guid,
            supporting_definition_guid,
            relationship_type_name,
            primary_guid_parameter_name="definitionGUID",
            secondary_guid_parameter_name="supportingDefinitionGUID",
            path="/governance-definitions/{2}/supporting-definitions/{3}/delete",
            method_name=method_name,
        )

    def link_peer_definitions(
        self,
        user_id: str,
        definition_one_guid: str,
        definition_two_guid: str,
        relationship_type_name: str,
        properties: PeerDefinitionProperties | None = None,
    ) -> None:
        method_name = "link_peer_definitions"
        self._validate_type_name(user_id, relationship_type_name, "relationshipTypeName", method_name)
        self._client.setup_relationship(
            user_id,
            definition_one_guid,
            definition_two_guid,
            relationship_type_name,
            properties,
            primary_guid_parameter_name="definitionOneGUID",
            secondary_guid_parameter_name="definitionTwoGUID",
            path="/governance-definitions/{2}/peer-definitions/{3}",
            method_name=method_name,
        )

    def unlink_peer_definitions(
        self,
        user_id: str,
        definition_one_guid: str,
        definition_two_guid: str,
        relationship_type_name: str,
    ) -> None:
        method_name = "unlink_peer_definitions"
        self._validate_type_name(user_id, relationship_type_name, "relationshipTypeName", method_name)
        self._client.clear_relationship(
            user_id,
            definition_one_guid,
            definition_two_guid,
            relationship_type_name,
            primary_guid_parameter_name="definitionOneGUID",
            secondary_guid_parameter_name="definitionTwoGUID",
            path="/governance-definitions/{2}/peer-definitions/{3}/delete",
            method_name=method_name,
        )

    def get_governance_definition_by_guid(
        self, user_id: str, definition_guid: str
    ) -> GovernanceDefinitionElement | None:
        return self._client.get_element_by_guid(
            user_id,
            definition_guid,
            GovernanceDefinitionElement,
            element_guid_parameter_name="definitionGUID",
            path="/governance-definitions/{2}",
            method_name="get_governance_definition_by_guid",
        )

    def get_governance_definition_by_doc_id(
        self, user_id: str, document_identifier: str
    ) -> GovernanceDefinitionElement | None:
        return self._client.get_element_by_name(
            user_id,
            document_identifier,
            GovernanceDefinitionElement,
            name_parameter_name="documentIdentifier",
            path="/governance-definitions/by-document-id",
            method_name="get_governance_definition_by_doc_id",
        )

    def get_governance_definitions_for_domain(
        self,
        user_id: str,
        type_name: str,
        domain_identifier: int,
        start_from: int = 0,
        page_size: int = 0,
    ) -> list[GovernanceDefinitionElement]:
        """Page through the definitions of `type_name` in a governance domain (0 means all domains)."""

        method_name = "get_governance_definitions_for_domain"
        self._validate_type_name(user_id, type_name, "typeName", method_name)
        return self._client.get_elements(
            user_id,
            GovernanceDefinitionElement,
            start_from,
            page_size,
            type_name,
            domain_identifier,
            path="/governance-definitions/{2}/for-domain/{3}",
            method_name=method_name,
        )

    def find_governance_definitions(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDefinitionElement]:
        return self._client.find_elements(
            user_id,
            search_string,
            GovernanceDefinitionElement,
            start_from,
            page_size,
            search_string_parameter_name="searchString",
            path="/governance-definitions/by-search-string",
            method_name="find_governance_definitions",
        )

    def get_governance_definition_in_context(
        self, user_id: str, definition_guid: str
    ) -> GovernanceDefinitionGraph | None:
        return self._client.get_element_by_guid(
            user_id,
            definition_guid,
            GovernanceDefinitionGraph,
            element_guid_parameter_name="definitionGUID",
            path="/governance-definitions/{2}/in-context",
            method_name="get_governance_definition_in_context",
        )
