"""
governance_program.client.related_elements

Relationships between governance elements and the rest of the metadata graph.

Responsibilities:
- Set up and clear the generic governance relationships (more information,
  governed by, scopes, responsibility assignments, stakeholders, assignment
  scopes and resource lists).
- Navigate each relationship from either end.
"""

from __future__ import annotations

from typing import TypeVar

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.base import RelatedElementStub, RelationshipProperties
from governance_program.properties.elements import GovernanceDefinitionElement, GovernanceRoleElement
from governance_program.properties.governance import (
    AssignmentScopeProperties,
    GovernanceDefinitionScopeProperties,
    ResourceListProperties,
    StakeholderProperties,
)

E = TypeVar("E")

PREFIX = "/related-elements"


class RelatedElementsManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def _setup(
        self,
        user_id: str,
        primary_guid: str,
        primary_guid_parameter_name: str,
        secondary_guid: str,
        secondary_guid_parameter_name: str,
        relationship_type_name: str | None,
        properties: RelationshipProperties | None,
        relationship: str,
        method_name: str,
    ) -> None:
        self._client.setup_relationship(
            user_id,
            primary_guid,
            secondary_guid,
            relationship_type_name,
            properties,
            primary_guid_parameter_name=primary_guid_parameter_name,
            secondary_guid_parameter_name=secondary_guid_parameter_name,
            path=f"{PREFIX}/{{2}}/{relationship}/{{3}}",
            method_name=method_name,
        )

    def _clear(
        self,
        user_id: str,
        primary_guid: str,
        primary_guid_parameter_name: str,
        secondary_guid: str,
        secondary_guid_parameter_name: str,
        relationship_type_name: str | None,
        relationship: str,
        method_name: str,
    ) -> None:
        self._client.clear_relationship(
            user_id,
            primary_guid,
            secondary_guid,
            relationship_type_name,
            primary_guid_parameter_name=primary_guid_parameter_name,
            secondary_guid_parameter_name=secondary_guid_parameter_name,
            path=f"{PREFIX}/{{2}}/{relationship}/{{3}}/delete",
            method_name=method_name,
        )

    def _related(
        self,
        user_id: str,
        element_guid: str,
        element_guid_parameter_name: str,
        element_type: type[E],
        query: str,
        start_from: int,
        page_size: int,
        method_name: str,
    ) -> list[E]:
        return self._client.get_elements_for_guid(
            user_id,
            element_guid,
            element_type,
            start_from,
            page_size,
            element_guid_parameter_name=element_guid_parameter_name,
            path=f"{PREFIX}/{query}/{{2}}",
            method_name=method_name,
        )

    # --- MoreInformation -------------------------------------------------------

    def setup_more_information(
        self,
        user_id: str,
        element_guid: str,
        detail_guid: str,
        properties: RelationshipProperties | None = None,
    ) -> None:
        """Link a descriptive element to another element that describes it in more detail."""

        self._setup(
            user_id, element_guid, "elementGUID", detail_guid, "detailGUID",
            None, properties, "more-information", "setup_more_information",
        )

    def clear_more_information(self, user_id: str, element_guid: str, detail_guid: str) -> None:
        self._clear(
            user_id, element_guid, "elementGUID", detail_guid, "detailGUID",
            None, "more-information", "clear_more_information",
        )

    def get_more_information(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, element_guid, "elementGUID", RelatedElementStub,
            "more-information/by-descriptive-element", start_from, page_size, "get_more_information",
        )

    def get_descriptive_elements(
        self, user_id: str, detail_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, detail_guid, "detailGUID", RelatedElementStub,
            "more-information/by-detail-element", start_from, page_size, "get_descriptive_elements",
        )

    # --- GovernedBy ------------------------------------------------------------

    def setup_governed_by(
        self,
        user_id: str,
        element_guid: str,
        governance_definition_guid: str,
        properties: RelationshipProperties | None = None,
    ) -> None:
        self._setup(
            user_id, element_guid, "elementGUID", governance_definition_guid, "governanceDefinitionGUID",
            "GovernedBy", properties, "governed-by", "setup_governed_by",
        )

    def clear_governed_by(self, user_id: str, element_guid: str, governance_definition_guid: str) -> None:
        self._clear(
            user_id, element_guid, "elementGUID", governance_definition_guid, "governanceDefinitionGUID",
            "GovernedBy", "governed-by", "clear_governed_by",
        )

    def get_governance_definitions_for_element(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDefinitionElement]:
        return self._related(
            user_id, element_guid, "elementGUID", GovernanceDefinitionElement,
            "governed-by/by-element", start_from, page_size, "get_governance_definitions_for_element",
        )

    def get_governed_elements(
        self, user_id: str, governance_definition_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, governance_definition_guid, "governanceDefinitionGUID", RelatedElementStub,
            "governed-by/by-governance-definition", start_from, page_size, "get_governed_elements",
        )

    # --- GovernanceDefinitionScope ---------------------------------------------

    def setup_governance_definition_scope(
        self,
        user_id: str,
        governance_definition_guid: str,
        scope_guid: str,
        properties: GovernanceDefinitionScopeProperties | None = None,
    ) -> None:
        self._setup(
            user_id, governance_definition_guid, "governanceDefinitionGUID", scope_guid, "scopeGUID",
            None, properties, "governance-definition-scopes",
            "setup_governance_definition_scope",
        )

    def clear_governance_definition_scope(
        self, user_id: str, governance_definition_guid: str, scope_guid: str
    ) -> None:
        self._clear(
            user_id, governance_definition_guid, "governanceDefinitionGUID", scope_guid, "scopeGUID",
            "GovernanceDefinitionScope", "governance-definition-scopes", "clear_governance_definition_scope",
        )

    def get_governance_definition_scopes(
        self, user_id: str, governance_definition_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, governance_definition_guid, "governanceDefinitionGUID", RelatedElementStub,
            "governance-definition-scopes/by-governance-definition", start_from, page_size,
            "get_governance_definition_scopes",
        )

    def get_scoped_governance_definitions(
        self, user_id: str, scope_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDefinitionElement]:
        return self._related(
            user_id, scope_guid, "scopeGUID", GovernanceDefinitionElement,
            "governance-definition-scopes/by-scope", start_from, page_size,
            "get_scoped_governance_definitions",
        )

    # --- GovernanceResponsibilityAssignment ------------------------------------

    def setup_governance_responsibility_assignment(
        self,
        user_id: str,
        governance_responsibility_guid: str,
        person_role_guid: str,
        properties: RelationshipProperties | None = None,
    ) -> None:
        self._setup(
            user_id, governance_responsibility_guid, "governanceResponsibilityGUID",
            person_role_guid, "personRoleGUID",
            None, properties, "governance-responsibility-assignments",
            "setup_governance_responsibility_assignment",
        )

    def clear_governance_responsibility_assignment(
        self, user_id: str, governance_responsibility_guid: str, person_role_guid: str
    ) -> None:
        self._clear(
            user_id, governance_responsibility_guid, "governanceResponsibilityGUID",
            person_role_guid, "personRoleGUID",
            "GovernanceResponsibilityAssignment", "governance-responsibility-assignments",
            "clear_governance_responsibility_assignment",
        )

    def get_responsible_roles(
        self, user_id: str, governance_responsibility_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceRoleElement]:
        return self._related(
            user_id, governance_responsibility_guid, "governanceResponsibilityGUID", GovernanceRoleElement,
            "governance-responsibility-assignments/by-responsibility", start_from, page_size,
            "get_responsible_roles",
        )

    def get_role_responsibilities(
        self, user_id: str, person_role_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDefinitionElement]:
        return self._related(
            user_id, person_role_guid, "personRoleGUID", GovernanceDefinitionElement,
            "governance-responsibility-assignments/by-role", start_from, page_size,
            "get_role_responsibilities",
        )

    # --- Stakeholder -----------------------------------------------------------

    def setup_stakeholder(
        self,
        user_id: str,
        element_guid: str,
        stakeholder_guid: str,
        properties: StakeholderProperties | None = None,
    ) -> None:
        self._setup(
            user_id, element_guid, "elementGUID", stakeholder_guid, "stakeholderGUID",
            "Stakeholder", properties, "stakeholders", "setup_stakeholder",
        )

    def clear_stakeholder(self, user_id: str, element_guid: str, stakeholder_guid: str) -> None:
        self._clear(
            user_id, element_guid, "elementGUID", stakeholder_guid, "stakeholderGUID",
            "Stakeholder", "stakeholders", "clear_stakeholder",
        )

    def get_stakeholders(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, element_guid, "elementGUID", RelatedElementStub,
            "stakeholders/by-commissioned-element", start_from, page_size, "get_stakeholders",
        )

    def get_stakeholder_commissioned_elements(
        self, user_id: str, stakeholder_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, stakeholder_guid, "stakeholderGUID", RelatedElementStub,
            "stakeholders/by-stakeholder", start_from, page_size, "get_stakeholder_commissioned_elements",
        )

    # --- AssignmentScope -------------------------------------------------------

    def setup_assignment_scope(
        self,
        user_id: str,
        element_guid: str,
        scope_guid: str,
        properties: AssignmentScopeProperties | None = None,
    ) -> None:
        self._setup(
            user_id, element_guid, "elementGUID", scope_guid, "scopeGUID",
            None, properties, "assignment-scopes", "setup_assignment_scope",
        )

    def clear_assignment_scope(self, user_id: str, element_guid: str, scope_guid: str) -> None:
        self._clear(
            user_id, element_guid, "elementGUID", scope_guid, "scopeGUID",
            None, "assignment-scopes", "clear_assignment_scope",
        )

    def get_assigned_scopes(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, element_guid, "elementGUID", RelatedElementStub,
            "assignment-scopes/by-assigned-actor", start_from, page_size, "get_assigned_scopes",
        )

    def get_assigned_actors(
        self, user_id: str, scope_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, scope_guid, "scopeGUID", RelatedElementStub,
            "assignment-scopes/by-assigned-scope", start_from, page_size, "get_assigned_actors",
        )

    # --- ResourceList ----------------------------------------------------------

    def setup_resource(
        self,
        user_id: str,
        element_guid: str,
        resource_guid: str,
        properties: ResourceListProperties | None = None,
    ) -> None:
        self._setup(
            user_id, element_guid, "elementGUID", resource_guid, "resourceGUID",
            None, properties, "resource-list", "setup_resource",
        )

    def clear_resource(self, user_id: str, element_guid: str, resource_guid: str) -> None:
        self._clear(
            user_id, element_guid, "elementGUID", resource_guid, "resourceGUID",
            None, "resource-list", "clear_resource",
        )

    def get_resource_list(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, element_guid, "elementGUID", RelatedElementStub,
            "resource-list/by-assignee", start_from, page_size, "get_resource_list",
        )

    def get_supported_by_resource(
        self, user_id: str, resource_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[RelatedElementStub]:
        return self._related(
            user_id, resource_guid, "resourceGUID", RelatedElementStub,
            "resource-list/by-resource", start_from, page_size, "get_supported_by_resource",
        )


# --- Module Notes -----------------------------------------------------------
# Every relationship here links exactly one pair of elements, so setup and
# clear address it by its two ends rather than by a relationship GUID.
# Calls that pass None as the type name leave the relationship type to the
# server, which derives it from the URL.
