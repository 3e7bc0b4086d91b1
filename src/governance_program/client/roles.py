"""
governance_program.client.roles

Governance roles and the people appointed to them.

Responsibilities:
- Maintain governance role definitions.
- Appoint people (via their personal profile) to roles and relieve them.
- Report role history and the current appointments in a domain.
"""

from __future__ import annotations

from datetime import datetime

from governance_program.client.base import GovernanceProgramBaseClient, Identity
from governance_program.properties.elements import (
    GovernanceRoleAppointment,
    GovernanceRoleElement,
    GovernanceRoleHistory,
)
from governance_program.properties.governance import GovernanceRoleProperties
from governance_program.rest.bodies import appointment_body
from governance_program.rest.responses import unwrap_guid, unwrap_void

# A new role is keyed by its qualified name; a full replace must restate the role id.
CREATE_IDENTITY: Identity = (("qualified_name", "qualifiedName"), ("title", "title"))
REPLACE_IDENTITY: Identity = (("role_id", "roleId"), ("title", "title"))


class GovernanceRoleManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_governance_role(self, user_id: str, properties: GovernanceRoleProperties | None) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/governance-roles",
            method_name="create_governance_role",
            identity=CREATE_IDENTITY,
        )

    def update_governance_role(
        self,
        user_id: str,
        governance_role_guid: str,
        is_merge_update: bool,
        properties: GovernanceRoleProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            governance_role_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="governanceRoleGUID",
            properties_parameter_name="properties",
            path="/governance-roles/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_role",
            identity=REPLACE_IDENTITY,
        )

    def remove_governance_role(self, user_id: str, governance_role_guid: str) -> None:
        self._client.remove_element(
            user_id,
            governance_role_guid,
            element_guid_parameter_name="governanceRoleGUID",
            path="/governance-roles/{2}/delete",
            method_name="remove_governance_role",
        )

    def get_governance_role_by_guid(self, user_id: str, governance_role_guid: str) -> GovernanceRoleElement | None:
        return self._client.get_element_by_guid(
            user_id,
            governance_role_guid,
            GovernanceRoleElement,
            element_guid_parameter_name="governanceRoleGUID",
            path="/governance-roles/{2}",
            method_name="get_governance_role_by_guid",
        )

    def get_governance_roles_by_role_id(
        self, user_id: str, role_id: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceRoleElement]:
        return self._client.get_elements_by_name(
            user_id,
            role_id,
            GovernanceRoleElement,
            start_from,
            page_size,
            name_parameter_name="roleId",
            path="/governance-roles/by-role-id",
            method_name="get_governance_roles_by_role_id",
        )

    def get_governance_roles_for_domain(
        self, user_id: str, domain_identifier: int, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceRoleElement]:
        return self._client.get_elements(
            user_id,
            GovernanceRoleElement,
            start_from,
            page_size,
            domain_identifier,
            path="/governance-roles/by-domain/{2}",
            method_name="get_governance_roles_for_domain",
        )

    def find_governance_roles_by_title(
        self, user_id: str, title: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceRoleElement]:
        return self._client.find_elements(
            user_id,
            title,
            GovernanceRoleElement,
            start_from,
            page_size,
            search_string_parameter_name="title",
            path="/governance-roles/by-title",
            method_name="find_governance_roles_by_title",
        )

    def get_governance_role_history_by_guid(
        self, user_id: str, governance_role_guid: str
    ) -> GovernanceRoleHistory | None:
        """Return the role with its predecessors, successors and every appointee past and present."""

        return self._client.get_element_by_guid(
            user_id,
            governance_role_guid,
            GovernanceRoleHistory,
            element_guid_parameter_name="governanceRoleGUID",
            path="/governance-roles/{2}/history",
            method_name="get_governance_role_history_by_guid",
        )

    def get_current_governance_role_appointments(
        self, user_id: str, domain_identifier: int, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceRoleAppointment]:
        return self._client.get_elements(
            user_id,
            GovernanceRoleAppointment,
            start_from,
            page_size,
            domain_identifier,
            path="/governance-roles/by-domain/{2}/current-appointments",
            method_name="get_current_governance_role_appointments",
        )

    def appoint_governance_role(
        self,
        user_id: str,
        governance_role_guid: str,
        profile_guid: str,
        effective_time: datetime | None = None,
    ) -> str | None:
        """
        Appoint the person behind `profile_guid` to a role.

        Returns the GUID of the appointment, which is needed to relieve the
        person later. The server rejects a second appointment for the same
        appointment id with `AppointmentIdNotUniqueError`.
        """

        method_name = "appoint_governance_role"
        handler = self._client.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(governance_role_guid, "governanceRoleGUID", method_name)
        handler.validate_guid(profile_guid, "profileGUID", method_name)

        response = self._client.rest_client.call_guid_post(
            method_name,
            self._client.template("/governance-roles/{2}/appoint/{3}"),
            appointment_body(effective_time),
            self._client.server_name,
            user_id,
            governance_role_guid,
            profile_guid,
        )
        return unwrap_guid(response)

    def relieve_governance_role(
        self,
        user_id: str,
        governance_role_guid: str,
        profile_guid: str,
        appointment_guid: str,
        effective_time: datetime | None = None,
    ) -> None:
        method_name = "relieve_governance_role"
        handler = self._client.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(governance_role_guid, "governanceRoleGUID", method_name)
        handler.validate_guid(profile_guid, "profileGUID", method_name)
        handler.validate_guid(appointment_guid, "appointmentGUID", method_name)

        response = self._client.rest_client.call_void_post(
            method_name,
            self._client.template("/governance-roles/{2}/relieve/{3}/appointments/{4}"),
            appointment_body(effective_time),
            self._client.server_name,
            user_id,
            governance_role_guid,
            profile_guid,
            appointment_guid,
        )
        unwrap_void(response)


# --- Module Notes -----------------------------------------------------------
# Appointments are dated relationships: ending one sets its end time rather
# than deleting it, so history keeps every past appointee.
