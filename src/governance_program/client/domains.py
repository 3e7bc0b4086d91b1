"""
governance_program.client.domains

Governance domains and the sets that group them.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import GovernanceDomainElement, GovernanceDomainSetElement
from governance_program.properties.governance import GovernanceDomainProperties, GovernanceDomainSetProperties

DOMAIN_SET_MEMBERSHIP = "CollectionMembership"


class GovernanceDomainManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    # --- Domain sets -----------------------------------------------------------

    def create_governance_domain_set(
        self, user_id: str, properties: GovernanceDomainSetProperties | None
    ) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/governance-domain-sets",
            method_name="create_governance_domain_set",
        )

    def update_governance_domain_set(
        self,
        user_id: str,
        domain_set_guid: str,
        is_merge_update: bool,
        properties: GovernanceDomainSetProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            domain_set_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="governanceDomainSetGUID",
            properties_parameter_name="properties",
            path="/governance-domain-sets/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_domain_set",
        )

    def remove_governance_domain_set(self, user_id: str, domain_set_guid: str) -> None:
        self._client.remove_element(
            user_id,
            domain_set_guid,
            element_guid_parameter_name="governanceDomainSetGUID",
            path="/governance-domain-sets/{2}/delete",
            method_name="remove_governance_domain_set",
        )

    def find_governance_domain_sets(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDomainSetElement]:
        return self._client.find_elements(
            user_id,
            search_string,
            GovernanceDomainSetElement,
            start_from,
            page_size,
            search_string_parameter_name="searchString",
            path="/governance-domain-sets/by-search-string",
            method_name="find_governance_domain_sets",
        )

    def get_governance_domain_sets_by_name(
        self, user_id: str, name: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDomainSetElement]:
        return self._client.get_elements_by_name(
            user_id,
            name,
            GovernanceDomainSetElement,
            start_from,
            page_size,
            name_parameter_name="name",
            path="/governance-domain-sets/by-name",
            method_name="get_governance_domain_sets_by_name",
        )

    def get_governance_domain_set_by_guid(
        self, user_id: str, domain_set_guid: str
    ) -> GovernanceDomainSetElement | None:
        return self._client.get_element_by_guid(
            user_id,
            domain_set_guid,
            GovernanceDomainSetElement,
            element_guid_parameter_name="governanceDomainSetGUID",
            path="/governance-domain-sets/{2}",
            method_name="get_governance_domain_set_by_guid",
        )

    # --- Domains ---------------------------------------------------------------

    def create_governance_domain(
        self, user_id: str, properties: GovernanceDomainProperties | None
    ) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/governance-domains",
            method_name="create_governance_domain",
        )

    def update_governance_domain(
        self,
        user_id: str,
        domain_guid: str,
        is_merge_update: bool,
        properties: GovernanceDomainProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            domain_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="governanceDomainGUID",
            properties_parameter_name="properties",
            path="/governance-domains/{2}/update?isMergeUpdate={3}",
            method_name="update_governance_domain",
        )

    def delete_governance_domain(self, user_id: str, domain_guid: str) -> None:
        self._client.remove_element(
            user_id,
            domain_guid,
            element_guid_parameter_name="governanceDomainGUID",
            path="/governance-domains/{2}/delete",
            method_name="delete_governance_domain",
        )

    def add_domain_to_set(self, user_id: str, domain_set_guid: str, domain_guid: str) -> None:
        self._client.setup_relationship(
            user_id,
            domain_set_guid,
            domain_guid,
            DOMAIN_SET_MEMBERSHIP,
            primary_guid_parameter_name="governanceDomainSetGUID",
            secondary_guid_parameter_name="governanceDomainGUID",
            path="/governance-domain-sets/{2}/governance-domains/{3}",
            method_name="add_domain_to_set",
        )

    def remove_domain_from_set(self, user_id: str, domain_set_guid: str, domain_guid: str) -> None:
        self._client.clear_relationship(
            user_id,
            domain_set_guid,
            domain_guid,
            DOMAIN_SET_MEMBERSHIP,
            primary_guid_parameter_name="governanceDomainSetGUID",
            secondary_guid_parameter_name="governanceDomainGUID",
            path="/governance-domain-sets/{2}/governance-domains/{3}/delete",
            method_name="remove_domain_from_set",
        )

    def get_governance_domains(
        self, user_id: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDomainElement]:
        return self._client.get_elements(
            user_id,
            GovernanceDomainElement,
            start_from,
            page_size,
            path="/governance-domains",
            method_name="get_governance_domains",
        )

    def find_governance_domains(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDomainElement]:
        return self._client.find_elements(
            user_id,
            search_string,
            GovernanceDomainElement,
            start_from,
            page_size,
            search_string_parameter_name="searchString",
            path="/governance-domains/by-search-string",
            method_name="find_governance_domains",
        )

    def get_sets_for_governance_domain(
        self, user_id: str, domain_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDomainSetElement]:
        return self._client.get_elements_for_guid(
            user_id,
            domain_guid,
            GovernanceDomainSetElement,
            start_from,
            page_size,
            element_guid_parameter_name="governanceDomainGUID",
            path="/governance-domain-sets/by-governance-domains/{2}",
            method_name="get_sets_for_governance_domain",
        )

    def get_governance_domains_by_name(
        self, user_id: str, name: str, start_from: int = 0, page_size: int = 0
    ) -> list[GovernanceDomainElement]:
        return self._client.get_elements_by_name(
            user_id,
            name,
            GovernanceDomainElement,
            start_from,
            page_size,
            name_parameter_name="name",
            path="/governance-domains/by-name",
            method_name="get_governance_domains_by_name",
        )

    def get_governance_domain_by_guid(self, user_id: str, domain_guid: str) -> GovernanceDomainElement | None:
        return self._client.get_element_by_guid(
            user_id,
            domain_guid,
            GovernanceDomainElement,
            element_guid_parameter_name="governanceDomainGUID",
            path="/governance-domains/{2}",
            method_name="get_governance_domain_by_guid",
        )

    def get_governance_domain_by_identifier(
        self, user_id: str, domain_identifier: int
    ) -> GovernanceDomainElement | None:
        # Domain identifiers are plain integers, 0 included; nothing to validate beyond the caller.
        return self._client.get_element(
            user_id,
            GovernanceDomainElement,
            domain_identifier,
            path="/governance-domains/by-identifier/{2}",
            method_name="get_governance_domain_by_identifier",
        )
