"""
governance_program.client.licenses

License types and the licenses that grant them to elements.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import LicenseElement, LicenseTypeElement
from governance_program.properties.governance import (
    GovernanceDefinitionStatus,
    LicenseProperties,
    LicenseTypeProperties,
)

LICENSE_RELATIONSHIP = "License"


class LicenseManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_license_type(
        self,
        user_id: str,
        properties: LicenseTypeProperties | None,
        initial_status: GovernanceDefinitionStatus | None = None,
    ) -> str | None:
        return self._client.create_governance_definition(
            user_id,
            properties,
            initial_status,
            properties_parameter_name="properties",
            path="/license-types",
            method_name="create_license_type",
        )

    def update_license_type(
        self,
        user_id: str,
        license_type_guid: str,
        is_merge_update: bool,
        properties: LicenseTypeProperties | None,
    ) -> None:
        self._client.update_governance_definition(
            user_id,
            license_type_guid,
            is_merge_update,
            properties,
            definition_guid_parameter_name="licenseTypeGUID",
            properties_parameter_name="properties",
            path="/license-types/{2}/update?isMergeUpdate={3}",
            method_name="update_license_type",
        )

    def delete_license_type(self, user_id: str, license_type_guid: str) -> None:
        self._client.remove_element(
            user_id,
            license_type_guid,
            element_guid_parameter_name="licenseTypeGUID",
            path="/license-types/{2}/delete",
            method_name="delete_license_type",
        )

    def get_license_type_by_guid(self, user_id: str, license_type_guid: str) -> LicenseTypeElement | None:
        return self._client.get_element_by_guid(
            user_id,
            license_type_guid,
            LicenseTypeElement,
            element_guid_parameter_name="licenseTypeGUID",
            path="/license-types/{2}",
            method_name="get_license_type_by_guid",
        )

    def get_license_type_by_doc_id(self, user_id: str, document_identifier: str) -> LicenseTypeElement | None:
        return self._client.get_element_by_name(
            user_id,
            document_identifier,
            LicenseTypeElement,
            name_parameter_name="documentIdentifier",
            path="/license-types/by-document-id",
            method_name="get_license_type_by_doc_id",
        )

    def get_license_types_by_title(
        self, user_id: str, title: str, start_from: int = 0, page_size: int = 0
    ) -> list[LicenseTypeElement]:
        return self._client.find_elements(
            user_id,
            title,
            LicenseTypeElement,
            start_from,
            page_size,
            search_string_parameter_name="title",
            path="/license-types/by-title",
            method_name="get_license_types_by_title",
        )

    def get_license_types_by_domain_id(
        self, user_id: str, domain_identifier: int, start_from: int = 0, page_size: int = 0
    ) -> list[LicenseTypeElement]:
        return self._client.get_elements(
            user_id,
            LicenseTypeElement,
            start_from,
            page_size,
            domain_identifier,
            path="/license-types/by-domain/{2}",
            method_name="get_license_types_by_domain_id",
        )

    def license_element(
        self,
        user_id: str,
        element_guid: str,
        license_type_guid: str,
        properties: LicenseProperties | None = None,
    ) -> str | None:
        """Grant a license to an element; returns the GUID of the license relationship."""

        return self._client.setup_multi_link_relationship(
            user_id,
            element_guid,
            license_type_guid,
            LICENSE_RELATIONSHIP,
            properties,
            primary_guid_parameter_name="elementGUID",
            secondary_guid_parameter_name="licenseTypeGUID",
            path="/elements/{2}/license-types/{3}/license",
            method_name="license_element",
        )

    def update_license(
        self,
        user_id: str,
        license_guid: str,
        is_merge_update: bool,
        properties: LicenseProperties | None,
    ) -> None:
        self._client.update_relationship(
            user_id,
            license_guid,
            is_merge_update,
            LICENSE_RELATIONSHIP,
            properties,
            relationship_guid_parameter_name="licenseGUID",
            path="/licenses/{2}/update?isMergeUpdate={3}",
            method_name="update_license",
        )

    def unlicense_element(self, user_id: str, license_guid: str) -> None:
        self._client.clear_relationship_by_guid(
            user_id,
            license_guid,
            LICENSE_RELATIONSHIP,
            relationship_guid_parameter_name="licenseGUID",
            path="/licenses/{2}/delete",
            method_name="unlicense_element",
        )

    def get_licenses(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[LicenseElement]:
        return self._client.get_elements_for_guid(
            user_id,
            element_guid,
            LicenseElement,
            start_from,
            page_size,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/licenses",
            method_name="get_licenses",
        )
