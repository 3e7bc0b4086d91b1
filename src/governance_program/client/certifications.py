"""
governance_program.client.certifications

Certification types and the certifications that link them to elements.

Responsibilities:
- Maintain certification type definitions (document id + title identify them).
- Certify and decertify elements, and list the certifications an element holds.
"""

from __future__ import annotations

from governance_program.client.base import DEFINITION_IDENTITY, GovernanceProgramBaseClient
from governance_program.properties.elements import CertificationElement, CertificationTypeElement
from governance_program.properties.governance import (
    CertificationProperties,
    CertificationTypeProperties,
    GovernanceDefinitionStatus,
)

CERTIFICATION_RELATIONSHIP = "Certification"


class CertificationManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_certification_type(
        self,
        user_id: str,
        properties: CertificationTypeProperties | None,
        initial_status: GovernanceDefinitionStatus | None = None,
    ) -> str | None:
        """
        Create a certification type and return its GUID.

        `documentIdentifier` and `title` must both be set.
        """

        return self._client.create_governance_definition(
            user_id,
            properties,
            initial_status,
            properties_parameter_name="properties",
            path="/certification-types",
            method_name="create_certification_type",
            identity=DEFINITION_IDENTITY,
        )

    def update_certification_type(
        self,
        user_id: str,
        certification_type_guid: str,
        is_merge_update: bool,
        properties: CertificationTypeProperties | None,
    ) -> None:
        """
        Update a certification type.

        With `is_merge_update=False` the stored properties are replaced, so the
        identity fields are required just as on create.
        """

        self._client.update_governance_definition(
            user_id,
            certification_type_guid,
            is_merge_update,
            properties,
            definition_guid_parameter_name="certificationTypeGUID",
            properties_parameter_name="properties",
            path="/certification-types/{2}/update?isMergeUpdate={3}",
            method_name="update_certification_type",
        )

    def delete_certification_type(self, user_id: str, certification_type_guid: str) -> None:
        self._client.remove_element(
            user_id,
            certification_type_guid,
            element_guid_parameter_name="certificationTypeGUID",
            path="/certification-types/{2}/delete",
            method_name="delete_certification_type",
        )

    def get_certification_type_by_guid(
        self, user_id: str, certification_type_guid: str
    ) -> CertificationTypeElement | None:
        return self._client.get_element_by_guid(
            user_id,
            certification_type_guid,
            CertificationTypeElement,
            element_guid_parameter_name="certificationTypeGUID",
            path="/certification-types/{2}",
            method_name="get_certification_type_by_guid",
        )

    def get_certification_type_by_doc_id(
        self, user_id: str, document_identifier: str
    ) -> CertificationTypeElement | None:
        return self._client.get_element_by_name(
            user_id,
            document_identifier,
            CertificationTypeElement,
            name_parameter_name="documentIdentifier",
            path="/certification-types/by-document-id",
            method_name="get_certification_type_by_doc_id",
        )

    def get_certification_types_by_title(
        self, user_id: str, title: str, start_from: int = 0, page_size: int = 0
    ) -> list[CertificationTypeElement]:
        """
        Return the certification types whose title matches `title`.

        `title` may hold wildcards or a regular expression; no match gives an empty list.
        """

        return self._client.find_elements(
            user_id,
            title,
            CertificationTypeElement,
            start_from,
            page_size,
            search_string_parameter_name="title",
            path="/certification-types/by-title",
            method_name="get_certification_types_by_title",
        )

    def get_certification_types_by_domain_id(
        self, user_id: str, domain_identifier: int, start_from: int = 0, page_size: int = 0
    ) -> list[CertificationTypeElement]:
        return self._client.get_elements(
            user_id,
            CertificationTypeElement,
            start_from,
            page_size,
            domain_identifier,
            path="/certification-types/by-domain/{2}",
            method_name="get_certification_types_by_domain_id",
        )

    def certify_element(
        self,
        user_id: str,
        element_guid: str,
        certification_type_guid: str,
        properties: CertificationProperties | None = None,
    ) -> str | None:
        """Certify an element; returns the GUID of the new certification relationship."""

        return self._client.setup_multi_link_relationship(
            user_id,
            element_guid,
            certification_type_guid,
            CERTIFICATION_RELATIONSHIP,
            properties,
            primary_guid_parameter_name="elementGUID",
            secondary_guid_parameter_name="certificationTypeGUID",
            path="/elements/{2}/certification-types/{3}/certify",
            method_name="certify_element",
        )

    def update_certification(
        self,
        user_id: str,
        certification_guid: str,
        is_merge_update: bool,
        properties: CertificationProperties | None,
    ) -> None:
        self._client.update_relationship(
            user_id,
            certification_guid,
            is_merge_update,
            CERTIFICATION_RELATIONSHIP,
            properties,
            relationship_guid_parameter_name="certificationGUID",
            path="/certifications/{2}/update?isMergeUpdate={3}",
            method_name="update_certification",
        )

    def decertify_element(self, user_id: str, certification_guid: str) -> None:
        self._client.clear_relationship_by_guid(
            user_id,
            certification_guid,
            CERTIFICATION_RELATIONSHIP,
            relationship_guid_parameter_name="certificationGUID",
            path="/certifications/{2}/delete",
            method_name="decertify_element",
        )

    def get_certifications(
        self, user_id: str, element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[CertificationElement]:
        return self._client.get_elements_for_guid(
            user_id,
            element_guid,
            CertificationElement,
            start_from,
            page_size,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/certifications",
            method_name="get_certifications",
        )


# --- Module Notes -----------------------------------------------------------
# A certification is a relationship, so it has a GUID of its own; updates and
# removal address it directly rather than by its two ends.
