"""
governance_program.client.external_references

External references: links to documents, standards and web resources that
sit outside the metadata server.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.properties.elements import ExternalReferenceElement
from governance_program.properties.governance import ExternalReferenceLinkProperties, ExternalReferenceProperties

EXTERNAL_REFERENCE_LINK = "ExternalReferenceLink"


class ExternalReferenceManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_external_reference(
        self,
        user_id: str,
        properties: ExternalReferenceProperties | None,
        anchor_guid: str | None = None,
    ) -> str | None:
        """
        Create an external reference and return its GUID.

        With `anchor_guid` the reference is owned by that element and is deleted
        along with it.
        """

        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/external-references",
            method_name="create_external_reference",
            anchor_guid=anchor_guid,
            anchor_guid_parameter_name="anchorGUID" if anchor_guid is not None else None,
        )

    def update_external_reference(
        self,
        user_id: str,
        external_reference_guid: str,
        is_merge_update: bool,
        properties: ExternalReferenceProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            external_reference_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="externalReferenceGUID",
            properties_parameter_name="properties",
            path="/external-references/{2}/update?isMergeUpdate={3}",
            method_name="update_external_reference",
        )

    def delete_external_reference(self, user_id: str, external_reference_guid: str) -> None:
        self._client.remove_element(
            user_id,
            external_reference_guid,
            element_guid_parameter_name="externalReferenceGUID",
            path="/external-references/{2}/delete",
            method_name="delete_external_reference",
        )

    def link_external_reference_to_element(
        self,
        user_id: str,
        attached_to_guid: str,
        external_reference_guid: str,
        link_properties: ExternalReferenceLinkProperties | None = None,
    ) -> None:
        self._client.setup_relationship(
            user_id,
            attached_to_guid,
            external_reference_guid,
            EXTERNAL_REFERENCE_LINK,
            link_properties,
            primary_guid_parameter_name="attachedToGUID",
            secondary_guid_parameter_name="externalReferenceGUID",
            path="/elements/{2}/external-references/{3}/link",
            method_name="link_external_reference_to_element",
        )

    def unlink_external_reference_from_element(
        self, user_id: str, attached_to_guid: str, external_reference_guid: str
    ) -> None:
        self._client.clear_relationship(
            user_id,
            attached_to_guid,
            external_reference_guid,
            EXTERNAL_REFERENCE_LINK,
            primary_guid_parameter_name="attachedToGUID",
            secondary_guid_parameter_name="externalReferenceGUID",
            path="/elements/{2}/external-references/{3}/unlink",
            method_name="unlink_external_reference_from_element",
        )

    def find_external_references(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> list[ExternalReferenceElement]:
        return self._client.find_elements(
            user_id,
            search_string,
            ExternalReferenceElement,
            start_from,
            page_size,
            search_string_parameter_name="searchString",
            path="/external-references/by-search-string",
            method_name="find_external_references",
        )

    def get_external_references_by_name(
        self, user_id: str, name: str, start_from: int = 0, page_size: int = 0
    ) -> list[ExternalReferenceElement]:
        return self._client.get_elements_by_name(
            user_id,
            name,
            ExternalReferenceElement,
            start_from,
            page_size,
            name_parameter_name="name",
            path="/external-references/by-name",
            method_name="get_external_references_by_name",
        )

    def retrieve_attached_external_references(
        self, user_id: str, attached_to_guid: str, start_from: int = 0, page_size: int = 0
    ) -> list[ExternalReferenceElement]:
        return self._client.get_elements_for_guid(
            user_id,
            attached_to_guid,
            ExternalReferenceElement,
            start_from,
            page_size,
            element_guid_parameter_name="attachedToGUID",
            path="/elements/{2}/external-references",
            method_name="retrieve_attached_external_references",
        )

    def get_external_reference_by_guid(
        self, user_id: str, external_reference_guid: str
    ) -> ExternalReferenceElement | None:
        return self._client.get_element_by_guid(
            user_id,
            external_reference_guid,
            ExternalReferenceElement,
            element_guid_parameter_name="externalReferenceGUID",
            path="/external-references/{2}",
            method_name="get_external_reference_by_guid",
        )


# --- Module Notes -----------------------------------------------------------
# The update path addresses the reference by GUID and carries the merge flag
# as a query parameter, matching every other update in the package.
