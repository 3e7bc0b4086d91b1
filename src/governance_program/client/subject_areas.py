"""
governance_program.client.subject_areas

Subject areas: named collections of related data, arranged in a hierarchy,
with elements classified as their members.
"""

from __future__ import annotations

from governance_program.client.base import GovernanceProgramBaseClient, Identity
from governance_program.properties.base import ElementStub
from governance_program.properties.elements import SubjectAreaDefinition, SubjectAreaElement
from governance_program.properties.governance import SubjectAreaClassificationProperties, SubjectAreaProperties

SUBJECT_AREA_HIERARCHY = "SubjectAreaHierarchy"

IDENTITY: Identity = (("qualified_name", "qualifiedName"), ("subject_area_name", "subjectAreaName"))


class SubjectAreaManager:
    def __init__(self, client: GovernanceProgramBaseClient) -> None:
        self._client = client

    def create_subject_area(self, user_id: str, properties: SubjectAreaProperties | None) -> str | None:
        return self._client.create_element(
            user_id,
            properties,
            properties_parameter_name="properties",
            path="/subject-areas",
            method_name="create_subject_area",
            identity=IDENTITY,
        )

    def update_subject_area(
        self,
        user_id: str,
        subject_area_guid: str,
        is_merge_update: bool,
        properties: SubjectAreaProperties | None,
    ) -> None:
        self._client.update_element(
            user_id,
            subject_area_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name="subjectAreaGUID",
            properties_parameter_name="properties",
            path="/subject-areas/{2}/update?isMergeUpdate={3}",
            method_name="update_subject_area",
            identity=IDENTITY,
        )

    def delete_subject_area(self, user_id: str, subject_area_guid: str) -> None:
        self._client.remove_element(
            user_id,
            subject_area_guid,
            element_guid_parameter_name="subjectAreaGUID",
            path="/subject-areas/{2}/delete",
            method_name="delete_subject_area",
        )

    def link_subject_areas_in_hierarchy(
        self, user_id: str, parent_subject_area_guid: str, nested_subject_area_guid: str
    ) -> None:
        self._client.setup_relationship(
            user_id,
            parent_subject_area_guid,
            nested_subject_area_guid,
            SUBJECT_AREA_HIERARCHY,
            primary_guid_parameter_name="parentSubjectAreaGUID",
            secondary_guid_parameter_name="nestedSubjectAreaGUID",
            path="/subject-areas/{2}/nested-subject-area/{3}",
            method_name="link_subject_areas_in_hierarchy",
        )

    def unlink_subject_areas_in_hierarchy(
        self, user_id: str, parent_subject_area_guid: str, nested_subject_area_guid: str
    ) -> None:
        self._client.clear_relationship(
            user_id,
            parent_subject_area_guid,
            nested_subject_area_guid,
            SUBJECT_AREA_HIERARCHY,
            primary_guid_parameter_name="parentSubjectAreaGUID",
            secondary_guid_parameter_name="nestedSubjectAreaGUID",
            path="/subject-areas/{2}/nested-subject-area/{3}/delete",
            method_name="unlink_subject_areas_in_hierarchy",
        )

    def get_subject_area_by_guid(self, user_id: str, subject_area_guid: str) -> SubjectAreaElement | None:
        return self._client.get_element_by_guid(
            user_id,
            subject_area_guid,
            SubjectAreaElement,
            element_guid_parameter_name="subjectAreaGUID",
            path="/subject-areas/{2}",
            method_name="get_subject_area_by_guid",
        )

    def get_subject_area_by_name(self, user_id: str, subject_area_name: str) -> SubjectAreaElement | None:
        return self._client.get_element_by_name(
            user_id,
            subject_area_name,
            SubjectAreaElement,
            name_parameter_name="subjectAreaName",
            path="/subject-areas/by-name",
            method_name="get_subject_area_by_name",
        )

    def get_subject_areas_for_domain(
        self, user_id: str, domain_identifier: int, start_from: int = 0, page_size: int = 0
    ) -> list[SubjectAreaElement]:
        return self._client.get_elements(
            user_id,
            SubjectAreaElement,
            start_from,
            page_size,
            domain_identifier,
            path="/subject-areas/by-domain/{2}",
            method_name="get_subject_areas_for_domain",
        )

    def get_subject_area_definition_by_guid(
        self, user_id: str, subject_area_guid: str
    ) -> SubjectAreaDefinition | None:
        return self._client.get_element_by_guid(
            user_id,
            subject_area_guid,
            SubjectAreaDefinition,
            element_guid_parameter_name="subjectAreaGUID",
            path="/subject-areas/{2}/with-definitions",
            method_name="get_subject_area_definition_by_guid",
        )

    def add_element_to_subject_area(self, user_id: str, subject_area_name: str, element_guid: str) -> None:
        """Classify an element as a member of the named subject area."""

        method_name = "add_element_to_subject_area"
        handler = self._client.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(subject_area_name, "subjectAreaName", method_name)
        self._client.set_classification(
            user_id,
            element_guid,
            SubjectAreaClassificationProperties(subject_area_name=subject_area_name),
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/subject-area-membership",
            method_name=method_name,
        )

    def remove_element_from_subject_area(self, user_id: str, element_guid: str) -> None:
        self._client.remove_classification(
            user_id,
            element_guid,
            element_guid_parameter_name="elementGUID",
            path="/elements/{2}/subject-area-membership/remove",
            method_name="remove_element_from_subject_area",
        )

    def get_members_of_subject_area(
        self, user_id: str, subject_area_name: str, start_from: int = 0, page_size: int = 0
    ) -> list[ElementStub]:
        return self._client.get_elements_by_name(
            user_id,
            subject_area_name,
            ElementStub,
            start_from,
            page_size,
            name_parameter_name="subjectAreaName",
            path="/subject-areas/members",
            method_name="get_members_of_subject_area",
        )
