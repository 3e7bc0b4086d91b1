"""
governance_program.rest.bodies

Request envelopes and the pure builders that fill them.

Responsibilities:
- Define the request body shape the server expects for each kind of action.
- Build envelopes from properties and flags without validating or doing I/O.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import SerializeAsAny

from governance_program.properties.base import (
    ClassificationProperties,
    OMAGModel,
    ReferenceableProperties,
    RelationshipProperties,
)
from governance_program.properties.governance import GovernanceDefinitionStatus


class ReferenceableRequestBody(OMAGModel):
    properties: SerializeAsAny[ReferenceableProperties] | None = None
    anchor_guid: str | None = None
    is_merge_update: bool | None = None
    external_source_guid: str | None = None
    external_source_name: str | None = None


class NewGovernanceDefinitionRequestBody(OMAGModel):
    properties: SerializeAsAny[ReferenceableProperties] | None = None
    initial_status: GovernanceDefinitionStatus | None = None


class GovernanceDefinitionStatusRequestBody(OMAGModel):
    status: GovernanceDefinitionStatus


class RelationshipRequestBody(OMAGModel):
    properties: SerializeAsAny[RelationshipProperties]
    external_source_guid: str | None = None
    external_source_name: str | None = None


class ClassificationRequestBody(OMAGModel):
    properties: SerializeAsAny[ClassificationProperties] | None = None
    external_source_guid: str | None = None
    external_source_name: str | None = None


class ExternalSourceRequestBody(OMAGModel):
    external_source_guid: str | None = None
    external_source_name: str | None = None


class SearchStringRequestBody(OMAGModel):
    search_string: str
    search_string_parameter_name: str | None = None


class NameRequestBody(OMAGModel):
    name: str
    name_parameter_name: str | None = None


class AppointmentRequestBody(OMAGModel):
    effective_time: datetime | None = None


def new_element_body(
    properties: ReferenceableProperties, *, anchor_guid: str | None = None
) -> ReferenceableRequestBody:
    return ReferenceableRequestBody(properties=properties, anchor_guid=anchor_guid)


def new_governance_definition_body(
    properties: ReferenceableProperties,
    initial_status: GovernanceDefinitionStatus | None = None,
) -> NewGovernanceDefinitionRequestBody:
    return NewGovernanceDefinitionRequestBody(properties=properties, initial_status=initial_status)


def update_body(properties: ReferenceableProperties, *, is_merge_update: bool) -> ReferenceableRequestBody:
    return ReferenceableRequestBody(properties=properties, is_merge_update=is_merge_update)


def status_body(status: GovernanceDefinitionStatus) -> GovernanceDefinitionStatusRequestBody:
    return GovernanceDefinitionStatusRequestBody(status=status)


def relationship_body(
    relationship_type_name: str | None,
    properties: RelationshipProperties | None = None,
) -> RelationshipRequestBody:
    # Copy so the caller's properties object never gets the type name stamped on it.
    if properties is None:
        stamped = RelationshipProperties(type_name=relationship_type_name)
    else:
        stamped = properties.model_copy(update={"type_name": relationship_type_name})
    return RelationshipRequestBody(properties=stamped)


def relationship_clear_body(relationship_type_name: str | None) -> RelationshipRequestBody:
    return RelationshipRequestBody(properties=RelationshipProperties(type_name=relationship_type_name))


def classification_body(properties: ClassificationProperties | None) -> ClassificationRequestBody:
    return ClassificationRequestBody(properties=properties)


def classification_clear_body() -> ExternalSourceRequestBody:
    return ExternalSourceRequestBody()


def search_body(search_string: str, parameter_name: str) -> SearchStringRequestBody:
    return SearchStringRequestBody(search_string=search_string, search_string_parameter_name=parameter_name)


def name_body(name: str, parameter_name: str) -> NameRequestBody:
    return NameRequestBody(name=name, name_parameter_name=parameter_name)


def appointment_body(effective_time: datetime | None) -> AppointmentRequestBody:
    return AppointmentRequestBody(effective_time=effective_time)


# --- Module Notes -----------------------------------------------------------
# SerializeAsAny keeps subclass fields (documentIdentifier, title ...) when a
# properties subtype is stored in a field declared with the base type.
