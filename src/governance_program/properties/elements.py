"""
governance_program.properties.elements

Element types returned by the server.

Responsibilities:
- Pair an element header with the typed properties of each governance concept.
- Describe the richer "in context" views (definitions graph, role history, zone definition).
"""

from __future__ import annotations

from datetime import datetime

from governance_program.properties.base import (
    ElementHeader,
    ElementStub,
    OMAGModel,
    RelatedElementStub,
)
from governance_program.properties.governance import (
    CertificationProperties,
    CertificationTypeProperties,
    ExternalReferenceProperties,
    GovernanceDefinitionProperties,
    GovernanceDomainProperties,
    GovernanceDomainSetProperties,
    GovernanceLevelIdentifierProperties,
    GovernanceLevelIdentifierSetProperties,
    GovernanceMetricProperties,
    GovernanceRoleProperties,
    GovernanceStatusIdentifierProperties,
    GovernanceStatusIdentifierSetProperties,
    GovernanceZoneProperties,
    LicenseProperties,
    LicenseTypeProperties,
    SubjectAreaProperties,
)


class GovernanceDefinitionElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceDefinitionProperties | None = None
    related_element: RelatedElementStub | None = None


class GovernanceDefinitionGraph(GovernanceDefinitionElement):
    parents: list[RelatedElementStub] | None = None
    peers: list[RelatedElementStub] | None = None
    children: list[RelatedElementStub] | None = None
    metrics: list[RelatedElementStub] | None = None
    external_references: list[RelatedElementStub] | None = None
    others: list[RelatedElementStub] | None = None


class CertificationTypeElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: CertificationTypeProperties | None = None
    related_element: RelatedElementStub | None = None


class CertificationElement(OMAGModel):
    # The header describes the Certification relationship itself.
    element_header: ElementHeader | None = None
    properties: CertificationProperties | None = None
    certified_element: ElementStub | None = None
    certification_type: ElementStub | None = None


class LicenseTypeElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: LicenseTypeProperties | None = None
    related_element: RelatedElementStub | None = None


class LicenseElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: LicenseProperties | None = None
    licensed_element: ElementStub | None = None
    license_type: ElementStub | None = None


class GovernanceDomainSetElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceDomainSetProperties | None = None


class GovernanceDomainElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceDomainProperties | None = None


class GovernanceRoleElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceRoleProperties | None = None
    related_element: RelatedElementStub | None = None


class GovernanceRoleAppointee(OMAGModel):
    appointment_guid: str | None = None
    element_header: ElementHeader | None = None
    profile: ElementStub | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class GovernanceRoleHistory(GovernanceRoleElement):
    predecessors: list[ElementStub] | None = None
    appointees: list[GovernanceRoleAppointee] | None = None
    successors: list[ElementStub] | None = None


class GovernanceRoleAppointment(GovernanceRoleElement):
    appointees: list[GovernanceRoleAppointee] | None = None


class GovernanceMetricElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceMetricProperties | None = None
    related_element: RelatedElementStub | None = None


class GovernanceMetricImplementation(GovernanceMetricElement):
    measured_definition: ElementStub | None = None
    rationale: str | None = None


class ExternalReferenceElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: ExternalReferenceProperties | None = None
    related_element: RelatedElementStub | None = None


class SubjectAreaElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: SubjectAreaProperties | None = None


class SubjectAreaDefinition(SubjectAreaElement):
    parent_subject_area_guid: str | None = None
    nested_subject_area_guids: list[str] | None = None
    associated_governance_definitions: list[GovernanceDefinitionElement] | None = None


class GovernanceLevelIdentifierElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceLevelIdentifierProperties | None = None


class GovernanceLevelIdentifierSetElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceLevelIdentifierSetProperties | None = None
    identifiers: list[GovernanceLevelIdentifierElement] | None = None


class GovernanceStatusIdentifierElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceStatusIdentifierProperties | None = None


class GovernanceStatusIdentifierSetElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceStatusIdentifierSetProperties | None = None
    identifiers: list[GovernanceStatusIdentifierElement] | None = None


class GovernanceZoneElement(OMAGModel):
    element_header: ElementHeader | None = None
    properties: GovernanceZoneProperties | None = None


class GovernanceZoneDefinition(GovernanceZoneElement):
    parent_governance_zone_guid: str | None = None
    nested_governance_zone_guids: list[str] | None = None
    associated_governance_definitions: list[GovernanceDefinitionElement] | None = None


# --- Module Notes -----------------------------------------------------------
# Every field is optional: servers omit what the caller is not allowed to see.
