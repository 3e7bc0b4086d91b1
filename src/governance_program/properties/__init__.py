"""
governance_program.properties

Typed payloads exchanged with the Governance Program OMAS.

Responsibilities:
- Re-export the properties and element types used by the managers.
"""

from governance_program.properties.base import (
    ClassificationProperties,
    ElementClassification,
    ElementHeader,
    ElementStub,
    ElementType,
    OMAGModel,
    ReferenceableProperties,
    RelatedElementStub,
    RelationshipProperties,
)
from governance_program.properties.elements import (
    CertificationElement,
    CertificationTypeElement,
    ExternalReferenceElement,
    GovernanceDefinitionElement,
    GovernanceDefinitionGraph,
    GovernanceDomainElement,
    GovernanceDomainSetElement,
    GovernanceLevelIdentifierElement,
    GovernanceLevelIdentifierSetElement,
    GovernanceMetricElement,
    GovernanceMetricImplementation,
    GovernanceRoleAppointee,
    GovernanceRoleAppointment,
    GovernanceRoleElement,
    GovernanceRoleHistory,
    GovernanceStatusIdentifierElement,
    GovernanceStatusIdentifierSetElement,
    GovernanceZoneDefinition,
    GovernanceZoneElement,
    LicenseElement,
    LicenseTypeElement,
    SubjectAreaDefinition,
    SubjectAreaElement,
)
from governance_program.properties.governance import (
    AssignmentScopeProperties,
    CertificationProperties,
    CertificationTypeProperties,
    ExternalReferenceLinkProperties,
    ExternalReferenceProperties,
    GovernanceDefinitionMetricProperties,
    GovernanceDefinitionProperties,
    GovernanceDefinitionScopeProperties,
    GovernanceDefinitionStatus,
    GovernanceDomainProperties,
    GovernanceDomainSetProperties,
    GovernanceExpectationsProperties,
    GovernanceLevelIdentifierProperties,
    GovernanceLevelIdentifierSetProperties,
    GovernanceMeasurementsDataSetProperties,
    GovernanceMeasurementsProperties,
    GovernanceMetricProperties,
    GovernanceResultsProperties,
    GovernanceRoleProperties,
    GovernanceStatusIdentifierProperties,
    GovernanceStatusIdentifierSetProperties,
    GovernanceZoneProperties,
    LicenseProperties,
    LicenseTypeProperties,
    PeerDefinitionProperties,
    ResourceListProperties,
    StakeholderProperties,
    SubjectAreaClassificationProperties,
    SubjectAreaProperties,
    SupportingDefinitionProperties,
)

__all__ = [
    "AssignmentScopeProperties",
    "CertificationElement",
    "CertificationProperties",
    "CertificationTypeElement",
    "CertificationTypeProperties",
    "ClassificationProperties",
    "ElementClassification",
    "ElementHeader",
    "ElementStub",
    "ElementType",
    "ExternalReferenceElement",
    "ExternalReferenceLinkProperties",
    "ExternalReferenceProperties",
    "GovernanceDefinitionElement",
    "GovernanceDefinitionGraph",
    "GovernanceDefinitionMetricProperties",
    "GovernanceDefinitionProperties",
    "GovernanceDefinitionScopeProperties",
    "GovernanceDefinitionStatus",
    "GovernanceDomainElement",
    "GovernanceDomainProperties",
    "GovernanceDomainSetElement",
    "GovernanceDomainSetProperties",
    "GovernanceExpectationsProperties",
    "GovernanceLevelIdentifierElement",
    "GovernanceLevelIdentifierProperties",
    "GovernanceLevelIdentifierSetElement",
    "GovernanceLevelIdentifierSetProperties",
    "GovernanceMeasurementsDataSetProperties",
    "GovernanceMeasurementsProperties",
    "GovernanceMetricElement",
    "GovernanceMetricImplementation",
    "GovernanceMetricProperties",
    "GovernanceResultsProperties",
    "GovernanceRoleAppointee",
    "GovernanceRoleAppointment",
    "GovernanceRoleElement",
    "GovernanceRoleHistory",
    "GovernanceRoleProperties",
    "GovernanceStatusIdentifierElement",
    "GovernanceStatusIdentifierProperties",
    "GovernanceStatusIdentifierSetElement",
    "GovernanceStatusIdentifierSetProperties",
    "GovernanceZoneDefinition",
    "GovernanceZoneElement",
    "GovernanceZoneProperties",
    "LicenseElement",
    "LicenseProperties",
    "LicenseTypeElement",
    "LicenseTypeProperties",
    "OMAGModel",
    "PeerDefinitionProperties",
    "ReferenceableProperties",
    "RelatedElementStub",
    "RelationshipProperties",
    "ResourceListProperties",
    "StakeholderProperties",
    "SubjectAreaClassificationProperties",
    "SubjectAreaDefinition",
    "SubjectAreaElement",
    "SubjectAreaProperties",
    "SupportingDefinitionProperties",
]
