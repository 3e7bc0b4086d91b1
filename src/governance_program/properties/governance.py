"""
governance_program.properties.governance

Properties types for the governance concepts managed through this client.

Responsibilities:
- Describe the payload of each governance element, relationship and classification.
"""

from __future__ import annotations

import enum
from datetime import datetime

from governance_program.properties.base import (
    ClassificationProperties,
    ReferenceableProperties,
    RelationshipProperties,
)


class GovernanceDefinitionStatus(enum.StrEnum):
    # Lifecycle of a governance definition; values are sent as-is to the server.
    draft = "DRAFT"
    proposed = "PROPOSED"
    approved = "APPROVED"
    active = "ACTIVE"
    deprecated = "DEPRECATED"
    other = "OTHER"


# Governance definitions ---------------------------------------------------


class GovernanceDefinitionProperties(ReferenceableProperties):
    document_identifier: str | None = None
    title: str | None = None
    summary: str | None = None
    description: str | None = None
    scope: str | None = None
    domain_identifier: int = 0
    priority: str | None = None
    implications: list[str] | None = None
    outcomes: list[str] | None = None
    results: list[str] | None = None


class CertificationTypeProperties(GovernanceDefinitionProperties):
    details: str | None = None


class LicenseTypeProperties(GovernanceDefinitionProperties):
    details: str | None = None


class CertificationProperties(RelationshipProperties):
    certificate_guid: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    conditions: str | None = None
    certified_by: str | None = None
    certified_by_type_name: str | None = None
    custodian: str | None = None
    recipient: str | None = None
    notes: str | None = None


class LicenseProperties(RelationshipProperties):
    license_guid: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    conditions: str | None = None
    licensed_by: str | None = None
    licensed_by_type_name: str | None = None
    custodian: str | None = None
    licensee: str | None = None
    notes: str | None = None


class PeerDefinitionProperties(RelationshipProperties):
    description: str | None = None


class SupportingDefinitionProperties(RelationshipProperties):
    rationale: str | None = None


# Governance domains -------------------------------------------------------


class GovernanceDomainSetProperties(ReferenceableProperties):
    display_name: str | None = None
    description: str | None = None


class GovernanceDomainProperties(ReferenceableProperties):
    domain_identifier: int = 0
    display_name: str | None = None
    description: str | None = None


# Governance roles ---------------------------------------------------------


class GovernanceRoleProperties(ReferenceableProperties):
    role_id: str | None = None
    title: str | None = None
    description: str | None = None
    scope: str | None = None
    domain_identifier: int = 0
    head_count_limit_set: bool = False
    head_count: int = 1


# Governance metrics -------------------------------------------------------


class GovernanceMetricProperties(ReferenceableProperties):
    display_name: str | None = None
    description: str | None = None
    measurement: str | None = None
    target: str | None = None


class GovernanceDefinitionMetricProperties(RelationshipProperties):
    rationale: str | None = None


class GovernanceResultsProperties(RelationshipProperties):
    query: str | None = None
    query_type: str | None = None


class GovernanceMeasurementsDataSetProperties(ClassificationProperties):
    description: str | None = None


class GovernanceExpectationsProperties(ClassificationProperties):
    counts: dict[str, int] | None = None
    values: dict[str, str] | None = None
    flags: dict[str, bool] | None = None


class GovernanceMeasurementsProperties(ClassificationProperties):
    data_collection_start_time: datetime | None = None
    data_collection_end_time: datetime | None = None
    counts: dict[str, int] | None = None
    values: dict[str, str] | None = None
    flags: dict[str, bool] | None = None


# External references ------------------------------------------------------


class ExternalReferenceProperties(ReferenceableProperties):
    reference_title: str | None = None
    reference_abstract: str | None = None
    authors: list[str] | None = None
    url: str | None = None
    version: str | None = None
    organization: str | None = None
    license: str | None = None
    copyright: str | None = None
    attribution: str | None = None
    sources: dict[str, str] | None = None


class ExternalReferenceLinkProperties(RelationshipProperties):
    link_id: str | None = None
    link_description: str | None = None


# Subject areas ------------------------------------------------------------


class SubjectAreaProperties(ReferenceableProperties):
    subject_area_name: str | None = None
    display_name: str | None = None
    description: str | None = None
    usage: str | None = None
    scope: str | None = None
    domain_identifier: int = 0


class SubjectAreaClassificationProperties(ClassificationProperties):
    subject_area_name: str | None = None


# Classification levels and status levels ----------------------------------


class GovernanceLevelIdentifierSetProperties(ReferenceableProperties):
    # Name of the governance classification (Confidentiality, Criticality ...) the set describes.
    associated_resource: str | None = None
    display_name: str | None = None
    description: str | None = None
    domain_identifier: int = 0


class GovernanceLevelIdentifierProperties(ReferenceableProperties):
    identifier: int = 0
    display_name: str | None = None
    description: str | None = None


class GovernanceStatusIdentifierSetProperties(ReferenceableProperties):
    display_name: str | None = None
    description: str | None = None
    domain_identifier: int = 0


class GovernanceStatusIdentifierProperties(ReferenceableProperties):
    identifier: int = 0
    display_name: str | None = None
    description: str | None = None


# Governance zones ---------------------------------------------------------


class GovernanceZoneProperties(ReferenceableProperties):
    zone_name: str | None = None
    display_name: str | None = None
    description: str | None = None
    criteria: str | None = None
    scope: str | None = None
    domain_identifier: int = 0


# Related elements ---------------------------------------------------------


class AssignmentScopeProperties(RelationshipProperties):
    assignment_type: str | None = None
    description: str | None = None


class StakeholderProperties(RelationshipProperties):
    stakeholder_role: str | None = None


class ResourceListProperties(RelationshipProperties):
    resource_use: str | None = None
    watch_resource: bool = False


class GovernanceDefinitionScopeProperties(RelationshipProperties):
    rationale: str | None = None


# --- Module Notes -----------------------------------------------------------
# Class names are part of the wire contract (see OMAGModel); renaming a class
# here changes the `class` value the server receives.
