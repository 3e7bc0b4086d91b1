"""
tests.test_bodies

Wire shape of request envelopes.

Responsibilities:
- Check camelCase aliases, the `class` discriminator and omitted nulls.
- Check the builders never mutate caller-supplied properties.
"""

from __future__ import annotations

from datetime import datetime, timezone

from governance_program.properties import (
    CertificationProperties,
    CertificationTypeProperties,
    GovernanceDefinitionStatus,
    GovernanceMeasurementsProperties,
    GovernanceZoneProperties,
)
from governance_program.rest import bodies


def test_new_governance_definition_body_keeps_subclass_fields() -> None:
    props = CertificationTypeProperties(
        qualified_name="CertificationType:CT-1",
        document_identifier="CT-1",
        title="Data Quality",
        details="Awarded to data sets that pass the quality checks",
    )

    wire = bodies.new_governance_definition_body(props, GovernanceDefinitionStatus.active).to_wire()

    assert wire == {
        "class": "NewGovernanceDefinitionRequestBody",
        "properties": {
            "class": "CertificationTypeProperties",
            "qualifiedName": "CertificationType:CT-1",
            "documentIdentifier": "CT-1",
            "title": "Data Quality",
            "details": "Awarded to data sets that pass the quality checks",
        },
        "initialStatus": "ACTIVE",
    }


def test_anchor_and_merge_flag_use_server_casing() -> None:
    props = GovernanceZoneProperties(qualified_name="Zone:quarantine", zone_name="quarantine")

    created = bodies.new_element_body(props, anchor_guid="anchor-1").to_wire()
    updated = bodies.update_body(props, is_merge_update=False).to_wire()

    assert created["anchorGUID"] == "anchor-1"
    assert "isMergeUpdate" not in created
    assert updated["isMergeUpdate"] is False
    assert "anchorGUID" not in updated


def test_relationship_body_stamps_a_copy() -> None:
    props = CertificationProperties(certificate_guid="cert-001", custodian="erinoverview")

    wire = bodies.relationship_body("Certification", props).to_wire()

    assert wire["properties"]["class"] == "CertificationProperties"
    assert wire["properties"]["typeName"] == "Certification"
    assert wire["properties"]["certificateGUID"] == "cert-001"
    assert props.type_name is None


def test_relationship_bodies_without_properties_still_carry_the_type() -> None:
    assert bodies.relationship_body("GovernedBy").to_wire()["properties"] == {
        "class": "RelationshipProperties",
        "typeName": "GovernedBy",
    }
    assert bodies.relationship_clear_body("ZoneHierarchy").to_wire()["properties"]["typeName"] == "ZoneHierarchy"


def test_classification_bodies() -> None:
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    props = GovernanceMeasurementsProperties(data_collection_start_time=start, counts={"rows": 10})

    wire = bodies.classification_body(props).to_wire()

    assert wire["properties"]["class"] == "GovernanceMeasurementsProperties"
    assert wire["properties"]["counts"] == {"rows": 10}
    assert wire["properties"]["dataCollectionStartTime"].startswith("2024-01-01T00:00:00")
    assert bodies.classification_clear_body().to_wire() == {"class": "ExternalSourceRequestBody"}


def test_search_and_name_bodies_carry_the_parameter_label() -> None:
    assert bodies.search_body(".*Quality.*", "title").to_wire() == {
        "class": "SearchStringRequestBody",
        "searchString": ".*Quality.*",
        "searchStringParameterName": "title",
    }
    assert bodies.name_body("CT-1", "documentIdentifier").to_wire() == {
        "class": "NameRequestBody",
        "name": "CT-1",
        "nameParameterName": "documentIdentifier",
    }


def test_status_and_appointment_bodies() -> None:
    assert bodies.status_body(GovernanceDefinitionStatus.deprecated).to_wire() == {
        "class": "GovernanceDefinitionStatusRequestBody",
        "status": "DEPRECATED",
    }
    assert bodies.appointment_body(None).to_wire() == {"class": "AppointmentRequestBody"}
