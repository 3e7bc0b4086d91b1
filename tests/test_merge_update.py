"""
tests.test_merge_update

Identity rules: which properties must be present on create and full replace,
and that a merge update may leave them out.
"""

from __future__ import annotations

import json

import httpx
import pytest

from governance_program.client import GovernanceProgramClient
from governance_program.errors import InvalidParameterError
from governance_program.properties.governance import (
    CertificationTypeProperties,
    GovernanceRoleProperties,
    GovernanceZoneProperties,
    SubjectAreaProperties,
)

USER_ID = "garygeeke"
GUID = "9d1f0c2e-3b4a-4c5d-8e6f-7a8b9c0d1e2f"


@pytest.mark.parametrize(
    ("properties", "parameter_name"),
    [
        (CertificationTypeProperties(title="Data Quality"), "documentIdentifier"),
        (CertificationTypeProperties(document_identifier="CT-1"), "title"),
    ],
)
def test_certification_type_needs_document_id_and_title(
    spy_client: GovernanceProgramClient,
    spy: list[httpx.Request],
    properties: CertificationTypeProperties,
    parameter_name: str,
) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        spy_client.certifications.create_certification_type(USER_ID, properties)
    assert exc_info.value.parameter_name == parameter_name

    with pytest.raises(InvalidParameterError) as exc_info:
        spy_client.certifications.update_certification_type(USER_ID, GUID, False, properties)
    assert exc_info.value.parameter_name == parameter_name

    assert spy == []


def test_merge_update_may_omit_identity(spy_client: GovernanceProgramClient, spy: list[httpx.Request]) -> None:
    spy_client.certifications.update_certification_type(
        USER_ID, GUID, True, CertificationTypeProperties(summary="Reviewed quarterly")
    )

    (request,) = spy
    assert request.url.path.endswith(f"/certification-types/{GUID}/update")
    assert request.url.params["isMergeUpdate"] == "true"
    body = json.loads(request.content)
    assert body["isMergeUpdate"] is True
    assert body["properties"] == {
        "class": "CertificationTypeProperties",
        "summary": "Reviewed quarterly",
    }


def test_merge_update_leaves_defaulted_fields_off_the_wire(
    spy_client: GovernanceProgramClient, spy: list[httpx.Request]
) -> None:
    spy_client.roles.update_governance_role(USER_ID, GUID, True, GovernanceRoleProperties(description="Owns the data strategy"))

    (request,) = spy
    assert json.loads(request.content)["properties"] == {
        "class": "GovernanceRoleProperties",
        "description": "Owns the data strategy",
    }


def test_explicit_defaults_are_still_sent(spy_client: GovernanceProgramClient, spy: list[httpx.Request]) -> None:
    spy_client.roles.update_governance_role(
        USER_ID, GUID, True, GovernanceRoleProperties(domain_identifier=0, head_count=1, head_count_limit_set=False)
    )

    (request,) = spy
    properties = json.loads(request.content)["properties"]
    assert properties["domainIdentifier"] == 0
    assert properties["headCount"] == 1
    assert properties["headCountLimitSet"] is False


def test_role_create_and_replace_use_different_keys(
    spy_client: GovernanceProgramClient, spy: list[httpx.Request]
) -> None:
    roles = spy_client.roles

    # Creation is keyed on the qualified name; the role id may follow later.
    roles.create_governance_role(USER_ID, GovernanceRoleProperties(qualified_name="Role:CDO", title="Chief Data Officer"))
    assert len(spy) == 1

    with pytest.raises(InvalidParameterError) as exc_info:
        roles.update_governance_role(
            USER_ID, GUID, False, GovernanceRoleProperties(qualified_name="Role:CDO", title="Chief Data Officer")
        )
    assert exc_info.value.parameter_name == "roleId"

    with pytest.raises(InvalidParameterError) as exc_info:
        roles.create_governance_role(USER_ID, GovernanceRoleProperties(role_id="CDO", title="Chief Data Officer"))
    assert exc_info.value.parameter_name == "qualifiedName"

    roles.update_governance_role(USER_ID, GUID, False, GovernanceRoleProperties(role_id="CDO", title="Chief Data Officer"))
    roles.update_governance_role(USER_ID, GUID, True, GovernanceRoleProperties(head_count=3))
    assert len(spy) == 3


def test_zone_replace_needs_the_zone_name(spy_client: GovernanceProgramClient, spy: list[httpx.Request]) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        spy_client.zones.update_governance_zone(USER_ID, GUID, False, GovernanceZoneProperties(qualified_name="Zone:quarantine"))
    assert exc_info.value.parameter_name == "zoneName"

    spy_client.zones.update_governance_zone(USER_ID, GUID, True, GovernanceZoneProperties(criteria="unverified"))
    assert len(spy) == 1


def test_subject_area_create_needs_its_name(spy_client: GovernanceProgramClient, spy: list[httpx.Request]) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        spy_client.subject_areas.create_subject_area(USER_ID, SubjectAreaProperties(qualified_name="SubjectArea:Marketing"))
    assert exc_info.value.parameter_name == "subjectAreaName"
    assert spy == []

    spy_client.subject_areas.create_subject_area(
        USER_ID, SubjectAreaProperties(qualified_name="SubjectArea:Marketing", subject_area_name="Marketing")
    )
    assert len(spy) == 1
