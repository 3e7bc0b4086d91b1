"""
tests.test_certifications

Contract tests for the certification manager against the in-memory fake server.

Responsibilities:
- Create -> get round trip, updates, deletion of unknown GUIDs and empty searches.
- Decoding of server-side authorization failures.
"""

from __future__ import annotations

import pytest
from fake_server import UNAUTHORIZED_USER

from governance_program.client import GovernanceProgramClient
from governance_program.errors import InvalidParameterError, UserNotAuthorizedError
from governance_program.properties import CertificationTypeElement, CertificationTypeProperties

USER_ID = "garygeeke"


def _certification_type(
    doc_id: str = "CT-1", title: str = "Data Quality", domain_identifier: int = 1
) -> CertificationTypeProperties:
    return CertificationTypeProperties(
        qualified_name=f"CertificationType:{doc_id}",
        document_identifier=doc_id,
        title=title,
        summary="Data sets that pass the quality checks",
        domain_identifier=domain_identifier,
        details="Renewed yearly",
    )


def test_create_certification_type_returns_a_guid(server_client: GovernanceProgramClient) -> None:
    guid = server_client.certifications.create_certification_type(USER_ID, _certification_type())

    assert isinstance(guid, str)
    assert guid


def test_created_certification_type_round_trips(server_client: GovernanceProgramClient) -> None:
    props = _certification_type()
    guid = server_client.certifications.create_certification_type(USER_ID, props)

    element = server_client.certifications.get_certification_type_by_guid(USER_ID, guid)

    assert isinstance(element, CertificationTypeElement)
    assert element.element_header.guid == guid
    assert element.element_header.type.type_name == "CertificationType"
    assert element.properties.document_identifier == props.document_identifier
    assert element.properties.title == props.title
    assert element.properties.qualified_name == props.qualified_name
    assert element.properties.details == "Renewed yearly"


def test_lookup_by_document_id(server_client: GovernanceProgramClient) -> None:
    guid = server_client.certifications.create_certification_type(USER_ID, _certification_type("CT-7", "Privacy"))

    element = server_client.certifications.get_certification_type_by_doc_id(USER_ID, "CT-7")
    missing = server_client.certifications.get_certification_type_by_doc_id(USER_ID, "CT-404")

    assert element.element_header.guid == guid
    assert missing is None


def test_merge_update_keeps_fields_and_full_replace_drops_them(server_client: GovernanceProgramClient) -> None:
    certifications = server_client.certifications
    guid = certifications.create_certification_type(USER_ID, _certification_type())

    certifications.update_certification_type(
        USER_ID, guid, True, CertificationTypeProperties(summary="Reviewed quarterly")
    )
    merged = certifications.get_certification_type_by_guid(USER_ID, guid)
    assert merged.properties.title == "Data Quality"
    assert merged.properties.summary == "Reviewed quarterly"

    certifications.update_certification_type(
        USER_ID, guid, False, CertificationTypeProperties(document_identifier="CT-1", title="Data Quality v2")
    )
    replaced = certifications.get_certification_type_by_guid(USER_ID, guid)
    assert replaced.properties.title == "Data Quality v2"
    assert replaced.properties.summary is None


def test_merge_update_keeps_the_stored_domain(server_client: GovernanceProgramClient) -> None:
    certifications = server_client.certifications
    guid = certifications.create_certification_type(USER_ID, _certification_type(domain_identifier=3))

    certifications.update_certification_type(USER_ID, guid, True, CertificationTypeProperties(summary="Reviewed"))

    merged = certifications.get_certification_type_by_guid(USER_ID, guid)
    assert merged.properties.domain_identifier == 3
    assert merged.properties.summary == "Reviewed"


def test_delete_unknown_certification_type_is_an_invalid_parameter(server_client: GovernanceProgramClient) -> None:
    unknown = "00000000-0000-0000-0000-000000000000"

    with pytest.raises(InvalidParameterError) as exc_info:
        server_client.certifications.delete_certification_type(USER_ID, unknown)

    err = exc_info.value
    assert err.parameter_name == "certificationTypeGUID"
    assert err.related_http_code == 400
    assert unknown in err.message
    assert err.reported_by == "delete_certification_type"


def test_deleted_certification_type_is_gone(server_client: GovernanceProgramClient) -> None:
    guid = server_client.certifications.create_certification_type(USER_ID, _certification_type())
    server_client.certifications.delete_certification_type(USER_ID, guid)

    with pytest.raises(InvalidParameterError):
        server_client.certifications.get_certification_type_by_guid(USER_ID, guid)


def test_title_search_with_no_match_returns_an_empty_list(server_client: GovernanceProgramClient) -> None:
    server_client.certifications.create_certification_type(USER_ID, _certification_type())

    result = server_client.certifications.get_certification_types_by_title(USER_ID, "Nothing Like This")

    assert result == []


def test_title_search_matches_regular_expressions_and_pages(server_client: GovernanceProgramClient) -> None:
    certifications = server_client.certifications
    for n in range(3):
        certifications.create_certification_type(USER_ID, _certification_type(f"CT-{n}", f"Data Quality {n}"))
    certifications.create_certification_type(USER_ID, _certification_type("CT-9", "Privacy"))

    everything = certifications.get_certification_types_by_title(USER_ID, "Data Quality.*")
    first_two = certifications.get_certification_types_by_title(USER_ID, "Data Quality.*", 0, 2)
    rest = certifications.get_certification_types_by_title(USER_ID, "Data Quality.*", 2, 2)

    assert sorted(e.properties.title for e in everything) == ["Data Quality 0", "Data Quality 1", "Data Quality 2"]
    assert len(first_two) == 2
    assert len(rest) == 1


def test_server_side_authorization_failure(server_client: GovernanceProgramClient) -> None:
    with pytest.raises(UserNotAuthorizedError) as exc_info:
        server_client.certifications.create_certification_type(UNAUTHORIZED_USER, _certification_type())

    err = exc_info.value
    assert err.user_id == UNAUTHORIZED_USER
    assert err.related_http_code == 403
    assert err.error_message_id == "OMAG-COMMON-403-001"


def test_requests_carry_a_correlation_id(server_client: GovernanceProgramClient, fake_server) -> None:
    server_client.certifications.get_certification_types_by_title(USER_ID, "x")

    (request,) = fake_server.state.requests
    assert request["headers"]["x-request-id"]
    assert request["path"].endswith("/users/garygeeke/certification-types/by-title")


# --- Module Notes -----------------------------------------------------------
# The fake server covers certification types only; certification relationships
# are checked on the wire in test_managers_wire.py.
