"""
tests.test_validation

Unit tests for the local parameter checks.
"""

from __future__ import annotations

import pytest

from governance_program.errors import InvalidParameterError
from governance_program.validation import InvalidParameterHandler


@pytest.fixture
def handler() -> InvalidParameterHandler:
    return InvalidParameterHandler(max_page_size=50)


@pytest.mark.parametrize("user_id", [None, ""])
def test_missing_user_id_names_the_parameter(handler: InvalidParameterHandler, user_id: str | None) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_user_id(user_id, "create_certification_type")

    err = exc_info.value
    assert err.parameter_name == "userId"
    assert err.reported_by == "create_certification_type"
    assert err.related_http_code == 400
    assert "create_certification_type" in err.message


def test_guid_and_name_checks_report_the_callers_parameter_name(handler: InvalidParameterHandler) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_guid("", "certificationTypeGUID", "delete_certification_type")
    assert exc_info.value.parameter_name == "certificationTypeGUID"

    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_name(None, "documentIdentifier", "get_certification_type_by_doc_id")
    assert exc_info.value.parameter_name == "documentIdentifier"

    handler.validate_guid("b5e3f5a8-2c4b-4f5e-9a51-1d3b2e7c8a90", "certificationTypeGUID", "delete_certification_type")
    handler.validate_name("CT-1", "documentIdentifier", "get_certification_type_by_doc_id")


def test_search_strings_keep_wildcards_but_must_not_be_empty(handler: InvalidParameterHandler) -> None:
    handler.validate_search_string(".*Quality.*", "title", "get_certification_types_by_title")
    handler.validate_search_string("*", "title", "get_certification_types_by_title")

    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_search_string("", "title", "get_certification_types_by_title")
    assert exc_info.value.parameter_name == "title"


def test_object_and_enum_checks_only_reject_none(handler: InvalidParameterHandler) -> None:
    handler.validate_object({}, "properties", "m")
    handler.validate_enum(0, "newStatus", "m")

    with pytest.raises(InvalidParameterError):
        handler.validate_object(None, "properties", "m")
    with pytest.raises(InvalidParameterError):
        handler.validate_enum(None, "newStatus", "m")


def test_platform_url_and_server_name_are_required(handler: InvalidParameterHandler) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_platform_url("", "cocoMDS2", "GovernanceProgramBaseClient")
    assert exc_info.value.parameter_name == "serverPlatformURLRoot"

    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_platform_url("https://localhost:9443", None, "GovernanceProgramBaseClient")
    assert exc_info.value.parameter_name == "serverName"


@pytest.mark.parametrize(
    ("start_from", "page_size", "parameter_name"),
    [(-1, 10, "startFrom"), (0, -1, "pageSize"), (0, 51, "pageSize")],
)
def test_paging_out_of_range(
    handler: InvalidParameterHandler, start_from: int, page_size: int, parameter_name: str
) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        handler.validate_paging(start_from, page_size, "find_governance_definitions")
    assert exc_info.value.parameter_name == parameter_name


def test_paging_returns_the_page_size_to_send(handler: InvalidParameterHandler) -> None:
    assert handler.validate_paging(0, 10, "m") == 10
    assert handler.validate_paging(100, 50, "m") == 50
    # 0 asks for as many as allowed.
    assert handler.validate_paging(0, 0, "m") == 50


def test_paging_without_a_ceiling_accepts_any_size() -> None:
    handler = InvalidParameterHandler(max_page_size=0)

    assert handler.validate_paging(0, 0, "m") == 0
    assert handler.validate_paging(0, 10_000, "m") == 10_000
    with pytest.raises(InvalidParameterError):
        handler.validate_paging(-5, 0, "m")


# --- Module Notes -----------------------------------------------------------
# Manager-level coverage (no request is sent when these checks fail) lives in
# test_parameter_checks.py.
