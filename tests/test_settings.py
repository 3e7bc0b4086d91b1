"""
tests.test_settings

Configuration loading and client construction.
"""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from governance_program import create_client
from governance_program.client import GovernanceProgramClient
from governance_program.errors import InvalidParameterError
from governance_program.settings import ClientSettings


def test_settings_read_prefixed_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOVERNANCE_PROGRAM_SERVER_NAME", "cocoMDS1")
    monkeypatch.setenv("GOVERNANCE_PROGRAM_SERVER_PLATFORM_URL_ROOT", "https://omag.example.com:9443")
    monkeypatch.setenv("GOVERNANCE_PROGRAM_MAX_PAGE_SIZE", "25")

    settings = ClientSettings()

    assert settings.server_name == "cocoMDS1"
    assert settings.server_platform_url_root == "https://omag.example.com:9443"
    assert settings.max_page_size == 25


def test_settings_are_frozen(settings: ClientSettings) -> None:
    with pytest.raises(ValidationError):
        settings.server_name = "somewhere-else"


def test_negative_page_ceiling_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(max_page_size=-1)


def test_password_stays_out_of_repr() -> None:
    settings = ClientSettings(user_id="npa", password="s3cret")

    assert "s3cret" not in repr(settings)
    assert settings.has_credentials


def test_credentials_need_both_parts() -> None:
    assert not ClientSettings(user_id="npa").has_credentials
    assert not ClientSettings(password="s3cret").has_credentials


def test_client_needs_a_platform_url() -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        GovernanceProgramClient(settings=ClientSettings(server_platform_url_root=""))

    assert exc_info.value.parameter_name == "serverPlatformURLRoot"
    assert exc_info.value.reported_by == "GovernanceProgramBaseClient"


def test_client_needs_a_server_name() -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        GovernanceProgramClient(settings=ClientSettings(server_name=""))

    assert exc_info.value.parameter_name == "serverName"


def test_create_client_wires_settings_through(settings: ClientSettings) -> None:
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})))

    with create_client(settings=settings, http=http) as client:
        assert client.settings is settings
        assert client.zones is not None

    assert not http.is_closed
    http.close()
