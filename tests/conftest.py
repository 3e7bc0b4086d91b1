"""
tests.conftest

Shared fixtures: settings, a recording transport spy and the fake server client.
"""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest
from fastapi.testclient import TestClient
from fake_server import create_fake_server

from governance_program.client import GovernanceProgramClient
from governance_program.settings import ClientSettings


@pytest.fixture
def settings() -> ClientSettings:
    # Built directly so developer env vars cannot leak into tests.
    return ClientSettings(
        server_name="cocoMDS2",
        server_platform_url_root="http://testserver",
        max_page_size=50,
    )


@pytest.fixture
def spy() -> list[httpx.Request]:
    return []


@pytest.fixture
def spy_client(settings: ClientSettings, spy: list[httpx.Request]) -> Iterator[GovernanceProgramClient]:
    """Client whose transport records every request and answers with an empty success envelope."""

    def handler(request: httpx.Request) -> httpx.Response:
        spy.append(request)
        return httpx.Response(200, json={"class": "VoidResponse", "relatedHTTPCode": 200})

    http = httpx.Client(transport=httpx.MockTransport(handler))
    with GovernanceProgramClient(settings=settings, http=http) as client:
        yield client
    http.close()


@pytest.fixture
def fake_server():
    return create_fake_server()


@pytest.fixture
def server_client(settings: ClientSettings, fake_server) -> Iterator[GovernanceProgramClient]:
    # TestClient is an httpx.Client, so it plugs straight into the REST client.
    with TestClient(fake_server) as http:
        with GovernanceProgramClient(settings=settings, http=http) as client:
            yield client
