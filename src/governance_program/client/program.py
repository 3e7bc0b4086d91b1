"""
governance_program.client.program

Client entrypoint for one Governance Program OMAS server.

Responsibilities:
- Build a single base client (validator + REST client) from settings.
- Expose one manager per governance concept, all sharing that base client.
- Close the HTTP connection pool when the caller is done.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from governance_program.client.base import GovernanceProgramBaseClient
from governance_program.client.certifications import CertificationManager
from governance_program.client.classification_levels import GovernanceClassificationLevelManager
from governance_program.client.definitions import GovernanceDefinitionManager
from governance_program.client.domains import GovernanceDomainManager
from governance_program.client.external_references import ExternalReferenceManager
from governance_program.client.licenses import LicenseManager
from governance_program.client.metrics import GovernanceMetricsManager
from governance_program.client.related_elements import RelatedElementsManager
from governance_program.client.roles import GovernanceRoleManager
from governance_program.client.status_levels import GovernanceStatusLevelManager
from governance_program.client.subject_areas import SubjectAreaManager
from governance_program.client.zones import GovernanceZoneManager
from governance_program.observability.logging import configure_logging, get_logger
from governance_program.settings import ClientSettings, get_settings

log = get_logger(__name__)


class GovernanceProgramClient:
    """
    Facade over every manager:
    - Safe to share across threads; each call is an independent round trip.
    - Use as a context manager, or call close(), to release pooled connections.
    """

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        http: httpx.Client | None = None,
        audit_log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.base = GovernanceProgramBaseClient(settings=settings, http=http, audit_log=audit_log)

        self.certifications = CertificationManager(self.base)
        self.licenses = LicenseManager(self.base)
        self.definitions = GovernanceDefinitionManager(self.base)
        self.domains = GovernanceDomainManager(self.base)
        self.roles = GovernanceRoleManager(self.base)
        self.metrics = GovernanceMetricsManager(self.base)
        self.external_references = ExternalReferenceManager(self.base)
        self.subject_areas = SubjectAreaManager(self.base)
        self.classification_levels = GovernanceClassificationLevelManager(self.base)
        self.status_levels = GovernanceStatusLevelManager(self.base)
        self.zones = GovernanceZoneManager(self.base)
        self.related_elements = RelatedElementsManager(self.base)

    @property
    def settings(self) -> ClientSettings:
        return self.base.settings

    def close(self) -> None:
        self.base.close()

    def __enter__(self) -> GovernanceProgramClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_client(
    *,
    settings: ClientSettings | None = None,
    http: httpx.Client | None = None,
) -> GovernanceProgramClient:
    """Build a client for a standalone script: structured logging is configured first."""

    settings = settings or get_settings()
    configure_logging(client_name=settings.client_name, level=settings.log_level)
    client = GovernanceProgramClient(settings=settings, http=http)
    log.info(
        "client_created",
        server_name=settings.server_name,
        server_platform_url_root=settings.server_platform_url_root,
    )
    return client


# --- Module Notes -----------------------------------------------------------
# Services embedding this client keep their own structlog setup and construct
# GovernanceProgramClient directly; create_client is the composition root for
# scripts.
