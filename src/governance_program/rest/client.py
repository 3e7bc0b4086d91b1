"""
governance_program.rest.client

HTTP boundary used by every manager to call the Governance Program OMAS.

Responsibilities:
- Format templated URLs and issue GET/POST calls through `httpx`.
- Forward platform credentials and a per-call correlation id.
- Turn transport failures and encoded server exceptions into client exceptions.
- Return the typed response envelope untouched on success.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from governance_program.errors import (
    PropertyServerError,
    carries_exception,
    exception_from_response,
)
from governance_program.observability.logging import bind_call, get_logger
from governance_program.properties.base import OMAGModel
from governance_program.rest.responses import FFDCResponse, GUIDResponse, VoidResponse
from governance_program.rest.urls import format_url
from governance_program.settings import ClientSettings

R = TypeVar("R", bound=FFDCResponse)

HttpMethod = Literal["GET", "POST"]


def build_http_client(settings: ClientSettings) -> httpx.Client:
    """Create the `httpx.Client` used when the caller does not supply one."""

    return httpx.Client(
        timeout=httpx.Timeout(settings.timeout_seconds),
        verify=settings.verify_tls,
        headers={"Accept": "application/json"},
    )


class RESTClient:
    """
    Stateless dispatcher:
    - The only component in the package that performs network I/O.
    - Shares one connection pool across threads; holds no per-call state.
    """

    def __init__(
        self,
        *,
        settings: ClientSettings,
        http: httpx.Client | None = None,
        audit_log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._settings = settings
        self._owns_http = http is None
        self._http = http or build_http_client(settings)
        self._log = audit_log or get_logger(__name__)
        self._auth: httpx.Auth | None = None
        if settings.has_credentials:
            self._auth = httpx.BasicAuth(settings.user_id or "", settings.password or "")

    @property
    def server_platform_url_root(self) -> str:
        return self._settings.server_platform_url_root.rstrip("/")

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> RESTClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def dispatch(
        self,
        http_method: HttpMethod,
        method_name: str,
        response_type: type[R],
        url_template: str,
        *params: Any,
        body: OMAGModel | None = None,
    ) -> R:
        url = self.server_platform_url_root + format_url(url_template, *params)
        payload = body.to_wire() if body is not None else None

        with bind_call(method_name) as request_id:
            self._log.debug("rest_call", http_method=http_method, url=url)
            kwargs: dict[str, Any] = {"headers": {"x-request-id": request_id}}
            if payload is not None:
                kwargs["json"] = payload
            if self._auth is not None:
                kwargs["auth"] = self._auth

            try:
                response = self._http.request(http_method, url, **kwargs)
            except httpx.TransportError as e:
                self._log.warning("rest_transport_error", url=url, error=str(e))
                raise PropertyServerError(
                    f"{method_name} could not reach the server at {self.server_platform_url_root}: {e}",
                    reported_by=method_name,
                    caused_by=type(e).__name__,
                    system_action="The request was not completed; nothing was retried",
                    user_action="Check the server platform URL and that the server is running",
                ) from e

            envelope = self._parse(method_name, response_type, response)

            if carries_exception(envelope):
                error = exception_from_response(method_name, envelope)
                self._log.warning(
                    "rest_call_failed",
                    kind=error.kind,
                    related_http_code=error.related_http_code,
                    error_message_id=error.error_message_id,
                    message=error.message,
                )
                raise error

            if response.is_error:
                raise PropertyServerError(
                    f"{method_name} received HTTP {response.status_code} from {url}",
                    reported_by=method_name,
                    related_http_code=response.status_code,
                )

            return envelope

    def _parse(self, method_name: str, response_type: type[R], response: httpx.Response) -> R:
        try:
            data = response.json()
        except ValueError as e:
            raise PropertyServerError(
                f"{method_name} received a response that is not JSON (HTTP {response.status_code})",
                reported_by=method_name,
                related_http_code=response.status_code,
                caused_by=type(e).__name__,
            ) from e
        try:
            return response_type.model_validate(data)
        except ValidationError as e:
            raise PropertyServerError(
                f"{method_name} received a malformed {response_type.__name__}: {e.error_count()} invalid field(s)",
                reported_by=method_name,
                related_http_code=response.status_code,
                caused_by=type(e).__name__,
            ) from e

    def call_get(self, method_name: str, response_type: type[R], url_template: str, *params: Any) -> R:
        return self.dispatch("GET", method_name, response_type, url_template, *params)

    def call_post(
        self,
        method_name: str,
        response_type: type[R],
        url_template: str,
        body: OMAGModel,
        *params: Any,
    ) -> R:
        return self.dispatch("POST", method_name, response_type, url_template, *params, body=body)

    def call_guid_post(self, method_name: str, url_template: str, body: OMAGModel, *params: Any) -> GUIDResponse:
        return self.call_post(method_name, GUIDResponse, url_template, body, *params)

    def call_void_post(self, method_name: str, url_template: str, body: OMAGModel, *params: Any) -> VoidResponse:
        return self.call_post(method_name, VoidResponse, url_template, body, *params)


# --- Module Notes -----------------------------------------------------------
# Every manager operation maps to exactly one request on the wire. Retries,
# caching and async wrapping belong to the caller.
