"""
governance_program.rest.responses

Response envelopes and their unwrappers.

Responsibilities:
- Parse the typed envelope the server returns (GUID, element, element list or nothing).
- Carry the uniform error block every envelope may hold.
- Extract the payload once the dispatcher has checked the error block.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field

from governance_program.properties.base import OMAGModel

E = TypeVar("E")


class FFDCResponse(OMAGModel):
    # First-failure data capture block; populated only when the call failed server-side.
    related_http_code: int | None = Field(default=200, alias="relatedHTTPCode")
    exception_class_name: str | None = None
    exception_caused_by: str | None = None
    action_description: str | None = None
    exception_error_message: str | None = None
    exception_error_message_id: str | None = None
    exception_error_message_parameters: list[str] | None = None
    exception_system_action: str | None = None
    exception_user_action: str | None = None
    exception_properties: dict[str, Any] | None = None


class VoidResponse(FFDCResponse):
    pass


class GUIDResponse(FFDCResponse):
    guid: str | None = None


class ElementResponse(FFDCResponse, Generic[E]):
    element: E | None = None


class ElementListResponse(FFDCResponse, Generic[E]):
    elements: list[E] | None = None
    start_from: int | None = None


def unwrap_void(response: VoidResponse) -> None:
    return None


def unwrap_guid(response: GUIDResponse) -> str | None:
    return response.guid


def unwrap_element(response: ElementResponse[E]) -> E | None:
    return response.element


def unwrap_elements(response: ElementListResponse[E]) -> list[E]:
    # Servers send null for "no matches"; callers always get a list.
    return list(response.elements or [])


# --- Module Notes -----------------------------------------------------------
# Unwrappers never raise: error blocks are turned into exceptions by the REST
# client before an envelope reaches the managers.
