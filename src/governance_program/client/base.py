"""
governance_program.client.base

Shared validate -> build -> dispatch -> unwrap operations.

Responsibilities:
- Hold the validator, REST client, server name and URL prefix for one server.
- Apply the identity checks each manager declares, on create and on full replace.
- Give managers one generic operation per request shape so they only supply
  paths, parameter names and element types.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
import structlog

from governance_program.properties.base import (
    ClassificationProperties,
    ReferenceableProperties,
    RelationshipProperties,
)
from governance_program.properties.governance import GovernanceDefinitionStatus
from governance_program.rest import bodies
from governance_program.rest.client import RESTClient
from governance_program.rest.responses import (
    ElementListResponse,
    ElementResponse,
    unwrap_element,
    unwrap_elements,
    unwrap_guid,
    unwrap_void,
)
from governance_program.settings import ClientSettings, get_settings
from governance_program.validation import InvalidParameterHandler

E = TypeVar("E")

# (attribute on the properties object, parameter name reported in errors)
Identity = tuple[tuple[str, str], ...]

QUALIFIED_NAME: Identity = (("qualified_name", "qualifiedName"),)
DEFINITION_IDENTITY: Identity = (("document_identifier", "documentIdentifier"), ("title", "title"))


def paged(path: str, first_index: int) -> str:
    """Append the paging query to `path`, numbering its placeholders from `first_index`."""

    return f"{path}?startFrom={{{first_index}}}&pageSize={{{first_index + 1}}}"


class GovernanceProgramBaseClient:
    URL_PREFIX = "/servers/{0}/open-metadata/access-services/governance-program/users/{1}"

    def __init__(
        self,
        *,
        settings: ClientSettings | None = None,
        http: httpx.Client | None = None,
        rest_client: RESTClient | None = None,
        audit_log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.invalid_parameter_handler = InvalidParameterHandler(self.settings.max_page_size)
        self.invalid_parameter_handler.validate_platform_url(
            self.settings.server_platform_url_root,
            self.settings.server_name,
            type(self).__name__,
        )
        self.server_name = self.settings.server_name
        self.rest_client = rest_client or RESTClient(settings=self.settings, http=http, audit_log=audit_log)

    def close(self) -> None:
        self.rest_client.close()

    def template(self, path: str) -> str:
        return self.URL_PREFIX + path

    def validate_identity(self, properties: Any, identity: Identity, method_name: str) -> None:
        for attribute, parameter_name in identity:
            self.invalid_parameter_handler.validate_name(getattr(properties, attribute, None), parameter_name, method_name)

    # --- Elements --------------------------------------------------------------

    def create_element(
        self,
        user_id: str,
        properties: ReferenceableProperties | None,
        *,
        properties_parameter_name: str,
        path: str,
        method_name: str,
        identity: Identity = QUALIFIED_NAME,
        anchor_guid: str | None = None,
        anchor_guid_parameter_name: str | None = None,
    ) -> str | None:
        """
        Create an element and return its GUID.

        When `anchor_guid_parameter_name` is given the anchor is mandatory and
        travels in the request body.
        """

        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        if anchor_guid_parameter_name is not None:
            handler.validate_guid(anchor_guid, anchor_guid_parameter_name, method_name)
        handler.validate_object(properties, properties_parameter_name, method_name)
        self.validate_identity(properties, identity, method_name)

        body = bodies.new_element_body(properties, anchor_guid=anchor_guid)
        response = self.rest_client.call_guid_post(
            method_name, self.template(path), body, self.server_name, user_id
        )
        return unwrap_guid(response)

    def create_governance_definition(
        self,
        user_id: str,
        properties: ReferenceableProperties | None,
        initial_status: GovernanceDefinitionStatus | None,
        *,
        properties_parameter_name: str,
        path: str,
        method_name: str,
        identity: Identity = DEFINITION_IDENTITY,
    ) -> str | None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_object(properties, properties_parameter_name, method_name)
        self.validate_identity(properties, identity, method_name)

        body = bodies.new_governance_definition_body(properties, initial_status)
        response = self.rest_client.call_guid_post(
            method_name, self.template(path), body, self.server_name, user_id
        )
        return unwrap_guid(response)

    def update_element(
        self,
        user_id: str,
        element_guid: str,
        is_merge_update: bool,
        properties: ReferenceableProperties | None,
        *,
        element_guid_parameter_name: str,
        properties_parameter_name: str,
        path: str,
        method_name: str,
        identity: Identity = QUALIFIED_NAME,
    ) -> None:
        """
        Update an element; `path` carries `{2}` for the GUID and `{3}` for the merge flag.

        A full replace (`is_merge_update=False`) must carry the identity fields,
        a merge update may omit them.
        """

        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_guid_parameter_name, method_name)
        handler.validate_object(properties, properties_parameter_name, method_name)
        if not is_merge_update:
            self.validate_identity(properties, identity, method_name)

        body = bodies.update_body(properties, is_merge_update=is_merge_update)
        response = self.rest_client.call_void_post(
            method_name, self.template(path), body, self.server_name, user_id, element_guid, is_merge_update
        )
        unwrap_void(response)

    def update_governance_definition(
        self,
        user_id: str,
        definition_guid: str,
        is_merge_update: bool,
        properties: ReferenceableProperties | None,
        *,
        definition_guid_parameter_name: str,
        properties_parameter_name: str,
        path: str,
        method_name: str,
        identity: Identity = DEFINITION_IDENTITY,
    ) -> None:
        self.update_element(
            user_id,
            definition_guid,
            is_merge_update,
            properties,
            element_guid_parameter_name=definition_guid_parameter_name,
            properties_parameter_name=properties_parameter_name,
            path=path,
            method_name=method_name,
            identity=identity,
        )

    def update_governance_definition_status(
        self,
        user_id: str,
        definition_guid: str,
        new_status: GovernanceDefinitionStatus | None,
        *,
        definition_guid_parameter_name: str,
        status_parameter_name: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(definition_guid, definition_guid_parameter_name, method_name)
        handler.validate_enum(new_status, status_parameter_name, method_name)

        response = self.rest_client.call_void_post(
            method_name,
            self.template("/governance-definitions/{2}/update-status"),
            bodies.status_body(new_status),
            self.server_name,
            user_id,
            definition_guid,
        )
        unwrap_void(response)

    def remove_element(
        self,
        user_id: str,
        element_guid: str,
        *,
        element_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_guid_parameter_name, method_name)

        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.ExternalSourceRequestBody(),
            self.server_name,
            user_id,
            element_guid,
        )
        unwrap_void(response)

    # --- Classifications -------------------------------------------------------

    def set_classification(
        self,
        user_id: str,
        element_guid: str,
        properties: ClassificationProperties | None,
        *,
        element_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_guid_parameter_name, method_name)

        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.classification_body(properties),
            self.server_name,
            user_id,
            element_guid,
        )
        unwrap_void(response)

    def remove_classification(
        self,
        user_id: str,
        element_guid: str,
        *,
        element_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_guid_parameter_name, method_name)

        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.classification_clear_body(),
            self.server_name,
            user_id,
            element_guid,
        )
        unwrap_void(response)

    # --- Relationships ---------------------------------------------------------

    def _validate_ends(
        self,
        user_id: str,
        primary_guid: str,
        primary_guid_parameter_name: str,
        secondary_guid: str,
        secondary_guid_parameter_name: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(primary_guid, primary_guid_parameter_name, method_name)
        handler.validate_guid(secondary_guid, secondary_guid_parameter_name, method_name)

    def setup_relationship(
        self,
        user_id: str,
        primary_guid: str,
        secondary_guid: str,
        relationship_type_name: str | None,
        properties: RelationshipProperties | None = None,
        *,
        primary_guid_parameter_name: str,
        secondary_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        """Link two elements; `path` carries `{2}` (primary) and `{3}` (secondary)."""

        self._validate_ends(
            user_id,
            primary_guid,
            primary_guid_parameter_name,
            secondary_guid,
            secondary_guid_parameter_name,
            method_name,
        )
        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.relationship_body(relationship_type_name, properties),
            self.server_name,
            user_id,
            primary_guid,
            secondary_guid,
        )
        unwrap_void(response)

    def setup_multi_link_relationship(
        self,
        user_id: str,
        primary_guid: str,
        secondary_guid: str,
        relationship_type_name: str | None,
        properties: RelationshipProperties | None = None,
        *,
        primary_guid_parameter_name: str,
        secondary_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> str | None:
        """Like `setup_relationship`, for types that allow several links; returns the relationship GUID."""

        self._validate_ends(
            user_id,
            primary_guid,
            primary_guid_parameter_name,
            secondary_guid,
            secondary_guid_parameter_name,
            method_name,
        )
        response = self.rest_client.call_guid_post(
            method_name,
            self.template(path),
            bodies.relationship_body(relationship_type_name, properties),
            self.server_name,
            user_id,
            primary_guid,
            secondary_guid,
        )
        return unwrap_guid(response)

    def update_relationship(
        self,
        user_id: str,
        relationship_guid: str,
        is_merge_update: bool,
        relationship_type_name: str | None,
        properties: RelationshipProperties | None = None,
        *,
        relationship_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(relationship_guid, relationship_guid_parameter_name, method_name)

        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.relationship_body(relationship_type_name, properties),
            self.server_name,
            user_id,
            relationship_guid,
            is_merge_update,
        )
        unwrap_void(response)

    def clear_relationship(
        self,
        user_id: str,
        primary_guid: str,
        secondary_guid: str,
        relationship_type_name: str | None,
        *,
        primary_guid_parameter_name: str,
        secondary_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        self._validate_ends(
            user_id,
            primary_guid,
            primary_guid_parameter_name,
            secondary_guid,
            secondary_guid_parameter_name,
            method_name,
        )
        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.relationship_clear_body(relationship_type_name),
            self.server_name,
            user_id,
            primary_guid,
            secondary_guid,
        )
        unwrap_void(response)

    def clear_relationship_by_guid(
        self,
        user_id: str,
        relationship_guid: str,
        relationship_type_name: str | None,
        *,
        relationship_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(relationship_guid, relationship_guid_parameter_name, method_name)

        response = self.rest_client.call_void_post(
            method_name,
            self.template(path),
            bodies.relationship_clear_body(relationship_type_name),
            self.server_name,
            user_id,
            relationship_guid,
        )
        unwrap_void(response)

    # --- Queries ---------------------------------------------------------------

    def get_element(
        self,
        user_id: str,
        element_type: type[E],
        *path_params: Any,
        path: str,
        method_name: str,
    ) -> E | None:
        """GET a single element addressed by already-validated path parameters."""

        self.invalid_parameter_handler.validate_user_id(user_id, method_name)
        response = self.rest_client.call_get(
            method_name, ElementResponse[element_type], self.template(path), self.server_name, user_id, *path_params
        )
        return unwrap_element(response)

    def get_element_by_guid(
        self,
        user_id: str,
        element_guid: str,
        element_type: type[E],
        *,
        element_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> E | None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_guid_parameter_name, method_name)

        response = self.rest_client.call_get(
            method_name, ElementResponse[element_type], self.template(path), self.server_name, user_id, element_guid
        )
        return unwrap_element(response)

    def get_element_by_name(
        self,
        user_id: str,
        name: str,
        element_type: type[E],
        *,
        name_parameter_name: str,
        path: str,
        method_name: str,
    ) -> E | None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, name_parameter_name, method_name)

        response = self.rest_client.call_post(
            method_name,
            ElementResponse[element_type],
            self.template(path),
            bodies.name_body(name, name_parameter_name),
            self.server_name,
            user_id,
        )
        return unwrap_element(response)

    def get_elements_by_name(
        self,
        user_id: str,
        name: str,
        element_type: type[E],
        start_from: int,
        page_size: int,
        *,
        name_parameter_name: str,
        path: str,
        method_name: str,
    ) -> list[E]:
        """POST an exact-name lookup; paging is appended to `path` as `{2}`/`{3}`."""

        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, name_parameter_name, method_name)
        page_size = handler.validate_paging(start_from, page_size, method_name)

        response = self.rest_client.call_post(
            method_name,
            ElementListResponse[element_type],
            self.template(paged(path, 2)),
            bodies.name_body(name, name_parameter_name),
            self.server_name,
            user_id,
            start_from,
            page_size,
        )
        return unwrap_elements(response)

    def find_elements(
        self,
        user_id: str,
        search_string: str,
        element_type: type[E],
        start_from: int,
        page_size: int,
        *,
        search_string_parameter_name: str,
        path: str,
        method_name: str,
    ) -> list[E]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, search_string_parameter_name, method_name)
        page_size = handler.validate_paging(start_from, page_size, method_name)

        response = self.rest_client.call_post(
            method_name,
            ElementListResponse[element_type],
            self.template(paged(path, 2)),
            bodies.search_body(search_string, search_string_parameter_name),
            self.server_name,
            user_id,
            start_from,
            page_size,
        )
        return unwrap_elements(response)

    def get_elements_for_guid(
        self,
        user_id: str,
        element_guid: str,
        element_type: type[E],
        start_from: int,
        page_size: int,
        *,
        element_guid_parameter_name: str,
        path: str,
        method_name: str,
    ) -> list[E]:
        """GET the elements related to `element_guid` (`{2}` in `path`); paging lands at `{3}`/`{4}`."""

        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_guid_parameter_name, method_name)
        page_size = handler.validate_paging(start_from, page_size, method_name)

        response = self.rest_client.call_get(
            method_name,
            ElementListResponse[element_type],
            self.template(paged(path, 3)),
            self.server_name,
            user_id,
            element_guid,
            start_from,
            page_size,
        )
        return unwrap_elements(response)

    def get_elements(
        self,
        user_id: str,
        element_type: type[E],
        start_from: int,
        page_size: int,
        *path_params: Any,
        path: str,
        method_name: str,
    ) -> list[E]:
        """GET a page of elements; `path_params` fill `{2}..` before the paging placeholders."""

        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        page_size = handler.validate_paging(start_from, page_size, method_name)

        response = self.rest_client.call_get(
            method_name,
            ElementListResponse[element_type],
            self.template(paged(path, 2 + len(path_params))),
            self.server_name,
            user_id,
            *path_params,
            start_from,
            page_size,
        )
        return unwrap_elements(response)


# --- Module Notes -----------------------------------------------------------
# Server name and user id are always placeholders {0} and {1}; manager paths
# number their own parameters from {2}.
