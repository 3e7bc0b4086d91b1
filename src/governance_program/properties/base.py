"""
governance_program.properties.base

Base vocabulary shared by every request, response and element type.

Responsibilities:
- Map snake_case Python fields onto the camelCase JSON contract of the server.
- Stamp each serialised object with its `class` name for polymorphic properties.
- Define element headers, stubs and the root properties types.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel


def wire_name(field_name: str) -> str:
    # anchor_guid -> anchorGUID, related_http_code -> relatedHTTPCode
    return re.sub(r"(?<=[a-z])(Guid|Http)", lambda m: m.group(1).upper(), to_camel(field_name))


class OMAGModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=wire_name,
        populate_by_name=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def _with_class_name(self, handler):
        data = handler(self)
        if isinstance(data, dict):
            return {"class": type(self).__name__, **data}
        return data

    def to_wire(self) -> dict[str, Any]:
        # Only fields the caller set travel; a merge update must not reset
        # server values to local defaults such as domainIdentifier=0.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude_unset=True)


class ElementType(OMAGModel):
    type_id: str | None = None
    type_name: str | None = None
    type_version: int | None = None
    super_type_names: list[str] | None = None


class ElementClassification(OMAGModel):
    classification_name: str
    classification_properties: dict[str, Any] | None = None


class ElementHeader(OMAGModel):
    guid: str
    type: ElementType | None = None
    status: str | None = None
    classifications: list[ElementClassification] | None = None


class ElementStub(ElementHeader):
    unique_name: str | None = None


class ReferenceableProperties(OMAGModel):
    qualified_name: str | None = None
    additional_properties: dict[str, str] | None = None
    type_name: str | None = None
    extended_properties: dict[str, Any] | None = None
    effective_from: datetime | None = None
    effective_to: datetime | None = None


class RelationshipProperties(OMAGModel):
    type_name: str | None = None
    effective_from: datetime | None = None
    effective_to: datetime | None = None
    extended_properties: dict[str, Any] | None = None


class ClassificationProperties(OMAGModel):
    effective_from: datetime | None = None
    effective_to: datetime | None = None
    extended_properties: dict[str, Any] | None = None


class RelatedElementStub(OMAGModel):
    relationship_header: ElementHeader | None = None
    relationship_properties: RelationshipProperties | None = None
    related_element: ElementStub | None = None


# --- Module Notes -----------------------------------------------------------
# Responses are parsed with extra="ignore" so newer servers can add fields
# without breaking older clients.
