"""
tests.fake_server

In-memory stand-in for the Governance Program OMAS, served through FastAPI.

Responsibilities:
- Answer the certification type and governance domain endpoints with the same
  envelopes (and error blocks) as a real server.
- Keep state per app instance so every test starts empty.
"""

from __future__ import annotations

import re
import uuid
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

PREFIX = "/servers/{server_name}/open-metadata/access-services/governance-program/users/{user_id}"

UNAUTHORIZED_USER = "intruder"


def _exception(class_name: str, code: int, message: str, **properties: Any) -> dict[str, Any]:
    return {
        "class": "VoidResponse",
        "relatedHTTPCode": code,
        "exceptionClassName": f"org.odpi.openmetadata.frameworks.connectors.ffdc.{class_name}",
        "exceptionErrorMessage": message,
        "exceptionErrorMessageId": "OMAS-GOVERNANCE-PROGRAM-400-001" if code == 400 else "OMAG-COMMON-403-001",
        "exceptionSystemAction": "The request was rejected.",
        "exceptionUserAction": "Correct the request and retry.",
        "exceptionProperties": properties,
    }


def _unknown_guid(guid: str, parameter_name: str) -> dict[str, Any]:
    return _exception(
        "InvalidParameterException",
        400,
        f"The unique identifier {guid} passed on the {parameter_name} parameter is not recognized",
        parameterName=parameter_name,
    )


def _page(items: list[dict[str, Any]], start_from: int, page_size: int) -> list[dict[str, Any]] | None:
    selected = items[start_from : start_from + page_size] if page_size else items[start_from:]
    # Real servers send null rather than an empty list.
    return selected or None


def create_fake_server() -> FastAPI:
    app = FastAPI()
    router = APIRouter(prefix=PREFIX)

    certification_types: dict[str, dict[str, Any]] = {}
    domains: dict[str, dict[str, Any]] = {}
    app.state.requests = []

    @app.middleware("http")
    async def _authorize(request: Request, call_next):
        app.state.requests.append({"method": request.method, "path": request.url.path, "headers": dict(request.headers)})
        if f"/users/{UNAUTHORIZED_USER}/" in request.url.path:
            return JSONResponse(
                _exception(
                    "UserNotAuthorizedException",
                    403,
                    f"User {UNAUTHORIZED_USER} is not authorized to issue this request",
                    userId=UNAUTHORIZED_USER,
                )
            )
        return await call_next(request)

    def _element(guid: str, type_name: str, properties: dict[str, Any]) -> dict[str, Any]:
        return {
            "class": f"{type_name}Element",
            "elementHeader": {"class": "ElementHeader", "guid": guid, "type": {"typeName": type_name}},
            "properties": properties,
        }

    # --- Certification types ---------------------------------------------------

    @router.post("/certification-types")
    async def create_certification_type(server_name: str, user_id: str, request: Request) -> dict[str, Any]:
        body = await request.json()
        guid = str(uuid.uuid4())
        certification_types[guid] = dict(body["properties"])
        return {"class": "GUIDResponse", "relatedHTTPCode": 200, "guid": guid}

    @router.get("/certification-types/{guid}")
    async def get_certification_type(server_name: str, user_id: str, guid: str) -> dict[str, Any]:
        if guid not in certification_types:
            return _unknown_guid(guid, "certificationTypeGUID")
        return {
            "class": "CertificationTypeResponse",
            "relatedHTTPCode": 200,
            "element": _element(guid, "CertificationType", certification_types[guid]),
        }

    @router.post("/certification-types/{guid}/update")
    async def update_certification_type(
        server_name: str, user_id: str, guid: str, isMergeUpdate: bool, request: Request
    ) -> dict[str, Any]:
        if guid not in certification_types:
            return _unknown_guid(guid, "certificationTypeGUID")
        properties = (await request.json())["properties"]
        if isMergeUpdate:
            certification_types[guid].update(properties)
        else:
            certification_types[guid] = dict(properties)
        return {"class": "VoidResponse", "relatedHTTPCode": 200}

    @router.post("/certification-types/{guid}/delete")
    async def delete_certification_type(server_name: str, user_id: str, guid: str) -> dict[str, Any]:
        if certification_types.pop(guid, None) is None:
            return _unknown_guid(guid, "certificationTypeGUID")
        return {"class": "VoidResponse", "relatedHTTPCode": 200}

    @router.post("/certification-types/by-title")
    async def certification_types_by_title(
        server_name: str, user_id: str, startFrom: int, pageSize: int, request: Request
    ) -> dict[str, Any]:
        pattern = re.compile((await request.json())["searchString"])
        matches = [
            _element(guid, "CertificationType", props)
            for guid, props in certification_types.items()
            if pattern.search(props.get("title") or "")
        ]
        return {"class": "CertificationTypesResponse", "relatedHTTPCode": 200, "elements": _page(matches, startFrom, pageSize)}

    @router.post("/certification-types/by-document-id")
    async def certification_type_by_doc_id(server_name: str, user_id: str, request: Request) -> dict[str, Any]:
        name = (await request.json())["name"]
        for guid, props in certification_types.items():
            if props.get("documentIdentifier") == name:
                return {
                    "class": "CertificationTypeResponse",
                    "relatedHTTPCode": 200,
                    "element": _element(guid, "CertificationType", props),
                }
        return {"class": "CertificationTypeResponse", "relatedHTTPCode": 200}

    # --- Governance domains ----------------------------------------------------

    @router.post("/governance-domains")
    async def create_governance_domain(server_name: str, user_id: str, request: Request) -> dict[str, Any]:
        guid = str(uuid.uuid4())
        domains[guid] = dict((await request.json())["properties"])
        return {"class": "GUIDResponse", "relatedHTTPCode": 200, "guid": guid}

    @router.get("/governance-domains")
    async def get_governance_domains(
        server_name: str, user_id: str, startFrom: int, pageSize: int
    ) -> dict[str, Any]:
        elements = [_element(guid, "GovernanceDomain", props) for guid, props in domains.items()]
        return {"class": "GovernanceDomainsResponse", "relatedHTTPCode": 200, "elements": _page(elements, startFrom, pageSize)}

    @router.get("/governance-domains/by-identifier/{identifier}")
    async def get_governance_domain_by_identifier(server_name: str, user_id: str, identifier: int) -> dict[str, Any]:
        for guid, props in domains.items():
            if props.get("domainIdentifier") == identifier:
                return {
                    "class": "GovernanceDomainResponse",
                    "relatedHTTPCode": 200,
                    "element": _element(guid, "GovernanceDomain", props),
                }
        return {"class": "GovernanceDomainResponse", "relatedHTTPCode": 200}

    app.include_router(router)
    return app


# --- Module Notes -----------------------------------------------------------
# Errors are returned with HTTP 200 and the code in relatedHTTPCode, the way the
# real platform reports them.
