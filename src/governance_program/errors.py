"""
governance_program.errors

Client-visible exception taxonomy.

Responsibilities:
- Define the exceptions raised by every manager operation.
- Decode the error block of a server response envelope into the matching exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from governance_program.rest.responses import FFDCResponse


class GovernanceProgramError(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message: Human readable error message (from the server when decoded)
        kind: Short error kind used for programmatic handling
        reported_by: Name of the client operation that failed
        error_message_id: Server message id, if any
        system_action: What the server did about the error
        user_action: What the caller should do next
        related_http_code: HTTP code the server associated with the error
        caused_by: Class name of the server-side cause, if any
        properties: Extra context sent by the server
    """

    kind = "GovernanceProgram"

    def __init__(
        self,
        message: str,
        *,
        reported_by: str | None = None,
        error_message_id: str | None = None,
        system_action: str | None = None,
        user_action: str | None = None,
        related_http_code: int | None = None,
        caused_by: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reported_by = reported_by
        self.error_message_id = error_message_id
        self.system_action = system_action
        self.user_action = user_action
        self.related_http_code = related_http_code
        self.caused_by = caused_by
        self.properties = properties or {}


class InvalidParameterError(GovernanceProgramError):
    """A parameter is missing or malformed (checked locally or reported by the server)."""

    kind = "InvalidParameter"

    def __init__(self, message: str, *, parameter_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.parameter_name = parameter_name


class UserNotAuthorizedError(GovernanceProgramError):
    """The server refused the request for the calling user."""

    kind = "UserNotAuthorized"

    def __init__(self, message: str, *, user_id: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.user_id = user_id


class PropertyServerError(GovernanceProgramError):
    """The server, or the transport to it, failed."""

    kind = "PropertyServer"


class UnrecognizedGUIDError(InvalidParameterError):
    kind = "UnrecognizedGUID"


class EmployeeNumberNotUniqueError(InvalidParameterError):
    kind = "EmployeeNumberNotUnique"


class AppointmentIdNotUniqueError(InvalidParameterError):
    kind = "AppointmentIdNotUnique"


# Server exceptions are matched on the simple Java class name.
_EXCEPTION_TYPES: dict[str, type[GovernanceProgramError]] = {
    "InvalidParameterException": InvalidParameterError,
    "UserNotAuthorizedException": UserNotAuthorizedError,
    "PropertyServerException": PropertyServerError,
    "UnrecognizedGUIDException": UnrecognizedGUIDError,
    "EmployeeNumberNotUniqueException": EmployeeNumberNotUniqueError,
    "AppointmentIdNotUniqueException": AppointmentIdNotUniqueError,
}


def carries_exception(envelope: FFDCResponse) -> bool:
    if envelope.exception_class_name:
        return True
    return envelope.related_http_code is not None and envelope.related_http_code >= 400


def exception_from_response(method_name: str, envelope: FFDCResponse) -> GovernanceProgramError:
    """
    Build the client exception matching the error block of `envelope`.

    Unknown exception class names fall back on the related HTTP code.
    """

    class_name = (envelope.exception_class_name or "").rsplit(".", 1)[-1]
    error_type = _EXCEPTION_TYPES.get(class_name)
    if error_type is None:
        code = envelope.related_http_code or 500
        if code == 400:
            error_type = InvalidParameterError
        elif code in (401, 403):
            error_type = UserNotAuthorizedError
        else:
            error_type = PropertyServerError

    properties = dict(envelope.exception_properties or {})
    message = envelope.exception_error_message or (
        f"{method_name} failed on the server ({class_name or envelope.related_http_code})"
    )
    kwargs: dict[str, Any] = {
        "reported_by": method_name,
        "error_message_id": envelope.exception_error_message_id,
        "system_action": envelope.exception_system_action,
        "user_action": envelope.exception_user_action,
        "related_http_code": envelope.related_http_code,
        "caused_by": envelope.exception_caused_by,
        "properties": properties,
    }
    if issubclass(error_type, InvalidParameterError):
        kwargs["parameter_name"] = properties.get("parameterName")
    elif issubclass(error_type, UserNotAuthorizedError):
        kwargs["user_id"] = properties.get("userId")
    return error_type(message, **kwargs)


# --- Module Notes -----------------------------------------------------------
# Operation-specific kinds subclass InvalidParameterError so callers that only
# care about "bad input" can catch the broad type.
