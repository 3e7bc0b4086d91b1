"""
governance_program.validation

Local parameter validation shared by every manager.

Responsibilities:
- Reject requests that are knowably malformed before any network call.
- Name the offending parameter and the calling operation in every error.
- Apply the configured page size ceiling to paged queries.
"""

from __future__ import annotations

from typing import Any

from governance_program.errors import InvalidParameterError


class InvalidParameterHandler:
    """
    Stateless checks (apart from the page size ceiling).

    Every method returns None on success and raises InvalidParameterError otherwise.
    """

    def __init__(self, max_page_size: int = 0) -> None:
        self._max_page_size = max_page_size

    @property
    def max_page_size(self) -> int:
        return self._max_page_size

    def validate_platform_url(self, url: str | None, server_name: str | None, method_name: str) -> None:
        if not url:
            raise _invalid("serverPlatformURLRoot", method_name, "The OMAG server platform URL is missing")
        if not server_name:
            raise _invalid("serverName", method_name, "The OMAG server name is missing")

    def validate_user_id(self, user_id: str | None, method_name: str) -> None:
        if not user_id:
            raise _invalid("userId", method_name, "The user identifier (userId) passed on the operation is null")

    def validate_guid(self, guid: str | None, parameter_name: str, method_name: str) -> None:
        if not guid:
            raise _invalid(parameter_name, method_name, f"The unique identifier (guid) passed on the {parameter_name} parameter is null")

    def validate_name(self, name: str | None, parameter_name: str, method_name: str) -> None:
        if not name:
            raise _invalid(parameter_name, method_name, f"The name passed on the {parameter_name} parameter is null")

    def validate_search_string(self, search_string: str | None, parameter_name: str, method_name: str) -> None:
        # Wildcards and regular expressions are interpreted by the server.
        if not search_string:
            raise _invalid(parameter_name, method_name, f"The search string passed on the {parameter_name} parameter is null")

    def validate_object(self, obj: Any, parameter_name: str, method_name: str) -> None:
        if obj is None:
            raise _invalid(parameter_name, method_name, f"The object passed on the {parameter_name} parameter is null")

    def validate_enum(self, value: Any, parameter_name: str, method_name: str) -> None:
        if value is None:
            raise _invalid(parameter_name, method_name, f"The enumeration value passed on the {parameter_name} parameter is null")

    def validate_paging(self, start_from: int, page_size: int, method_name: str) -> int:
        """
        Check paging parameters and return the page size to send.

        A page size of 0 means "as many as allowed", which is the configured ceiling.
        """

        if start_from < 0:
            raise _invalid("startFrom", method_name, f"The starting point for the results ({start_from}) is negative")
        if page_size < 0:
            raise _invalid("pageSize", method_name, f"The page size for the results ({page_size}) is negative")
        if self._max_page_size > 0:
            if page_size == 0:
                return self._max_page_size
            if page_size > self._max_page_size:
                raise _invalid(
                    "pageSize",
                    method_name,
                    f"The requested page size ({page_size}) is greater than the maximum of {self._max_page_size}",
                )
        return page_size


def _invalid(parameter_name: str, method_name: str, detail: str) -> InvalidParameterError:
    return InvalidParameterError(
        f"{detail} on call to {method_name}",
        parameter_name=parameter_name,
        reported_by=method_name,
        related_http_code=400,
        user_action="Correct the value of the parameter and retry the request",
    )


# --- Module Notes -----------------------------------------------------------
# Validation is identical for every manager; concept-specific rules (which
# properties identify an element) are declared by the managers and applied by
# the base client.
