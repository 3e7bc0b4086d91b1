"""
governance_program

Top-level package for the Governance Program OMAS client.

Responsibilities:
- Expose package version metadata.
- Re-export the client entrypoint, settings and error taxonomy.
"""

from governance_program.client import GovernanceProgramClient, create_client
from governance_program.errors import (
    AppointmentIdNotUniqueError,
    EmployeeNumberNotUniqueError,
    GovernanceProgramError,
    InvalidParameterError,
    PropertyServerError,
    UnrecognizedGUIDError,
    UserNotAuthorizedError,
)
from governance_program.settings import ClientSettings, get_settings

__all__ = [
    "__version__",
    "GovernanceProgramClient",
    "create_client",
    "ClientSettings",
    "get_settings",
    "GovernanceProgramError",
    "InvalidParameterError",
    "UserNotAuthorizedError",
    "PropertyServerError",
    "UnrecognizedGUIDError",
    "EmployeeNumberNotUniqueError",
    "AppointmentIdNotUniqueError",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file limited to re-exports; importing it must not open connections.
