"""
governance_program.rest

REST plumbing shared by every manager.

Responsibilities:
- URL templates, request bodies, response envelopes and the HTTP dispatcher.
"""

from governance_program.rest.client import RESTClient, build_http_client
from governance_program.rest.urls import format_url

__all__ = ["RESTClient", "build_http_client", "format_url"]


# --- Module Notes -----------------------------------------------------------
# Managers depend on this package, never on httpx directly.
