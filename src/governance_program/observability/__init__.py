"""
governance_program.observability

Observability package.

Responsibilities:
- Structured logging configuration for the client.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Per-call correlation ids are bound by the REST client (see rest/client.py).
