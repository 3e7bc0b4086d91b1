"""
governance_program.settings

Client configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for one logical server connection.
- Hide the platform password from repr/logging.
- Offer a cached settings instance for callers that do not build their own.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """
    Connection settings:
    - One instance per remote OMAG server the caller talks to
    - Frozen once built; every manager reads the same values
    """

    model_config = SettingsConfigDict(
        env_prefix="GOVERNANCE_PROGRAM_",
        case_sensitive=False,
        frozen=True,
    )

    # Target server
    server_name: str = "cocoMDS2"
    server_platform_url_root: str = "https://localhost:9443"

    # Platform credentials of the calling process. The end user's id travels in each URL.
    user_id: str | None = None
    password: str | None = Field(default=None, repr=False)

    # 0 disables the client-side page size ceiling.
    max_page_size: int = Field(default=1000, ge=0)

    # Transport
    timeout_seconds: float = Field(default=30.0, gt=0)
    verify_tls: bool = True

    # Logging
    client_name: str = "governance-program-client"
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        return bool(self.user_id) and self.password is not None


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    # Cache avoids re-parsing env vars for every client built in the same process.
    return ClientSettings()


# --- Module Notes -----------------------------------------------------------
# Tests build ClientSettings directly instead of going through get_settings so
# that environment variables on the developer machine cannot leak in.
