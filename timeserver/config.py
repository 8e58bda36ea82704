"""Server configuration.

The service takes no configuration file, environment variables or command
line flags. This module holds the fixed defaults in one validated model so
the entry point and the tests (which bind ephemeral ports) share them.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from timeserver.logic.clock import LAYOUTS, RFC1123


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
logger = logging.getLogger(__name__)


class ServerConfig(BaseModel):
    host: str = DEFAULT_HOST
    # 0 asks the OS for an ephemeral port
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    layout: str = RFC1123

    @field_validator("host")
    @classmethod
    def host_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("host must be a non-empty string")
        return v.strip()

    @field_validator("layout")
    @classmethod
    def layout_must_be_known(cls, v: str) -> str:
        if v not in LAYOUTS:
            raise ValueError(f"layout must be one of {sorted(LAYOUTS)}")
        return v


def load_config() -> ServerConfig:
    """Return the validated server defaults (0.0.0.0:3000, RFC1123)."""
    try:
        return ServerConfig()
    except PydanticValidationError as e:  # pragma: no cover - defaults are static
        logger.error("Invalid server configuration: %s", e)
        raise


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ServerConfig",
    "load_config",
]
