"""Mini README: Runtime configuration for the marina manager.

Structure:
    * MarinaSettings - Pydantic settings model read from ``MARINA_*`` variables.
    * get_settings - cached accessor so validation happens once per process.

Usage:
    The CLI reads ``max_boats`` to size the inventory and ``log_level`` to
    configure logging. Both can be overridden through the environment or a
    local ``.env`` file, e.g. ``MARINA_MAX_BOATS=200``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class MarinaSettings(BaseSettings):
    """Runtime configuration for the marina manager."""

    max_boats: int = Field(
        120,
        description="Maximum number of boats the marina inventory accepts.",
        ge=1,
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; INFO shows every inventory mutation.",
    )

    class Config:
        env_prefix = "MARINA_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _known_level(cls, value: str) -> str:
        """Accept standard level names in any casing."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> MarinaSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return MarinaSettings()
