"""
Agent settings — connection configuration from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dynamode.codec._policy import Policy, STORE_MAX_DEPTH

DEFAULT_ENDPOINT_URL = "http://localhost:8000"
DEFAULT_REGION = "us-west-2"


@dataclass(frozen=True, slots=True)
class Settings:
    # DynamoDB Local by default; None means the real AWS endpoint
    endpoint_url: str | None
    region: str
    max_depth: int

    def __post_init__(self) -> None:
        # Out-of-range depths fail at load time, not on first use
        Policy(max_depth=self.max_depth)

    @property
    def policy(self) -> Policy:
        return Policy().with_max_depth(self.max_depth)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_settings() -> Settings:
    # Empty DYNAMODE_ENDPOINT_URL selects the AWS default endpoint
    endpoint_url = os.getenv("DYNAMODE_ENDPOINT_URL", DEFAULT_ENDPOINT_URL).strip() or None
    region = os.getenv("DYNAMODE_REGION", DEFAULT_REGION)
    max_depth = _env_int("DYNAMODE_MAX_DEPTH", STORE_MAX_DEPTH)

    return Settings(
        endpoint_url=endpoint_url,
        region=region,
        max_depth=max_depth,
    )


__all__ = (
    "DEFAULT_ENDPOINT_URL",
    "DEFAULT_REGION",
    "Settings",
    "get_settings",
)
