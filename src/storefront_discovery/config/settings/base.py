"""Config settings – Settings base class and DiscoverySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from storefront_discovery.config.validation import InvalidSettingValueError

STORAGE_BACKENDS = ("memory", "file", "redis")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DiscoverySettings(Settings):
    """Runtime configuration, read from ``DISCOVERY_*`` environment variables."""

    _prefix: ClassVar[str] = "DISCOVERY"

    history_cap: int = 10
    history_key: str = "@search_history"
    high_rated_threshold: float = 4.5
    storage_backend: str = "memory"
    storage_path: str = "search_history.json"
    redis_url: str | None = None
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.history_cap < 1:
            raise InvalidSettingValueError("history_cap", self.history_cap, "must be >= 1")
        if self.storage_backend not in STORAGE_BACKENDS:
            raise InvalidSettingValueError(
                "storage_backend", self.storage_backend, f"must be one of {', '.join(STORAGE_BACKENDS)}"
            )
        if self.storage_backend == "redis" and not self.redis_url:
            raise InvalidSettingValueError("redis_url", self.redis_url, "required when storage_backend is 'redis'")


__all__ = ["DiscoverySettings", "STORAGE_BACKENDS", "Settings"]
