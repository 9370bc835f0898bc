"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from storefront_discovery.config.settings.base import DiscoverySettings, Settings
from storefront_discovery.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)
from storefront_discovery.config.validation import ConfigError, MissingRequiredSettingError
from storefront_discovery.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones, but
    only for the fields their source actually set.  *overrides* take the
    highest priority.  A loader that fails for any reason other than a
    :class:`ConfigError` is skipped so the remaining sources may still
    contribute.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after merging.
        ConfigError
            When the merged values fail validation or construction.
        """
        merged: dict[str, Any] = {}
        defaults = {
            f.name: f.default
            for f in dataclasses.fields(settings_cls)  # type: ignore[arg-type]
            if f.default is not dataclasses.MISSING
        }

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError:
                raise
            except Exception as exc:  # noqa: BLE001 – skip failing loaders
                logger.warning("settings.loader_skipped", loader=type(loader).__name__, error=repr(exc))
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                value = getattr(instance, field.name)
                if field.name not in defaults or value != defaults[field.name]:
                    merged[field.name] = value

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


def load_settings(
    overrides: dict[str, Any] | None = None,
    *,
    env_file: str | None = None,
) -> DiscoverySettings:
    """Build :class:`DiscoverySettings` from ``.env`` (optional), the environment and *overrides*."""
    loaders: list[SettingsLoader] = [EnvSettingsLoader()]
    if env_file is not None:
        loaders = [DotenvSettingsLoader(env_file)]
    return SettingsFactory.create(DiscoverySettings, loaders, overrides)


__all__ = ["SettingsFactory", "load_settings"]
