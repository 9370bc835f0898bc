"""Config settings – 12-factor env-based configuration."""
from storefront_discovery.config.settings.base import DiscoverySettings, STORAGE_BACKENDS, Settings
from storefront_discovery.config.settings.factory import SettingsFactory, load_settings
from storefront_discovery.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DiscoverySettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "STORAGE_BACKENDS",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
