"""Config validation errors raised while building ``DiscoverySettings``."""
from storefront_discovery.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or do not describe a usable engine."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no ``<PREFIX>_<FIELD>`` variable or override."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is not set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (bad number, unknown backend, cap < 1, ...)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
