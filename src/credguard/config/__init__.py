"""Config – settings, loaders, and validation errors."""

from credguard.config.settings import (
    DotenvSettingsLoader,
    EncryptionSettings,
    EnvSettingsLoader,
    HashingSettings,
    KeyStoreSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from credguard.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigurationError",
    "DotenvSettingsLoader",
    "EncryptionSettings",
    "EnvSettingsLoader",
    "HashingSettings",
    "InvalidSettingValueError",
    "KeyStoreSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
