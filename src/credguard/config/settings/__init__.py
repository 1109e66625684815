"""Config settings – environment-based configuration."""
from credguard.config.settings.base import Settings
from credguard.config.settings.credentials import (
    EncryptionSettings,
    HashingSettings,
    KeyStoreSettings,
)
from credguard.config.settings.factory import SettingsFactory
from credguard.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EncryptionSettings",
    "EnvSettingsLoader",
    "HashingSettings",
    "KeyStoreSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
