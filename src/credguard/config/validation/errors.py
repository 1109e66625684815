"""Config validation errors.

Raised while a policy object or codec is being built, never on the first
hash or decrypt call.  ``detail`` names the offending setting so callers can
report it without parsing the message.
"""
from credguard.kernel.errors import ApplicationError


class ConfigurationError(ApplicationError):
    """Credential policy is invalid or could not be loaded."""
    default_code = "configuration_error"


class MissingRequiredSettingError(ConfigurationError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigurationError):
    """A setting is present but outside what the codecs can honour
    (for example an iteration count that does not fit the hash header)."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
