"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for credential policies.

    Subclasses set ``_prefix`` (for example ``CREDGUARD_HASHING``) and check
    their fields in ``_validate``, raising
    :class:`~credguard.config.validation.InvalidSettingValueError`.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*: ``<PREFIX>_<FIELD>``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
