"""Application-layer errors — caller contract violations."""

from __future__ import annotations

from typing import Any

from credguard.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ArgumentError(ApplicationError):
    """A required argument is missing, empty, or not in the expected form."""

    default_code = "argument_error"

    def __init__(
        self,
        argument: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Argument '{argument}' must not be empty", **kwargs)
        self.argument = argument


def require_text(value: str | None, argument: str) -> str:
    """Return *value* unchanged, raising :class:`ArgumentError` when it is
    ``None``, empty, or not a ``str``."""
    if not isinstance(value, str) or not value:
        raise ArgumentError(argument)
    return value


__all__ = ["ApplicationError", "ArgumentError", "require_text"]
