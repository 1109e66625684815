"""Security – VerificationStatus and comparison helpers shared by the codecs."""
from __future__ import annotations

import base64
import binascii
import hmac
from enum import Enum


class VerificationStatus(str, Enum):
    """Outcome of a single verification call.

    ``SUCCESS_REHASH_NEEDED`` means the secret matched but was stored under a
    weaker (or absent) protection policy; the caller should protect it again
    and store the fresh value.
    """

    FAILED = "failed"
    SUCCESS = "success"
    SUCCESS_REHASH_NEEDED = "success_rehash_needed"

    @property
    def succeeded(self) -> bool:
        return self is not VerificationStatus.FAILED

    @property
    def needs_rehash(self) -> bool:
        return self is VerificationStatus.SUCCESS_REHASH_NEEDED


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without an early exit on the first mismatch."""
    return hmac.compare_digest(a, b)


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """Strict radix-64 decode.

    Raises
    ------
    ValueError
        When *text* is not canonical padded base64 (``+`` and ``/`` alphabet).
    """
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("value is not valid base64") from exc


def is_base64(text: str) -> bool:
    try:
        b64decode(text)
    except ValueError:
        return False
    return True


__all__ = [
    "VerificationStatus",
    "b64decode",
    "b64encode",
    "constant_time_equals",
    "is_base64",
]
