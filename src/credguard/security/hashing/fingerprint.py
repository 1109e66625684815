"""Hashing – fast content fingerprints.

Not for credentials: the digest is unsalted, unkeyed and cheap to brute-force.
Use :meth:`HashCodec.hash` for anything a user types in.
"""
from __future__ import annotations

import hashlib

TEXT_ENCODING = "utf-16-le"


def fingerprint_hash(data: bytes | str) -> str:
    """Return the lowercase hex MD5 digest of *data*.

    Text is encoded as UTF-16-LE first so fingerprints stay stable for values
    produced by earlier deployments.
    """
    if isinstance(data, str):
        data = data.encode(TEXT_ENCODING)
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


__all__ = ["TEXT_ENCODING", "fingerprint_hash"]
