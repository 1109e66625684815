"""Security – entity tags derived from content fingerprints."""
from __future__ import annotations

import json
from typing import Any

from credguard.kernel.errors import ArgumentError
from credguard.security.hashing.fingerprint import fingerprint_hash

WILDCARD = "*"


class EtagFactory:
    """Generate and check ETags for optimistic concurrency.

    ``data`` may be ``bytes``, ``str`` or any JSON-serialisable object; objects
    are rendered as canonical JSON (sorted keys, no whitespace) first.
    """

    def generate(self, data: Any) -> str:
        return fingerprint_hash(self._to_payload(data))

    def validate(self, data: Any, if_match: str | None, allow_empty: bool = False) -> bool:
        """Whether the client's ``If-Match`` value still matches *data*."""
        payload = self._to_payload(data)
        current = (if_match or "").replace('"', "").strip()
        if current == WILDCARD:
            return True
        if not current:
            return allow_empty
        return current == fingerprint_hash(payload)

    @staticmethod
    def _to_payload(data: Any) -> bytes | str:
        if data is None:
            raise ArgumentError("data")
        if isinstance(data, (bytes, bytearray)):
            if not data:
                raise ArgumentError("data")
            return bytes(data)
        if isinstance(data, str):
            if not data.strip():
                raise ArgumentError("data")
            return data
        return json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)


__all__ = ["EtagFactory", "WILDCARD"]
