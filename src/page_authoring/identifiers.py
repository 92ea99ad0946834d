from __future__ import annotations

import secrets
from datetime import datetime, timezone


def create_page_id() -> str:
    """Generate a page id from a cryptographically random 32-bit value.

    Ids are not checked against the store; a collision is unlikely at the
    write volume of a small site but not ruled out.
    """
    return str(secrets.randbits(32))


def utc_timestamp() -> str:
    """ISO-8601 timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


__all__ = ["create_page_id", "utc_timestamp"]
