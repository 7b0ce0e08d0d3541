"""Vertex ID generation and validation.

IDs are RFC 4122 version 4 UUIDs in their canonical text form:
8-4-4-4-12 lowercase hex groups with fixed version and variant bits.

Generation performs no uniqueness check against any graph; a collision is
possible in principle and is not guarded against.
"""

from __future__ import annotations

import os
import re
import uuid
from collections.abc import Callable

UUID_PATTERN: re.Pattern[str] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


def generate_uuid(randbytes: Callable[[int], bytes] = os.urandom) -> str:
    """Generate a random version 4 UUID string.

    Args:
        randbytes: Random source returning *n* bytes. Defaults to the OS
            CSPRNG; tests pass a deterministic source.
    """
    raw = randbytes(16)
    if len(raw) != 16:
        msg = f"Random source returned {len(raw)} bytes, expected 16"
        raise ValueError(msg)
    return str(uuid.UUID(bytes=raw, version=4))


def validate_uuid(value: str) -> bool:
    """Check whether *value* is a canonical version 4 UUID string."""
    return UUID_PATTERN.match(value) is not None
