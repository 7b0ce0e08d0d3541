"""Vertex ID minting for callers that need fresh identifiers."""

from __future__ import annotations

import os
from collections.abc import Callable

from frozengraph.domain.ids import generate_uuid
from frozengraph.services.result import ServiceResult


def mint_ids(count: int = 1, *, randbytes: Callable[[int], bytes] = os.urandom) -> ServiceResult:
    """Generate *count* version 4 UUIDs."""
    if count < 1:
        return ServiceResult.failure(
            "generate_ids", "INVALID_COUNT", f"Count must be at least 1, got {count}", count=count
        )
    ids = [generate_uuid(randbytes) for _ in range(count)]
    return ServiceResult(ok=True, op="generate_ids", data={"count": count, "ids": ids})
