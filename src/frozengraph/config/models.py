"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, frozengraph.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- frozengraph.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    # Fail edge insertion on a missing vertex instead of skipping it.
    strict: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
