"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from frozengraph.config.models import GraphConfig, OutputConfig


def test_defaults() -> None:
    assert GraphConfig().strict is False
    assert OutputConfig().width == 120


def test_sections_frozen() -> None:
    with pytest.raises(ValidationError):
        GraphConfig().strict = True  # type: ignore[misc]


def test_width_lower_bound() -> None:
    with pytest.raises(ValidationError):
        OutputConfig.model_validate({"width": 10})
