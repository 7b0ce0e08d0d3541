"""Output mode dispatch.

The CLI renders a ServiceResult for humans (Rich tables and fields),
for scripts (``--quiet``), or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from frozengraph.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from frozengraph.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be formatted."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the Rich renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
