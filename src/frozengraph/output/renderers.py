"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from frozengraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from frozengraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    ids = result.data.get("ids")
    if ids and isinstance(ids, list):
        return "\n".join(str(vid) for vid in ids)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="fg.ok"), Text(f"  {result.op}", style="fg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    k = Text(f"  {key}: ", style="fg.key")
    style = "fg.id" if key == "id" or key.endswith("_id") else ""
    console.print(k, Text(str(value), style=style), sep="")


def _format_payload(data: Any) -> str:
    if isinstance(data, dict):
        if not data:
            return ""
        return ", ".join(f"{k}={v}" for k, v in data.items())
    return str(data)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="fg.error"),
        Text(f"  {result.op}", style="fg.op"),
        Text(" — "),
        msg,
        sep="",
    )

    if err and err.detail:
        # Invariant violations are listed even without --verbose.
        for line in err.detail.get("errors", []):
            console.print(f"  [fg.error]x[/fg.error] {line}")
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_vertex / add_edge / add_directed_edge results."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_graph(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a graph dump as one row per vertex."""
    d = result.data
    adjacency: dict[str, list[str]] = d.get("adjacency", {})
    vertices: dict[str, Any] = d.get("vertices", {})

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="fg.id", no_wrap=True)
    table.add_column("Data")
    table.add_column("Neighbors", style="fg.neighbor")

    for vertex_id in d.get("ids", []):
        neighbors = adjacency.get(vertex_id, [])
        table.add_row(
            str(vertex_id),
            _format_payload(vertices.get(vertex_id)),
            ", ".join(neighbors) if neighbors else Text("(none)", style="fg.empty"),
        )

    console.print(table)
    console.print(f"\n{d.get('count', 0)} vertices")
    if verbose:
        _render_meta(console, result)


def _render_summary(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "vertices", d.get("vertex_count", 0))
    _field(console, "edges", d.get("edge_count", 0))
    _field(console, "symmetric", "yes" if d.get("symmetric") else "no")
    isolated = d.get("isolated", [])
    _field(console, "isolated", ", ".join(isolated) if isolated else "none")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "valid", result.data.get("valid", True))
    _field(console, "vertex_count", result.data.get("vertex_count", 0))


def _render_ids(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for vid in result.data.get("ids", []):
        console.print(Text(f"  {vid}", style="fg.id"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add_vertex": _render_mutation,
    "add_edge": _render_mutation,
    "add_directed_edge": _render_mutation,
    "show_graph": _render_graph,
    "summary": _render_summary,
    "check": _render_check,
    "generate_ids": _render_ids,
}
