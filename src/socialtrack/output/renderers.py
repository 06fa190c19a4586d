"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from socialtrack.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from socialtrack.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: one path label per line for connections."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    if result.op == "connection":
        return "\n".join(str(label) for label in result.data.get("path", []))
    if result.op == "stats":
        d = result.data
        return f"{d['node_count']} {d['edge_count']} {d['average_friends']}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="st.ok"), Text(f"  {result.op}", style="st.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    style = "st.number" if isinstance(value, (int, float)) else ""
    console.print(Text(f"  {key}: ", style="st.key"), Text(str(value), style=style), sep="")


def _format_cost(cost: float) -> str:
    return f"{cost:g}"


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree and any other meta (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    annotations = span.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="st.error"),
        Text(f"  {result.op}", style="st.op"),
        Text(f"- {msg}"),
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_load(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    keys = ["path", "node_count", "edge_count"]
    if verbose:
        keys += ["edges_read", "nodes_added", "edges_added"]
    for key in keys:
        if key in result.data:
            _field(console, key, result.data[key])


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    summary = result.data.get("summary")
    if summary:
        console.print(summary)
    else:
        _render_generic(result, console, verbose=verbose)


def _render_connection(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the closest path one participant per line, then its totals."""
    d = result.data
    path = d.get("path", [])
    if not path:
        console.print("No path found.")
        return

    console.print("Closest path:")
    last = len(path) - 1
    for i, label in enumerate(path):
        style = "st.endpoint" if i in (0, last) else "st.person"
        console.print(Text("  "), Text(str(label), style=style), sep="")
    console.print()
    console.print(f"Number of intermediary friends: {d.get('intermediary_count', 0)}")
    if verbose:
        console.print(f"Total cost: {_format_cost(float(d.get('cost', 0.0)))}")
        console.print(f"Hops: {d.get('length', last)}")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "load": _render_load,
    "stats": _render_stats,
    "connection": _render_connection,
}
