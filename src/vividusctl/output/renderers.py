"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from vividusctl.output.console import create_console, get_output, style_for_verdict

if TYPE_CHECKING:
    from rich.console import Console

    from vividusctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

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
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="viv.ok")
    op = Text(f"  {result.op}", style="viv.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="viv.key")
    if not style and (key == "path" or key.endswith("_file")):
        style = "viv.path"
    v = Text(str(value), style=style)
    console.print(k, v, sep="", end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="viv.error")
    op = Text(f"  {result.op}", style="viv.op")
    dash = Text(" — ")
    console.print(label, op, dash, Text(msg), sep="")

    if err and err.detail and (verbose or "names" in err.detail):
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_dependencies(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the resolved VIVIDUS version."""
    _status_line(console, result)
    version = result.data.get("version")
    _field(console, "version", version if version is not None else "unspecified", "viv.version")
    if verbose:
        _field(console, "count", result.data.get("count", 0))


def _render_stories(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a stories run: verdict, exit code, and the saved exit-code file."""
    _status_line(console, result)
    verdict = str(result.data.get("verdict", ""))
    _field(console, "verdict", verdict, style_for_verdict(verdict))
    _field(console, "exit_code", result.data.get("exit_code"))
    if result.data.get("exit_code_file"):
        _field(console, "exit_code_file", result.data["exit_code_file"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check_dependencies": _render_dependencies,
    "run_stories": _render_stories,
}
