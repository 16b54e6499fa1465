"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from shapematch.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from shapematch.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console"], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "matched" in result.data:
        return "true" if result.data["matched"] else "false"
    if "value" in result.data:
        return _dumps(result.data["value"])
    return str(result.data.get("schema", ""))


def _dumps(value: Any) -> str:
    return _json.dumps(value, separators=(",", ":"), default=repr)


def _status_line(console: Console, result: ServiceResult, *, ok: bool = True) -> None:
    label = Text("OK", style="sm.ok") if ok else Text("NO MATCH", style="sm.warning")
    console.print(label, Text(f"  {result.op}", style="sm.op"))


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    console.print(Text(f"  {key}: ", style="sm.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sm.error")
    op = Text(f"  {result.op}", style="sm.op")
    console.print(label, op, " — ", Text(msg), soft_wrap=True)
    if err is None:
        return

    path = err.detail.get("path")
    if path:
        _field(console, "at", path, style="sm.path")
        _field(console, "reason", err.detail.get("reason", ""))
    if verbose:
        for k, v in err.detail.items():
            if k not in ("path", "reason"):
                _field(console, k, v)


def _render_convert(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    console.print(_dumps(result.data.get("value")), markup=False, soft_wrap=True)


def _render_match(result: ServiceResult, console: Console) -> None:
    _status_line(console, result, ok=bool(result.data.get("matched")))


def _render_describe(result: ServiceResult, console: Console) -> None:
    console.print(Text(str(result.data.get("schema", "")), style="sm.schema"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, _dumps(value) if isinstance(value, (dict, list)) else value)


_OP_RENDERERS: dict[str, _Renderer] = {
    "convert": _render_convert,
    "match": _render_match,
    "loose_match": _render_match,
    "describe": _render_describe,
}
