"""Human and JSON formatting of ServiceResult.

Human output is rendered through Rich. Operations with a dedicated
renderer (``types``) get a table; everything else falls back to
``OK: <op>`` followed by indented key/value lines.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from clubctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from clubctl.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def _render_generic(result: ServiceResult, console: Console) -> None:
    header = Text()
    header.append("OK", style="club.ok")
    header.append(": ")
    header.append(result.op, style="club.op")
    console.print(header, soft_wrap=True)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        line = Text("  ")
        line.append(f"{key}:", style="club.key")
        line.append(f" {value}")
        console.print(line, soft_wrap=True)


def _render_types(result: ServiceResult, console: Console) -> None:
    table = Table(title="Membership types")
    table.add_column("Type", style="club.type")
    table.add_column("Price", style="club.price", justify="right")
    for item in result.data.get("items", []):
        table.add_row(str(item["type"]), f"{item['price']}")
    console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    error_msg = result.error.message if result.error else "Unknown error"
    line = Text()
    line.append("ERROR", style="club.error")
    line.append(f": {result.op} - {error_msg}")
    console.print(line, soft_wrap=True)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Any], None]] = {
    "types": _render_types,
}
