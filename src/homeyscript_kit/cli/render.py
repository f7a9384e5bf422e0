"""Terminal rendering of command results and errors."""

from __future__ import annotations

import traceback
from datetime import datetime

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from homeyscript_kit.contracts.results import NormalizedOperationResults, OperationResult, RejectedResult
from homeyscript_kit.contracts.script import Script
from homeyscript_kit.engine.normalize import group_by_status


def format_last_executed(value: str | int | None) -> str:
    if value is None or value == "":
        return "Never"
    if not isinstance(value, str):
        return str(value)
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return value


def scripts_table(scripts: list[Script]) -> Table:
    table = Table(header_style="cyan", border_style="bright_black")
    for header in ("Name", "Version", "Last Executed", "ID"):
        table.add_column(header)
    for script in scripts:
        version = "" if script.version is None else str(script.version)
        table.add_row(script.name, version, format_last_executed(script.last_executed), script.id or "")
    return table


def _result_line(result: OperationResult) -> Text:
    action = result.action.value if result.action is not None else "UNKNOWN"
    line = Text("  • ")
    line.append(f"{result.script.name or 'Unknown'} ({action}) ")
    line.append(f"({result.script.id or 'Unknown'})", style="dim")
    if isinstance(result, RejectedResult):
        line.append(f"\n      {result.reason}", style="red")
    return line


def operation_results(normalized: NormalizedOperationResults) -> RenderableType:
    if normalized.is_empty:
        return Text("Nothing to do", style="yellow")

    sections: list[RenderableType] = []
    groups = group_by_status(normalized)
    for status, label, style in (("fulfilled", "SUCCESSFUL", "bold green"), ("rejected", "FAILED", "bold red")):
        results = groups[status]
        if not results:
            continue
        sections.append(Text(f"{len(results)} {label}", style=style))
        sections.extend(_result_line(result) for result in results)
        sections.append(Text(""))
    return Group(*sections)


def render_result(result: object, console: Console | None = None) -> None:
    out = console or Console()
    if isinstance(result, list):
        out.print(scripts_table(result))
    elif isinstance(result, NormalizedOperationResults):
        out.print(operation_results(result))


def format_error(error: BaseException, *, verbose: bool = False) -> str:
    lines = [f"error: {error}"]
    if not verbose:
        return "\n".join(lines)

    cause = error.__cause__
    while cause is not None:
        lines.append(f"  cause: {cause}")
        cause = cause.__cause__
    lines.append("")
    lines.extend(line.rstrip("\n") for line in traceback.format_exception(error))
    return "\n".join(lines)


__all__ = ["format_error", "operation_results", "render_result", "scripts_table"]
