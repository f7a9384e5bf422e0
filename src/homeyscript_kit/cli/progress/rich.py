"""Live per-batch progress bars with a running failure count."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn

from homeyscript_kit.contracts.results import OperationResult, OperationSummary
from homeyscript_kit.engine.progress import OperationProgress

_PHASE_STYLES = {
    "Push": "green",
    "Pull": "cyan",
    "Backup": "blue",
    "Delete": "red",
    "Restore": "magenta",
}


@dataclass
class _Batch:
    task_id: TaskID
    failed: int = 0


def _failures(count: int) -> str:
    return f"[red]{count} failed[/red]" if count else ""


class RichOperationProgress(OperationProgress):
    """One bar per batch; failed items are counted next to the bar as they land.

    The live display starts with the first batch, so a confirmation prompt
    shown before any work begins is not overdrawn::

        with RichOperationProgress() as progress:
            result = await push_handler(event, config, progress=progress)
    """

    def __init__(self, console: Console | None = None) -> None:
        self._live = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>10}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TextColumn("{task.fields[failures]}"),
            console=console or Console(stderr=True),
        )
        self._batches: dict[str, _Batch] = {}
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def failed(self, phase: str) -> int:
        batch = self._batches.get(phase)
        return batch.failed if batch is not None else 0

    def __enter__(self) -> RichOperationProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._running:
            self._live.stop()
            self._running = False

    def batch_start(self, phase: str, total: int) -> None:
        if not self._running:
            self._live.start()
            self._running = True
        style = _PHASE_STYLES.get(phase, "white")
        task_id = self._live.add_task(f"[{style}]{phase}[/]", total=total, failures="")
        self._batches[phase] = _Batch(task_id=task_id)

    def item_done(self, phase: str, result: OperationResult) -> None:
        batch = self._batches.get(phase)
        if batch is None:
            return
        if result.status == "rejected":
            batch.failed += 1
        self._live.update(batch.task_id, advance=1, failures=_failures(batch.failed))

    def batch_done(self, phase: str, summary: OperationSummary) -> None:
        batch = self._batches.get(phase)
        if batch is None:
            return
        batch.failed = summary.failed
        total = summary.successful + summary.failed
        self._live.update(batch.task_id, total=total, completed=total, failures=_failures(summary.failed))

    def batch_error(self, phase: str, error: BaseException) -> None:
        batch = self._batches.get(phase)
        if batch is None:
            return
        self._live.update(batch.task_id, description=f"[red]✗ {phase}[/red]")
