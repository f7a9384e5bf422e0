"""Batch observers.

Every executor runs its items through :func:`homeyscript_kit.engine.fanout.run_batch`,
which reports to an :class:`OperationProgress`. Observers see each finished
item with its result, so they can tell successes from failures while the
batch is still running.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from homeyscript_kit.contracts.results import OperationResult, OperationSummary


class OperationProgress(ABC):
    @abstractmethod
    def batch_start(self, phase: str, total: int) -> None:
        """*total* items of *phase* are about to run concurrently."""
        ...  # pragma: no cover

    @abstractmethod
    def item_done(self, phase: str, result: OperationResult) -> None:
        ...  # pragma: no cover

    @abstractmethod
    def batch_done(self, phase: str, summary: OperationSummary) -> None:
        """Every item of *phase* has a result; *summary* holds the counts."""
        ...  # pragma: no cover

    @abstractmethod
    def batch_error(self, phase: str, error: BaseException) -> None:
        """The batch stopped before all items finished, e.g. on cancellation."""
        ...  # pragma: no cover


class NullOperationProgress(OperationProgress):
    def batch_start(self, phase: str, total: int) -> None:
        pass

    def item_done(self, phase: str, result: OperationResult) -> None:
        pass

    def batch_done(self, phase: str, summary: OperationSummary) -> None:
        pass

    def batch_error(self, phase: str, error: BaseException) -> None:
        pass
