"""Ordered fan-out/fan-in over independent per-item actions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar, cast

from homeyscript_kit.contracts.results import FulfilledResult, OperationResult, RejectedResult
from homeyscript_kit.engine.normalize import normalize_results
from homeyscript_kit.engine.progress import NullOperationProgress, OperationProgress

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_batch(
    items: Sequence[T],
    attempt: Callable[[T], Awaitable[FulfilledResult]],
    reject: Callable[[T, Exception], RejectedResult],
    *,
    phase: str,
    progress: OperationProgress | None = None,
) -> list[OperationResult]:
    """Run *attempt* for every item concurrently and collect one result per item.

    Results are stored by input position, so the returned list follows the
    order of *items* whatever the completion order. A failing item is turned
    into a rejected result by *reject* and never affects its siblings.
    """
    observer = progress or NullOperationProgress()
    slots: list[OperationResult | None] = [None] * len(items)

    async def run_item(index: int, item: T) -> None:
        result: OperationResult
        try:
            result = await attempt(item)
        except Exception as exc:
            logger.debug("%s item %d failed: %s", phase, index, exc)
            result = reject(item, exc)
        slots[index] = result
        observer.item_done(phase, result)

    observer.batch_start(phase, len(items))
    try:
        async with asyncio.TaskGroup() as tg:
            for index, item in enumerate(items):
                tg.create_task(run_item(index, item))
    except BaseException as exc:
        observer.batch_error(phase, exc)
        raise

    results = cast(list[OperationResult], slots)
    summary = normalize_results(results).summary
    if summary is not None:
        observer.batch_done(phase, summary)
    return results
