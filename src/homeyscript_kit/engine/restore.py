"""Restore scripts from JSON snapshots and clear the hub before a full restore."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Sequence
from pathlib import Path

from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.results import (
    FulfilledResult,
    NormalizedOperationResults,
    OperationAction,
    RejectedResult,
)
from homeyscript_kit.contracts.script import Script, ScriptRef
from homeyscript_kit.engine.fanout import run_batch
from homeyscript_kit.engine.normalize import normalize_results
from homeyscript_kit.engine.progress import OperationProgress

logger = logging.getLogger(__name__)


def _backup_stem(filename: str) -> str:
    return filename.removesuffix(".json")


async def restore_scripts(
    client: ScriptClient,
    directory: str | Path,
    filenames: Sequence[str],
    *,
    progress: OperationProgress | None = None,
) -> NormalizedOperationResults:
    """Create one remote script per backup file in *directory*."""
    root = Path(directory)

    async def restore_one(filename: str) -> FulfilledResult:
        raw = await asyncio.to_thread((root / f"{_backup_stem(filename)}.json").read_text, encoding="utf-8")
        script = Script.model_validate(json.loads(raw))
        await client.create_script(script)
        return FulfilledResult(script=script, action=OperationAction.RESTORE)

    def reject(filename: str, error: Exception) -> RejectedResult:
        return RejectedResult(
            script=ScriptRef(id=filename, name=_backup_stem(filename)),
            reason=error,
            action=OperationAction.RESTORE,
        )

    results = await run_batch(filenames, restore_one, reject, phase="Restore", progress=progress)
    return normalize_results(results)


async def delete_scripts(
    client: ScriptClient,
    *,
    progress: OperationProgress | None = None,
) -> NormalizedOperationResults:
    """Delete every remote script. A failing listing call propagates."""
    existing = await client.list_scripts()
    if not existing:
        return NormalizedOperationResults.empty()

    async def delete_one(script: Script) -> FulfilledResult:
        await client.delete_script(script.id or "")
        return FulfilledResult(script=Script(id=script.id, name=script.name), action=OperationAction.DELETE)

    def reject(script: Script, error: Exception) -> RejectedResult:
        return RejectedResult(
            script=ScriptRef(id=script.id, name=script.name),
            reason=error,
            action=OperationAction.DELETE,
        )

    results = await run_batch(existing, delete_one, reject, phase="Delete", progress=progress)
    normalized = normalize_results(results)
    if normalized.summary is not None and normalized.summary.failed:
        logger.warning("Failed to delete %d of %d remote scripts", normalized.summary.failed, len(existing))
    return normalized
