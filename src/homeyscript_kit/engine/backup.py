"""Snapshot remote scripts as JSON files."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from pathlib import Path

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


def backup_path(directory: Path, name: str) -> Path:
    return directory / f"{name}.json"


def serialize_script(script: Script) -> str:
    return json.dumps(script.to_payload(), indent=2, ensure_ascii=False)


async def backup_scripts(
    directory: str | Path,
    scripts: Sequence[Script],
    *,
    progress: OperationProgress | None = None,
) -> NormalizedOperationResults:
    """Write the full record of every script to ``<directory>/<name>.json``."""
    root = Path(directory)
    await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

    async def backup_one(script: Script) -> FulfilledResult:
        target = backup_path(root, script.name)
        await asyncio.to_thread(target.write_text, serialize_script(script), encoding="utf-8")
        return FulfilledResult(script=script, action=OperationAction.BACKUP)

    def reject(script: Script, error: Exception) -> RejectedResult:
        return RejectedResult(
            script=ScriptRef(id=script.id, name=script.name),
            reason=error,
            action=OperationAction.BACKUP,
        )

    results = await run_batch(scripts, backup_one, reject, phase="Backup", progress=progress)
    return normalize_results(results)
