"""Write remote scripts into a local source tree."""

from __future__ import annotations

import asyncio
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


def script_source_path(directory: Path, name: str) -> Path:
    return directory / name / "index.js"


def _write_source(path: Path, code: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(code, encoding="utf-8")


async def write_scripts(
    directory: str | Path,
    scripts: Sequence[Script],
    *,
    progress: OperationProgress | None = None,
) -> NormalizedOperationResults:
    root = Path(directory)

    async def write_one(script: Script) -> FulfilledResult:
        await asyncio.to_thread(_write_source, script_source_path(root, script.name), script.code or "")
        return FulfilledResult(script=script, action=OperationAction.PULL)

    def reject(script: Script, error: Exception) -> RejectedResult:
        return RejectedResult(
            script=ScriptRef(id=script.id, name=script.name),
            reason=error,
            action=OperationAction.PULL,
        )

    results = await run_batch(scripts, write_one, reject, phase="Pull", progress=progress)
    return normalize_results(results)
