"""Push local script builds to the hub."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Sequence
from pathlib import Path

from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.exceptions import InvalidScriptFilenameError
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
from homeyscript_kit.engine.resolver import find_existing_script

SCRIPT_FILENAME_PATTERN = re.compile(r"homeyscript\.(.+)\.min\.js$")


def parse_script_name(path: str | Path) -> str:
    """Recover the remote script name from a ``homeyscript.<name>.min.js`` file name.

    Only the last path component is matched; parent directories are ignored.
    """
    match = SCRIPT_FILENAME_PATTERN.search(Path(path).name)
    if match is None:
        raise InvalidScriptFilenameError(str(path))
    return match.group(1)


async def push_scripts(
    client: ScriptClient,
    paths: Sequence[str | Path],
    *,
    progress: OperationProgress | None = None,
) -> NormalizedOperationResults:
    """Create or update one remote script per local file."""

    async def push_one(path: str | Path) -> FulfilledResult:
        name = parse_script_name(path)
        code = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
        existing = await find_existing_script(client, name)

        if existing is not None:
            updated = await client.update_script(Script(id=existing.id, name=name, code=code))
            return FulfilledResult(script=updated, action=OperationAction.UPDATE)

        created = await client.create_script(Script(name=name, code=code))
        return FulfilledResult(script=created, action=OperationAction.CREATE)

    def reject(path: str | Path, error: Exception) -> RejectedResult:
        return RejectedResult(script=ScriptRef(id=str(path), name=str(path)), reason=error)

    results = await run_batch(paths, push_one, reject, phase="Push", progress=progress)
    return normalize_results(results)
