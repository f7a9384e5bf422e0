"""Command handlers bound to their confirmation and flag defaults."""

from __future__ import annotations

from homeyscript_kit.command import Command, command
from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.config import ConfirmConfig, SessionConfig
from homeyscript_kit.contracts.results import NormalizedOperationResults
from homeyscript_kit.contracts.script import CommandEvent, Script
from homeyscript_kit.engine.progress import OperationProgress
from homeyscript_kit.sdk import DEFAULT_BACKUP_DIR, DEFAULT_PULL_DIR, DEFAULT_PUSH_DIR, HomeyScriptKit


def target_as_dir(event: CommandEvent) -> CommandEvent:
    """Move a positional target into ``flags["dir"]``, overriding ``--dir``."""
    target = event.arg(0)
    if target is None or not target.strip():
        return event
    return event.model_copy(update={"flags": {**event.flags, "dir": target.strip()}, "args": event.args[1:]})


@command
async def list_handler(
    *,
    client: ScriptClient,
    event: CommandEvent,
    config: SessionConfig,
    progress: OperationProgress | None,
) -> list[Script]:
    return await HomeyScriptKit(client).list_scripts()


@command(
    confirm=ConfirmConfig(
        message="This may overwrite the contents of existing HomeyScripts. Are you sure you want to continue?"
    ),
    defaults={"dir": DEFAULT_PUSH_DIR},
)
async def push_handler(
    *,
    client: ScriptClient,
    event: CommandEvent,
    config: SessionConfig,
    progress: OperationProgress | None,
) -> NormalizedOperationResults:
    kit = HomeyScriptKit(client, progress=progress)
    return await kit.push(script_name=event.arg(0), dir=event.flag("dir"))


@command(
    confirm=ConfirmConfig(
        message=(
            "This may overwrite the contents of existing HomeyScripts in the '{event.flags.dir}' directory. "
            "Are you sure you want to continue?"
        )
    ),
    defaults={"dir": DEFAULT_PULL_DIR},
    prepare=target_as_dir,
)
async def pull_handler(
    *,
    client: ScriptClient,
    event: CommandEvent,
    config: SessionConfig,
    progress: OperationProgress | None,
) -> NormalizedOperationResults:
    kit = HomeyScriptKit(client, progress=progress)
    return await kit.pull(dir=event.flag("dir"))


@command(defaults={"dir": DEFAULT_BACKUP_DIR})
async def backup_handler(
    *,
    client: ScriptClient,
    event: CommandEvent,
    config: SessionConfig,
    progress: OperationProgress | None,
) -> NormalizedOperationResults:
    kit = HomeyScriptKit(client, progress=progress)
    return await kit.backup(dir=event.flag("dir"), script_id=event.arg(0))


@command(
    confirm=ConfirmConfig(message="This will delete all remote HomeyScripts. Are you sure?"),
    defaults={"dir": DEFAULT_BACKUP_DIR},
    prepare=target_as_dir,
)
async def restore_handler(
    *,
    client: ScriptClient,
    event: CommandEvent,
    config: SessionConfig,
    progress: OperationProgress | None,
) -> NormalizedOperationResults:
    directory = (event.flag("dir") or DEFAULT_BACKUP_DIR).strip()
    kit = HomeyScriptKit(client, progress=progress)
    return await kit.restore(dir=directory, script_name=event.flag("script"))


HANDLERS: dict[str, Command[object]] = {
    "list": list_handler,
    "sync": push_handler,
    "pull": pull_handler,
    "backup": backup_handler,
    "restore": restore_handler,
}

__all__ = [
    "HANDLERS",
    "backup_handler",
    "list_handler",
    "pull_handler",
    "push_handler",
    "restore_handler",
    "target_as_dir",
]
