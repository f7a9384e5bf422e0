"""Execution helper for scripts running on the hub."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from homeyscript_kit.contracts.exceptions import RuntimeConfigError
from homeyscript_kit.runtime.url import HskEvent, get_configuration

logger = logging.getLogger(__name__)

FALLBACK_TAG = "script.error.Result"

TagFn = Callable[[str, Any], Any]


@dataclass
class ScriptEnvironment:
    """Capabilities the hub provides to a running script.

    Passed explicitly instead of relying on interpreter globals.
    """

    tag: TagFn
    args: list[Any] = field(default_factory=list)
    log: Callable[[str], None] = logger.error
    last_executed: datetime | None = None
    ms_since_last_executed: int | None = None


@dataclass
class ScriptContext:
    filename: str
    script_id: str
    last_executed: str | None = None
    ms_since_last_executed: int | None = None


async def _tag(env: ScriptEnvironment, name: str, value: Any) -> None:
    outcome = env.tag(name, value)
    if inspect.isawaitable(outcome):
        await outcome


async def run_script(
    fn: Callable[[HskEvent, ScriptContext], Any],
    env: ScriptEnvironment,
) -> Any:
    """Run *fn* with the event parsed from the first script argument.

    The result tag is cleared before *fn* runs and set to its return value
    afterwards. On failure ``script.error.Result`` receives the error message
    and the exception is re-raised.
    """
    try:
        event = get_configuration(env.args[0] if env.args else None)
        if event is None:
            raise RuntimeConfigError("Invalid configuration: missing or invalid script/command")

        await _tag(env, event.result, None)

        context = ScriptContext(
            filename=event.script,
            script_id=f"{event.script}.{event.command}",
            last_executed=env.last_executed.isoformat() if env.last_executed is not None else None,
            ms_since_last_executed=env.ms_since_last_executed,
        )

        result = fn(event, context)
        if inspect.isawaitable(result):
            result = await result

        await _tag(env, event.result, result)
        return result
    except Exception as exc:
        env.log(f"Script execution failed: {exc}")
        await _tag(env, FALLBACK_TAG, f"Error: {exc}")
        raise
