from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from homeyscript_kit.contracts.exceptions import RuntimeConfigError
from homeyscript_kit.runtime.script import FALLBACK_TAG, ScriptContext, ScriptEnvironment, run_script
from homeyscript_kit.runtime.url import HskEvent


class TagRecorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.logged: list[str] = []

    def __call__(self, name: str, value: Any) -> None:
        self.calls.append((name, value))

    def log(self, message: str) -> None:
        self.logged.append(message)


@pytest.mark.asyncio
async def test_run_script_clears_then_sets_result_tag() -> None:
    recorder = TagRecorder()
    env = ScriptEnvironment(tag=recorder, args=["hsk://lights/toggle?room=hall"], log=recorder.log)
    seen: list[tuple[HskEvent, ScriptContext]] = []

    def fn(event: HskEvent, context: ScriptContext) -> str:
        seen.append((event, context))
        return f"toggled {event.params['room']}"

    result = await run_script(fn, env)

    assert result == "toggled hall"
    assert recorder.calls == [("lights.toggle.Result", None), ("lights.toggle.Result", "toggled hall")]
    event, context = seen[0]
    assert context.filename == "lights"
    assert context.script_id == "lights.toggle"


@pytest.mark.asyncio
async def test_run_script_awaits_async_functions_and_tags() -> None:
    calls: list[tuple[str, Any]] = []

    async def tag(name: str, value: Any) -> None:
        calls.append((name, value))

    async def fn(event: HskEvent, context: ScriptContext) -> int:
        return 7

    env = ScriptEnvironment(tag=tag, args=["hsk://heating/boost/level"])

    assert await run_script(fn, env) == 7
    assert calls[-1] == ("heating.level.Result", 7)


@pytest.mark.asyncio
async def test_run_script_passes_last_execution_time() -> None:
    recorder = TagRecorder()
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    env = ScriptEnvironment(
        tag=recorder, args=["hsk://a/b"], last_executed=stamp, ms_since_last_executed=1500, log=recorder.log
    )
    contexts: list[ScriptContext] = []

    await run_script(lambda event, context: contexts.append(context), env)

    assert contexts[0].last_executed == "2024-01-02T03:04:05+00:00"
    assert contexts[0].ms_since_last_executed == 1500


@pytest.mark.asyncio
async def test_run_script_failure_sets_fallback_tag_and_reraises() -> None:
    recorder = TagRecorder()
    env = ScriptEnvironment(tag=recorder, args=["hsk://lights/toggle"], log=recorder.log)

    def fn(event: HskEvent, context: ScriptContext) -> None:
        raise ValueError("bulb missing")

    with pytest.raises(ValueError, match="bulb missing"):
        await run_script(fn, env)

    assert recorder.calls[-1] == (FALLBACK_TAG, "Error: bulb missing")
    assert recorder.logged == ["Script execution failed: bulb missing"]


@pytest.mark.asyncio
@pytest.mark.parametrize("args", [[], ["not a url"], [None]])
async def test_run_script_invalid_configuration(args: list[Any]) -> None:
    recorder = TagRecorder()
    env = ScriptEnvironment(tag=recorder, args=args, log=recorder.log)

    with pytest.raises(RuntimeConfigError, match="Invalid configuration"):
        await run_script(lambda event, context: None, env)

    assert recorder.calls == [(FALLBACK_TAG, "Error: Invalid configuration: missing or invalid script/command")]
