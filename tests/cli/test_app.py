from __future__ import annotations

import logging
import sys
from types import TracebackType
from typing import Any

import pytest

from homeyscript_kit.cli import build_parser, main, run_command
from homeyscript_kit.contracts.config import ConfigFile, SessionConfig
from homeyscript_kit.contracts.exceptions import CommandError, ConfigError, OperationCancelledError
from homeyscript_kit.contracts.results import NormalizedOperationResults
from homeyscript_kit.contracts.script import CommandEvent


class FakeCommand:
    def __init__(self, result: object) -> None:
        self.result = result
        self.calls: list[dict[str, Any]] = []

    async def __call__(
        self, event: CommandEvent, config: SessionConfig, *, skip_confirm: bool = False, progress: Any = None
    ) -> object:
        self.calls.append({"event": event, "config": config, "skip_confirm": skip_confirm, "progress": progress})
        return self.result


class FakeProgress:
    instances: list[FakeProgress] = []

    def __init__(self) -> None:
        self.closed = False
        FakeProgress.instances.append(self)

    def __enter__(self) -> FakeProgress:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.closed = True


def _close(coro: Any) -> None:
    coro.close()


@pytest.fixture
def fake_cli(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    rendered: list[object] = []
    command = FakeCommand(NormalizedOperationResults.empty())
    FakeProgress.instances = []
    config_file = ConfigFile(api_key="file-key", ip="1.1.1.1")
    monkeypatch.setattr("homeyscript_kit.cli.load_config_file", lambda _path: config_file)
    monkeypatch.setattr("homeyscript_kit.cli.HANDLERS", {"backup": command})
    monkeypatch.setattr("homeyscript_kit.cli.RichOperationProgress", FakeProgress)
    monkeypatch.setattr("homeyscript_kit.cli.render_result", rendered.append)
    return {"command": command, "rendered": rendered}


@pytest.mark.asyncio
async def test_run_command_dispatches_with_resolved_config(fake_cli: dict[str, Any]) -> None:
    args = build_parser().parse_args(["backup", "abc", "--ip", "2.2.2.2", "--dir", "snap", "-y"])

    result = await run_command(args)

    (call,) = fake_cli["command"].calls
    assert call["config"] == SessionConfig(api_key="file-key", ip="2.2.2.2")
    assert call["event"] == CommandEvent(flags={"dir": "snap"}, args=["abc"])
    assert call["skip_confirm"] is True
    assert isinstance(call["progress"], FakeProgress)
    assert FakeProgress.instances[0].closed
    assert fake_cli["rendered"] == [result]


@pytest.mark.asyncio
async def test_run_command_verbose_skips_progress(fake_cli: dict[str, Any]) -> None:
    args = build_parser().parse_args(["backup", "--verbose"])

    await run_command(args)

    (call,) = fake_cli["command"].calls
    assert call["progress"] is None
    assert call["config"].verbose is True
    assert FakeProgress.instances == []


def test_main_returns_zero_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("homeyscript_kit.cli.asyncio.run", _close)

    assert main(["list"]) == 0


def test_main_enables_verbose_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("homeyscript_kit.cli.asyncio.run", _close)
    captured: dict[str, object] = {}

    def _fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("homeyscript_kit.cli.logging.basicConfig", _fake_basic_config)

    main(["list", "--verbose"])

    assert captured["level"] == logging.DEBUG
    assert captured["stream"] == sys.stderr


@pytest.mark.parametrize(
    "error",
    [
        ConfigError("API key and IP address are required"),
        CommandError("Error pushing HomeyScripts"),
        OperationCancelledError(),
        RuntimeError("boom"),
    ],
)
def test_main_returns_one_on_any_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    error: Exception,
) -> None:
    def _raise(coro: Any) -> None:
        coro.close()
        raise error

    monkeypatch.setattr("homeyscript_kit.cli.asyncio.run", _raise)

    assert main(["sync"]) == 1
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert str(error) in captured.err


def test_main_keyboard_interrupt_aborts(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def _raise(coro: Any) -> None:
        coro.close()
        raise KeyboardInterrupt

    monkeypatch.setattr("homeyscript_kit.cli.asyncio.run", _raise)

    assert main(["restore"]) == 1
    assert "Aborted." in capsys.readouterr().err


def test_main_verbose_error_shows_cause(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("homeyscript_kit.cli.logging.basicConfig", lambda **_: None)

    def _raise(coro: Any) -> None:
        coro.close()
        try:
            raise FileNotFoundError("Backup directory 'backup': no such directory")
        except FileNotFoundError as exc:
            raise CommandError("Failed to restore script(s)") from exc

    monkeypatch.setattr("homeyscript_kit.cli.asyncio.run", _raise)

    assert main(["restore", "--verbose"]) == 1
    err = capsys.readouterr().err
    assert "error: Failed to restore script(s)" in err
    assert "cause: Backup directory 'backup': no such directory" in err
