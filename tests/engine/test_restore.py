from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from homeyscript_kit.contracts.exceptions import HTTPStatusError
from homeyscript_kit.contracts.results import FulfilledResult, OperationAction, OperationSummary, RejectedResult
from homeyscript_kit.contracts.script import Script
from homeyscript_kit.engine.restore import delete_scripts, restore_scripts
from tests.fakes.client import FakeScriptClient


def _write_backup(directory: Path, name: str, payload: object) -> None:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    (directory / f"{name}.json").write_text(text, encoding="utf-8")


@pytest.mark.asyncio
async def test_restore_scripts_isolates_corrupt_backup(tmp_path: Path, fake_client: FakeScriptClient) -> None:
    _write_backup(tmp_path, "a", "{not json")
    _write_backup(tmp_path, "b", {"id": "old-b", "name": "b", "code": "console.log('b')"})

    normalized = await restore_scripts(fake_client, tmp_path, ["a.json", "b.json"])

    assert normalized.summary == OperationSummary(successful=1, failed=1)
    assert normalized.results is not None
    first, second = normalized.results
    assert isinstance(first, RejectedResult)
    assert isinstance(first.reason, json.JSONDecodeError)
    assert first.script.name == "a"
    assert first.action is OperationAction.RESTORE
    assert isinstance(second, FulfilledResult)
    assert second.action is OperationAction.RESTORE
    assert [script.name for script in fake_client.create_calls] == ["b"]


@pytest.mark.asyncio
async def test_restore_scripts_accepts_names_without_extension(tmp_path: Path, fake_client: FakeScriptClient) -> None:
    _write_backup(tmp_path, "lights", {"name": "lights", "code": "x"})

    normalized = await restore_scripts(fake_client, tmp_path, ["lights"])

    assert normalized.summary == OperationSummary(successful=1, failed=0)


@pytest.mark.asyncio
async def test_restore_scripts_rejects_record_without_name(tmp_path: Path, fake_client: FakeScriptClient) -> None:
    _write_backup(tmp_path, "nameless", {"code": "x"})

    normalized = await restore_scripts(fake_client, tmp_path, ["nameless.json"])

    assert isinstance(normalized.rejected[0].reason, ValidationError)
    assert fake_client.create_calls == []


@pytest.mark.asyncio
async def test_restore_scripts_rejects_duplicate_of_existing_remote(tmp_path: Path) -> None:
    client = FakeScriptClient([Script(id="abc", name="lights")])
    _write_backup(tmp_path, "lights", {"name": "lights", "code": "x"})

    normalized = await restore_scripts(client, tmp_path, ["lights.json"])

    assert normalized.summary == OperationSummary(successful=0, failed=1)
    assert "already exists" in str(normalized.rejected[0].reason)


@pytest.mark.asyncio
async def test_delete_scripts_removes_everything(sample_scripts: list[Script]) -> None:
    client = FakeScriptClient(sample_scripts)

    normalized = await delete_scripts(client)

    assert normalized.summary == OperationSummary(successful=3, failed=0)
    assert sorted(client.delete_calls) == ["abc", "def", "ghi"]
    assert client.scripts == {}
    assert all(result.action is OperationAction.DELETE for result in normalized.fulfilled)


@pytest.mark.asyncio
async def test_delete_scripts_reports_failure_of_middle_item(caplog: pytest.LogCaptureFixture) -> None:
    client = FakeScriptClient([Script(id="1", name="one"), Script(id="2", name="two"), Script(id="3", name="three")])
    client.fail_delete["2"] = HTTPStatusError(500)

    with caplog.at_level(logging.WARNING, logger="homeyscript_kit.engine.restore"):
        normalized = await delete_scripts(client)

    assert normalized.summary == OperationSummary(successful=2, failed=1)
    assert normalized.results is not None
    assert [result.status for result in normalized.results] == ["fulfilled", "rejected", "fulfilled"]
    rejected = normalized.results[1]
    assert isinstance(rejected, RejectedResult)
    assert normalized.rejected == [rejected]
    assert rejected.script.id == "2"
    assert rejected.action is OperationAction.DELETE
    assert str(rejected.reason) == "HTTP error! status: 500"
    assert sorted(client.scripts) == ["2"]
    assert "Failed to delete 1 of 3 remote scripts" in caplog.text


@pytest.mark.asyncio
async def test_delete_scripts_with_nothing_remote_is_empty(fake_client: FakeScriptClient) -> None:
    normalized = await delete_scripts(fake_client)

    assert normalized.is_empty
    assert fake_client.delete_calls == []


@pytest.mark.asyncio
async def test_delete_scripts_propagates_listing_failure(fake_client: FakeScriptClient) -> None:
    fake_client.fail_list = HTTPStatusError(401)

    with pytest.raises(HTTPStatusError):
        await delete_scripts(fake_client)
