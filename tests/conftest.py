"""Shared test fixtures for homeyscript-kit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from homeyscript_kit.contracts.config import SessionConfig
from homeyscript_kit.contracts.script import Script
from tests.fakes.client import FakeScriptClient


@pytest.fixture
def fake_client() -> FakeScriptClient:
    """An empty in-memory client."""
    return FakeScriptClient()


@pytest.fixture
def sample_scripts() -> list[Script]:
    """Three remote scripts with full records."""
    return [
        Script(id="abc", name="lights", code="console.log(1)", version="1", lastExecuted="2024-01-02T03:04:05.000Z"),
        Script(id="def", name="heating", code="console.log(2)", version="2"),
        Script(id="ghi", name="alarm", code=None, version="3"),
    ]


@pytest.fixture
def session_config() -> SessionConfig:
    return SessionConfig(api_key="secret", ip="192.168.1.10")


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """A push source directory with one valid build."""
    directory = tmp_path / "dist"
    directory.mkdir()
    (directory / "homeyscript.lights.min.js").write_text("console.log(1)", encoding="utf-8")
    return directory
