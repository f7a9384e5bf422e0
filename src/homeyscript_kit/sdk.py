"""SDK composition root for homeyscript-kit."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.exceptions import CommandError
from homeyscript_kit.contracts.results import NormalizedOperationResults
from homeyscript_kit.contracts.script import Script
from homeyscript_kit.engine import backup_scripts, delete_scripts, push_scripts, restore_scripts, write_scripts
from homeyscript_kit.engine.progress import OperationProgress

logger = logging.getLogger(__name__)

DEFAULT_PUSH_DIR = "dist"
DEFAULT_PULL_DIR = "packages"
DEFAULT_BACKUP_DIR = "backup"


def _list_files(directory: Path, suffix: str) -> list[str]:
    return sorted(entry.name for entry in directory.iterdir() if entry.name.endswith(suffix))


class HomeyScriptKit:
    """HomeyScript SDK public API.

    Every batch command returns :class:`NormalizedOperationResults`. Failures of
    single items are reported inside the results; failures that happen before
    the batch starts are raised as :class:`CommandError` with the original
    error as ``__cause__``.
    """

    def __init__(self, client: ScriptClient, *, progress: OperationProgress | None = None) -> None:
        self._client = client
        self._progress = progress

    async def list_scripts(self) -> list[Script]:
        try:
            return await self._client.list_scripts()
        except Exception as exc:
            raise CommandError("Failed to fetch HomeyScripts") from exc

    async def push(
        self,
        *,
        script_name: str | None = None,
        dir: str | Path | None = None,
    ) -> NormalizedOperationResults:
        """Push ``<dir>/<script_name>.js`` or every ``.js`` file in *dir*."""
        scripts_dir = Path(dir or DEFAULT_PUSH_DIR)
        try:
            if script_name:
                filenames = [f"{script_name}.js"]
            else:
                filenames = await asyncio.to_thread(_list_files, scripts_dir, ".js")
            paths = [scripts_dir / filename for filename in filenames]

            if not paths:
                logger.info("No scripts found in %s", scripts_dir)
                return NormalizedOperationResults.empty()

            return await push_scripts(self._client, paths, progress=self._progress)
        except Exception as exc:
            raise CommandError("Error pushing HomeyScripts") from exc

    async def pull(self, *, dir: str | Path | None = None) -> NormalizedOperationResults:
        target = Path(dir or DEFAULT_PULL_DIR)
        try:
            scripts = await self._client.list_scripts(resolve=True)
            if not scripts:
                return NormalizedOperationResults.empty()

            await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
            return await write_scripts(target, scripts, progress=self._progress)
        except Exception as exc:
            raise CommandError("Error pulling HomeyScripts") from exc

    async def backup(
        self,
        *,
        dir: str | Path | None = None,
        script_id: str | None = None,
    ) -> NormalizedOperationResults:
        """Back up one script by id, or every remote script."""
        target = Path(dir or DEFAULT_BACKUP_DIR)
        try:
            if script_id:
                script = await self._client.get_script(script_id)
                return await backup_scripts(target, [script], progress=self._progress)

            scripts = await self._client.list_scripts(resolve=True)
            if not scripts:
                return NormalizedOperationResults.empty()

            return await backup_scripts(target, scripts, progress=self._progress)
        except Exception as exc:
            raise CommandError("Error backing up HomeyScripts") from exc

    async def restore(
        self,
        *,
        dir: str | Path | None = None,
        script_name: str | None = None,
    ) -> NormalizedOperationResults:
        """Restore scripts from backup files.

        Without *script_name* every remote script is deleted first and the
        whole directory is restored.
        """
        source = Path(dir or DEFAULT_BACKUP_DIR)
        if not await asyncio.to_thread(source.is_dir):
            cause = FileNotFoundError(f"Backup directory '{source}': no such directory")
            raise CommandError("Failed to restore script(s)") from cause

        try:
            if script_name:
                filenames = [script_name if script_name.endswith(".json") else f"{script_name}.json"]
            else:
                filenames = await asyncio.to_thread(_list_files, source, ".json")

            if not filenames:
                return NormalizedOperationResults.empty()

            if not script_name:
                deleted = await delete_scripts(self._client, progress=self._progress)
                if deleted.summary is not None:
                    logger.info(
                        "Deleted %d remote scripts (%d failed)", deleted.summary.successful, deleted.summary.failed
                    )

            return await restore_scripts(self._client, source, filenames, progress=self._progress)
        except Exception as exc:
            raise CommandError("Failed to restore script(s)") from exc
