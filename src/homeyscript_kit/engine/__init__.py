"""Batch executors and result reconciliation."""

from homeyscript_kit.engine.backup import backup_scripts
from homeyscript_kit.engine.fanout import run_batch
from homeyscript_kit.engine.normalize import group_by_status, normalize_results
from homeyscript_kit.engine.progress import NullOperationProgress, OperationProgress
from homeyscript_kit.engine.pull import write_scripts
from homeyscript_kit.engine.push import parse_script_name, push_scripts
from homeyscript_kit.engine.resolver import find_existing_script
from homeyscript_kit.engine.restore import delete_scripts, restore_scripts

__all__ = [
    "NullOperationProgress",
    "OperationProgress",
    "backup_scripts",
    "delete_scripts",
    "find_existing_script",
    "group_by_status",
    "normalize_results",
    "parse_script_name",
    "push_scripts",
    "restore_scripts",
    "run_batch",
    "write_scripts",
]
