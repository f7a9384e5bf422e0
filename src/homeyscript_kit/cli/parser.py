"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("homeyscript-kit")
    except PackageNotFoundError:
        return "0.0.0"


def _session_options() -> argparse.ArgumentParser:
    options = argparse.ArgumentParser(add_help=False)
    options.add_argument("--api-key", dest="api_key", default=None, help="API key for Homey authentication")
    options.add_argument("--ip", default=None, help="Homey IP address")
    options.add_argument("--host", default=None, help="Full Homey base URL (overrides --ip)")
    options.add_argument(
        "--https", "-s", action="store_true", default=None, help="Use HTTPS instead of HTTP to connect to Homey"
    )
    options.add_argument("--config", default=None, help="Path to .hsk.json (default: ./.hsk.json)")
    options.add_argument("--dir", "-d", default=None, help="Directory for script operations")
    options.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    options.add_argument("--verbose", action="store_true", help="Show debug logging and error causes")
    return options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hsk", description="Manage HomeyScripts on a Homey hub")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    options = _session_options()

    subparsers.add_parser("list", parents=[options], help="List all remote HomeyScripts")

    sync_parser = subparsers.add_parser("sync", parents=[options], help="Push local HomeyScripts to Homey")
    sync_parser.add_argument("target", nargs="?", default=None, help="Push only this script file (without .js)")

    pull_parser = subparsers.add_parser("pull", parents=[options], help="Pull remote HomeyScripts to a directory")
    pull_parser.add_argument("target", nargs="?", default=None, help="Target directory (default: packages)")

    backup_parser = subparsers.add_parser("backup", parents=[options], help="Back up HomeyScripts as JSON")
    backup_parser.add_argument("target", nargs="?", default=None, help="Back up only the script with this id")

    restore_parser = subparsers.add_parser("restore", parents=[options], help="Restore HomeyScripts from a backup")
    restore_parser.add_argument("target", nargs="?", default=None, help="Backup directory (default: backup)")
    restore_parser.add_argument("--script", default=None, help="Restore only this script, keeping the others")

    return parser


__all__ = ["build_parser"]
