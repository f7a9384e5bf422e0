"""Command-line interface for homeyscript-kit."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from homeyscript_kit.cli.app import build_event as build_event
from homeyscript_kit.cli.app import main as main
from homeyscript_kit.cli.app import run_command as run_command
from homeyscript_kit.cli.parser import build_parser as build_parser
from homeyscript_kit.cli.progress.rich import RichOperationProgress as RichOperationProgress
from homeyscript_kit.cli.render import format_error as format_error
from homeyscript_kit.cli.render import render_result as render_result
from homeyscript_kit.commands import HANDLERS as HANDLERS
from homeyscript_kit.config import load_config_file as load_config_file
from homeyscript_kit.config import resolve_session_config as resolve_session_config
