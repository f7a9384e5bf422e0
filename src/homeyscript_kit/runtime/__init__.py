"""Helpers used by scripts at runtime on the hub."""

from homeyscript_kit.runtime.script import FALLBACK_TAG, ScriptContext, ScriptEnvironment, run_script
from homeyscript_kit.runtime.url import HskEvent, get_configuration, parse_hsk_url

__all__ = [
    "FALLBACK_TAG",
    "HskEvent",
    "ScriptContext",
    "ScriptEnvironment",
    "get_configuration",
    "parse_hsk_url",
    "run_script",
]
