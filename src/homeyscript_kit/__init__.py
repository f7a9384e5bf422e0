"""Public API surface for homeyscript-kit."""

__version__ = "1.0.0"

from homeyscript_kit.client import HomeyScriptClient, create_client
from homeyscript_kit.command import Command, command
from homeyscript_kit.config import load_config_file, merge_flags, resolve_session_config
from homeyscript_kit.contracts import (
    AuthenticationError,
    ClientError,
    CommandError,
    CommandEvent,
    ConfigError,
    ConfigFile,
    ConfirmConfig,
    FulfilledResult,
    HomeyScriptKitError,
    HTTPStatusError,
    InvalidScriptFilenameError,
    NormalizedOperationResults,
    OperationAction,
    OperationCancelledError,
    OperationResult,
    OperationSummary,
    RejectedResult,
    RuntimeConfigError,
    Script,
    ScriptClient,
    ScriptRef,
    SessionConfig,
)
from homeyscript_kit.engine import NullOperationProgress, OperationProgress, normalize_results
from homeyscript_kit.runtime import HskEvent, ScriptContext, ScriptEnvironment, parse_hsk_url, run_script
from homeyscript_kit.sdk import HomeyScriptKit
from homeyscript_kit.templating import render_template

__all__ = [
    "AuthenticationError",
    "ClientError",
    "Command",
    "CommandError",
    "CommandEvent",
    "ConfigError",
    "ConfigFile",
    "ConfirmConfig",
    "FulfilledResult",
    "HTTPStatusError",
    "HomeyScriptClient",
    "HomeyScriptKit",
    "HomeyScriptKitError",
    "HskEvent",
    "InvalidScriptFilenameError",
    "NormalizedOperationResults",
    "NullOperationProgress",
    "OperationAction",
    "OperationCancelledError",
    "OperationProgress",
    "OperationResult",
    "OperationSummary",
    "RejectedResult",
    "RuntimeConfigError",
    "Script",
    "ScriptClient",
    "ScriptContext",
    "ScriptEnvironment",
    "ScriptRef",
    "SessionConfig",
    "__version__",
    "command",
    "create_client",
    "load_config_file",
    "merge_flags",
    "normalize_results",
    "parse_hsk_url",
    "render_template",
    "resolve_session_config",
    "run_script",
]
