"""Public contracts for homeyscript-kit."""

from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.config import ConfigFile, ConfirmConfig, SessionConfig
from homeyscript_kit.contracts.exceptions import (
    AuthenticationError,
    ClientError,
    CommandError,
    ConfigError,
    HomeyScriptKitError,
    HTTPStatusError,
    InvalidScriptFilenameError,
    OperationCancelledError,
    RuntimeConfigError,
)
from homeyscript_kit.contracts.results import (
    FulfilledResult,
    NormalizedOperationResults,
    OperationAction,
    OperationResult,
    OperationSummary,
    RejectedResult,
)
from homeyscript_kit.contracts.script import CommandEvent, Script, ScriptRef

__all__ = [
    "AuthenticationError",
    "ClientError",
    "CommandError",
    "CommandEvent",
    "ConfigError",
    "ConfigFile",
    "ConfirmConfig",
    "FulfilledResult",
    "HTTPStatusError",
    "HomeyScriptKitError",
    "InvalidScriptFilenameError",
    "NormalizedOperationResults",
    "OperationAction",
    "OperationCancelledError",
    "OperationResult",
    "OperationSummary",
    "RejectedResult",
    "RuntimeConfigError",
    "Script",
    "ScriptClient",
    "ScriptRef",
    "SessionConfig",
]
