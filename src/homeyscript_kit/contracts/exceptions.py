"""Exception hierarchy for homeyscript-kit."""

from __future__ import annotations


class HomeyScriptKitError(Exception):
    """Base exception for all homeyscript-kit errors."""


class ConfigError(HomeyScriptKitError):
    """Configuration loading or validation failure."""


class ClientError(HomeyScriptKitError):
    """Base remote script client failure."""


class HTTPStatusError(ClientError):
    """The hub answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class AuthenticationError(ClientError):
    """Authentication/session failure."""


class InvalidScriptFilenameError(HomeyScriptKitError):
    """A pushed file does not follow the ``homeyscript.<name>.min.js`` convention."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid script filename format: {path}")
        self.path = path


class OperationCancelledError(HomeyScriptKitError):
    """The user declined a confirmation prompt."""

    def __init__(self, message: str = "Operation cancelled by the user") -> None:
        super().__init__(message)


class CommandError(HomeyScriptKitError):
    """A command failed before or outside its per-item batch.

    The original failure is chained as ``__cause__``.
    """


class RuntimeConfigError(HomeyScriptKitError):
    """A script invocation URL could not be parsed."""
