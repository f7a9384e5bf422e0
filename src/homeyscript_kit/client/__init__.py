"""Remote HomeyScript client."""

from homeyscript_kit.client.factory import create_client
from homeyscript_kit.client.http import HomeyScriptClient

__all__ = ["HomeyScriptClient", "create_client"]
