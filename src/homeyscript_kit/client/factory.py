"""Factory for creating client instances from session configuration.

Decouples credential resolution from the concrete client. The command wrapper
uses this factory so commands never build a client themselves.
"""

from __future__ import annotations

import logging

import httpx

from homeyscript_kit.client.http import HomeyScriptClient
from homeyscript_kit.contracts.config import SessionConfig
from homeyscript_kit.contracts.exceptions import ConfigError

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = (
    "API key and IP address are required. Use --api-key and --ip flags or configure them in .hsk.json"
)


def create_client(config: SessionConfig, *, http_client: httpx.AsyncClient | None = None) -> HomeyScriptClient:
    """Create a client for the hub described by *config*.

    The returned client is an async context manager.

    Raises:
        ConfigError: If the API key, or both IP and host, are missing.
    """
    if not config.api_key or not (config.ip or config.host):
        raise ConfigError(MISSING_CREDENTIALS_MESSAGE)

    host = config.base_host
    logger.debug("Using HomeyScript host %s", host)
    return HomeyScriptClient(host=host, token=config.api_key, http_client=http_client)
