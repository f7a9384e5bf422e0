"""Lookup of existing remote scripts by name."""

from __future__ import annotations

import logging

from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.script import Script

logger = logging.getLogger(__name__)


async def find_existing_script(client: ScriptClient, name: str) -> Script | None:
    """Return the first remote script named exactly *name*, or ``None``.

    Listing failures propagate unchanged.
    """
    matches = [script for script in await client.list_scripts() if script.name == name]
    if not matches:
        return None
    if len(matches) > 1:
        ids = ", ".join(str(script.id) for script in matches)
        logger.warning("Found %d remote scripts named %r (%s); using the first", len(matches), name, ids)
    return matches[0]
