"""Parsing of ``hsk://`` invocation URLs."""

from __future__ import annotations

import logging
import re
from urllib.parse import parse_qsl

from pydantic import BaseModel, Field

from homeyscript_kit.contracts.exceptions import RuntimeConfigError

logger = logging.getLogger(__name__)

HSK_URL_PATTERN = re.compile(
    r"^hsk://(?P<script>[^/]+)/(?P<command>[^/?]+)(?:/(?P<result>[^/?]+))?(?:\?(?P<query>.+))?$"
)


class HskEvent(BaseModel):
    script: str
    command: str
    result: str
    params: dict[str, str] = Field(default_factory=dict)


def parse_hsk_url(url: str) -> HskEvent:
    """Parse ``hsk://script/command[/result][?query]``.

    ``result`` is the tag name the script reports to: ``<script>.<result>.Result``
    when the URL has a result segment, ``<script>.<command>.Result`` otherwise.
    """
    match = HSK_URL_PATTERN.match(url)
    if match is None:
        raise RuntimeConfigError("Invalid HSK URL format. Expected: hsk://script/command[/result]?params")

    script = match.group("script").strip()
    command = match.group("command").strip()
    if not script:
        raise RuntimeConfigError("Script name cannot be empty")
    if not command:
        raise RuntimeConfigError("Command name cannot be empty")

    path_result = match.group("result")
    tag_name = f"{script}.{path_result}.Result" if path_result else f"{script}.{command}.Result"

    query = match.group("query")
    params = dict(parse_qsl(query, keep_blank_values=True)) if query else {}

    return HskEvent(script=script, command=command, result=tag_name, params=params)


def get_configuration(url: object) -> HskEvent | None:
    """Like :func:`parse_hsk_url` but returns ``None`` for missing or invalid input."""
    if not url or not isinstance(url, str):
        return None
    try:
        return parse_hsk_url(url)
    except RuntimeConfigError as exc:
        logger.error("Failed to parse HSK configuration: %s", exc)
        return None
