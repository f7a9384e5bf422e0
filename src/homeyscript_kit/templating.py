"""Best-effort ``{a.b.c}`` placeholder interpolation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER = re.compile(r"\{([^{}\s]+)\}")
_MISSING = object()


def _lookup(context: Any, path: str) -> Any:
    current = context
    for key in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(key, _MISSING)
        else:
            current = getattr(current, key, _MISSING)
        if current is _MISSING or current is None:
            return _MISSING
    return current


def render_template(template: str, context: Mapping[str, Any]) -> str:
    """Replace each ``{dotted.path}`` found in *context*; unknown paths stay as written."""

    def substitute(match: re.Match[str]) -> str:
        value = _lookup(context, match.group(1))
        return match.group(0) if value is _MISSING else str(value)

    return _PLACEHOLDER.sub(substitute, template)
