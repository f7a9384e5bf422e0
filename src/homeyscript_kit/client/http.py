"""HomeyScript HTTP client backed by httpx."""

from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Any

import httpx

from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.exceptions import ClientError, HTTPStatusError
from homeyscript_kit.contracts.script import Script

logger = logging.getLogger(__name__)

_API_PATH = "/api/app/com.athom.homeyscript"


def _require(script: Script, fields: tuple[str, ...]) -> None:
    for field in fields:
        if not getattr(script, field):
            raise ClientError(f"{field} is required")


class HomeyScriptClient(ScriptClient):
    """Client for the HomeyScript app API of a single hub.

    Use as an async context manager so the underlying connection pool is
    opened and closed around a command::

        async with HomeyScriptClient(host=host, token=token) as client:
            scripts = await client.list_scripts()
    """

    def __init__(self, *, host: str, token: str, http_client: httpx.AsyncClient | None = None) -> None:
        if not host:
            raise ClientError("Host is required")
        if not token:
            raise ClientError("Token is required")

        self._base_url = f"{host.rstrip('/')}{_API_PATH}"
        self._headers = {
            "accept": "application/json",
            "authorization": f"Bearer {token}",
            "content-type": "application/json",
        }
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> HomeyScriptClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(30.0))
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        if self._client is None:
            raise ClientError("Client session is not open; use 'async with' first")
        url = f"{self._base_url}/{path}"
        logger.debug("%s %s", method, url)
        response = await self._client.request(method, url, headers=self._headers, json=json)
        if not response.is_success:
            raise HTTPStatusError(response.status_code)
        if not response.content:
            return None
        return response.json()

    async def list_scripts(self, *, resolve: bool = False) -> list[Script]:
        """Return every remote script.

        With ``resolve=True`` each script is fetched individually so that
        ``code`` is populated.
        """
        payload = await self._request("GET", "script") or {}
        scripts = [Script.model_validate(record) for record in payload.values()]
        if not resolve:
            return scripts
        return list(await asyncio.gather(*(self.get_script(script.id or "") for script in scripts)))

    async def get_script(self, script_id: str) -> Script:
        if not script_id:
            raise ClientError("ID is required")
        return Script.model_validate(await self._request("GET", f"script/{script_id}"))

    async def create_script(self, script: Script) -> Script:
        """Create *script*; a script with the same name must not exist yet."""
        _require(script, ("name", "code"))

        existing = await self.list_scripts()
        if any(candidate.name == script.name for candidate in existing):
            raise ClientError(f'A script with name "{script.name}" already exists')

        return Script.model_validate(await self._request("POST", "script", json=script.to_payload()))

    async def update_script(self, script: Script) -> Script:
        _require(script, ("id", "name", "code"))
        return Script.model_validate(await self._request("PUT", f"script/{script.id}", json=script.to_payload()))

    async def delete_script(self, script_id: str) -> None:
        if not script_id:
            raise ClientError("ID is required")
        await self._request("DELETE", f"script/{script_id}")
