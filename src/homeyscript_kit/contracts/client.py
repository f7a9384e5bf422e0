"""Remote script client contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from homeyscript_kit.contracts.script import Script


class ScriptClient(ABC):
    @abstractmethod
    async def __aenter__(self) -> ScriptClient: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_scripts(self, *, resolve: bool = False) -> list[Script]: ...  # pragma: no cover

    @abstractmethod
    async def get_script(self, script_id: str) -> Script: ...  # pragma: no cover

    @abstractmethod
    async def create_script(self, script: Script) -> Script: ...  # pragma: no cover

    @abstractmethod
    async def update_script(self, script: Script) -> Script: ...  # pragma: no cover

    @abstractmethod
    async def delete_script(self, script_id: str) -> None: ...  # pragma: no cover
