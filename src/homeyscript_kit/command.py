"""Command wrapper: confirmation, client acquisition and dispatch."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Generic, Protocol, TypeVar

from homeyscript_kit.client import create_client
from homeyscript_kit.config import merge_flags
from homeyscript_kit.contracts.client import ScriptClient
from homeyscript_kit.contracts.config import ConfirmConfig, SessionConfig
from homeyscript_kit.contracts.exceptions import OperationCancelledError
from homeyscript_kit.contracts.script import CommandEvent
from homeyscript_kit.engine.progress import OperationProgress
from homeyscript_kit.templating import render_template

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

ConfirmPrompt = Callable[[str, bool], Any]
ClientFactory = Callable[[SessionConfig], ScriptClient]
EventHook = Callable[[CommandEvent], CommandEvent]


class CommandHandler(Protocol[T_co]):
    def __call__(
        self,
        *,
        client: ScriptClient,
        event: CommandEvent,
        config: SessionConfig,
        progress: OperationProgress | None,
    ) -> Awaitable[T_co]: ...


async def questionary_prompt(message: str, default: bool) -> bool | None:
    import questionary

    return await questionary.confirm(message, default=default).ask_async()


class Command(Generic[T]):
    """A command body wrapped with its confirmation and session handling.

    Calling the command runs ``PROMPT? -> ACQUIRE_CLIENT -> RUN_HANDLER``. A
    declined prompt raises :class:`OperationCancelledError` before any client
    is created.
    """

    def __init__(
        self,
        handler: CommandHandler[T],
        *,
        confirm: ConfirmConfig | None = None,
        defaults: Mapping[str, Any] | None = None,
        prepare: EventHook | None = None,
        prompt: ConfirmPrompt | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.handler = handler
        self.confirm = confirm
        self.defaults = dict(defaults or {})
        self.prepare = prepare
        self._prompt = prompt or questionary_prompt
        self._client_factory = client_factory or create_client

    def with_options(
        self,
        *,
        prompt: ConfirmPrompt | None = None,
        client_factory: ClientFactory | None = None,
    ) -> Command[T]:
        return Command(
            self.handler,
            confirm=self.confirm,
            defaults=self.defaults,
            prepare=self.prepare,
            prompt=prompt or self._prompt,
            client_factory=client_factory or self._client_factory,
        )

    async def __call__(
        self,
        event: CommandEvent,
        config: SessionConfig,
        *,
        skip_confirm: bool = False,
        progress: OperationProgress | None = None,
    ) -> T:
        event = event.model_copy(update={"flags": merge_flags(self.defaults, event.flags)})
        if self.prepare is not None:
            event = self.prepare(event)

        if self.confirm is not None and self.confirm.message and not skip_confirm:
            await self._ask(self.confirm, event, config)

        async with self._client_factory(config) as client:
            return await self.handler(client=client, event=event, config=config, progress=progress)

    async def _ask(self, confirm: ConfirmConfig, event: CommandEvent, config: SessionConfig) -> None:
        message = render_template(
            confirm.message,
            {"event": event.model_dump(), "config": config.model_dump()},
        )
        answer = self._prompt(message, confirm.default)
        if inspect.isawaitable(answer):
            answer = await answer
        if not answer:
            logger.debug("Confirmation declined: %s", message)
            raise OperationCancelledError()


def command(
    handler: CommandHandler[T] | None = None,
    *,
    confirm: ConfirmConfig | None = None,
    defaults: Mapping[str, Any] | None = None,
    prepare: EventHook | None = None,
) -> Any:
    """Wrap *handler* as a :class:`Command`; usable bare or with options::

        @command
        async def list_handler(*, client, event, config, progress): ...

        @command(confirm=ConfirmConfig(message="Sure?"))
        async def restore_handler(*, client, event, config, progress): ...

    *prepare* receives the event after defaults are merged and before the
    confirmation message is rendered.
    """
    if handler is not None:
        return Command(handler, confirm=confirm, defaults=defaults, prepare=prepare)

    def decorate(inner: CommandHandler[T]) -> Command[T]:
        return Command(inner, confirm=confirm, defaults=defaults, prepare=prepare)

    return decorate
