from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from turnbot.domain import EventLabel
from turnbot.errors import MissingActivityError, MissingActivityTypeError, MissingContextError
from turnbot.logging_setup import get_logger
from turnbot.registry import Handler, HandlerRegistry
from turnbot.routing import next_label


class _FirstResult:
    """Keeps the first non-None value offered to it."""

    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: Any = None

    def offer(self, value: Any) -> None:
        if value is not None and self.value is None:
            self.value = value


class ActivityHandler:
    """Event-emitting base for bots.

    Bind one or more handlers per event label, then feed each inbound
    activity to ``run``. For every activity the following labels fire, each
    only once the previous label's handlers have all called ``next``:

    * Turn - every activity
    * type-specific - Message, ConversationUpdate, Event or UnrecognizedActivityType
    * sub-type - MembersAdded / MembersRemoved, TokenResponseEvent
    * Dialog - always last

    A handler stops propagation by returning without awaiting ``next()``::

        bot = ActivityHandler()

        async def echo(context, next):
            await context.send_activity(f"Echo: {context.activity.text}")
            await next()

        bot.on_message(echo)
        await bot.run(context)

    The first non-None value returned by any handler (innermost first) is the
    return value of ``run``.
    """

    def __init__(self, registry: HandlerRegistry | None = None) -> None:
        self.registry = registry if registry is not None else HandlerRegistry()
        self._logger = get_logger(self.__class__.__name__)

    # Binding --------------------------------------------------------------------
    def on(self, label: EventLabel | str, handler: Handler) -> ActivityHandler:
        self.registry.bind(label, handler)
        return self

    def on_turn(self, handler: Handler) -> ActivityHandler:
        """Fires for every incoming activity, regardless of type."""
        return self.on(EventLabel.TURN, handler)

    def on_message(self, handler: Handler) -> ActivityHandler:
        """Message activities. ``context.activity.text`` is not always present."""
        return self.on(EventLabel.MESSAGE, handler)

    def on_conversation_update(self, handler: Handler) -> ActivityHandler:
        """Any conversation update, whether or not members changed."""
        return self.on(EventLabel.CONVERSATION_UPDATE, handler)

    def on_members_added(self, handler: Handler) -> ActivityHandler:
        """Conversation updates where ``members_added`` has at least one entry."""
        return self.on(EventLabel.MEMBERS_ADDED, handler)

    def on_members_removed(self, handler: Handler) -> ActivityHandler:
        """Conversation updates with members removed and none added."""
        return self.on(EventLabel.MEMBERS_REMOVED, handler)

    def on_event(self, handler: Handler) -> ActivityHandler:
        """Event activities; their meaning is defined by ``activity.name``."""
        return self.on(EventLabel.EVENT, handler)

    def on_token_response_event(self, handler: Handler) -> ActivityHandler:
        """Events named ``tokens/response``, sent during an OAuth flow."""
        return self.on(EventLabel.TOKEN_RESPONSE_EVENT, handler)

    def on_unrecognized_activity_type(self, handler: Handler) -> ActivityHandler:
        """Activities whose type has no dedicated label. Inspect ``activity.type``."""
        return self.on(EventLabel.UNRECOGNIZED_ACTIVITY_TYPE, handler)

    def on_dialog(self, handler: Handler) -> ActivityHandler:
        """Last stage of every turn; hand off to dialog management here."""
        return self.on(EventLabel.DIALOG, handler)

    # Dispatch -------------------------------------------------------------------
    async def run(self, context: Any) -> Any:
        if context is None:
            raise MissingContextError()
        activity = getattr(context, "activity", None)
        if activity is None:
            raise MissingActivityError()
        if not getattr(activity, "type", None):
            raise MissingActivityTypeError()

        if not self.registry.frozen:
            self.registry.freeze()
            self._logger.debug("Registry frozen with %d handler(s)", len(self.registry))

        self._logger.debug("Dispatching activity type=%s id=%s", activity.type, getattr(activity, "id", None))
        return await self._emit(context, activity, EventLabel.TURN)

    # Internals ------------------------------------------------------------------
    async def _emit(self, context: Any, activity: Any, label: EventLabel) -> Any:
        async def descend() -> Any:
            # Chosen only now so earlier handlers may have edited the activity.
            child = next_label(label, activity)
            if child is None:
                return None
            return await self._emit(context, activity, child)

        return await self._run_chain(context, label, descend)

    async def _run_chain(
        self,
        context: Any,
        label: EventLabel,
        on_exhausted: Callable[[], Awaitable[Any]],
    ) -> Any:
        handlers = self.registry.handlers_for(label)
        result = _FirstResult()
        self._logger.debug("Emitting %s to %d handler(s)", label.value, len(handlers))

        async def run_handler(index: int) -> Any:
            if index < len(handlers):
                value = await handlers[index](context, lambda: run_handler(index + 1))
            else:
                value = await on_exhausted()
            result.offer(value)
            return result.value

        await run_handler(0)
        return result.value
