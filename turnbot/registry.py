from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from turnbot.domain import EventLabel
from turnbot.errors import RegistryFrozenError, UnknownEventLabelError

Next = Callable[[], Awaitable[Any]]
Handler = Callable[[Any, Next], Awaitable[Any]]


def coerce_label(label: EventLabel | str) -> EventLabel:
    if isinstance(label, EventLabel):
        return label
    try:
        return EventLabel(label)
    except ValueError:
        raise UnknownEventLabelError(label) from None


def _is_async_callable(handler: Any) -> bool:
    if inspect.iscoroutinefunction(handler):
        return True
    return callable(handler) and inspect.iscoroutinefunction(getattr(handler, "__call__", None))


class HandlerRegistry:
    """Ordered handler chains keyed by event label.

    Binding happens during setup. Once ``freeze`` has been called the registry
    is read-only and may be shared by any number of concurrent dispatches.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventLabel, list[Handler]] = {}
        self._frozen = False

    def bind(self, label: EventLabel | str, handler: Handler) -> HandlerRegistry:
        key = coerce_label(label)
        if not _is_async_callable(handler):
            raise TypeError(f"handler for {key.value} must be an async callable, got {handler!r}")
        if self._frozen:
            raise RegistryFrozenError(key.value)
        self._handlers.setdefault(key, []).append(handler)
        return self

    def handlers_for(self, label: EventLabel | str) -> tuple[Handler, ...]:
        return tuple(self._handlers.get(coerce_label(label), ()))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def labels(self) -> list[EventLabel]:
        return [label for label, chain in self._handlers.items() if chain]

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._handlers.values())
