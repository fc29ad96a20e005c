from __future__ import annotations

from itertools import count

from turnbot.adapters.base import ChannelAdapter
from turnbot.context import TurnContext
from turnbot.domain import Activity
from turnbot.logging_setup import get_logger


class InMemoryAdapter(ChannelAdapter):
    """Adapter that keeps every outgoing activity in memory.

    Used by the CLI and tests in place of a real channel. Ids are assigned
    sequentially so transcripts are deterministic.
    """

    def __init__(self) -> None:
        self.sent: list[Activity] = []
        self._ids = count(1)
        self._logger = get_logger(self.__class__.__name__)

    async def send_activities(self, context: TurnContext, activities: list[Activity]) -> list[str]:
        ids: list[str] = []
        for activity in activities:
            stored = activity.model_copy(update={"id": f"out-{next(self._ids)}"})
            self.sent.append(stored)
            ids.append(stored.id)
            self._logger.debug("Sent %s activity id=%s text=%r", stored.type, stored.id, stored.text)
        return ids

    # Introspection helpers for tests -------------------------------------------
    def transcript(self) -> list[str]:
        return [a.text or "" for a in self.sent]

    def clear(self) -> None:
        self.sent.clear()
