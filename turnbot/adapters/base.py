from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from turnbot.context import TurnContext
from turnbot.domain import Activity

BotLogic = Callable[[TurnContext], Awaitable[Any]]


class ChannelAdapter(ABC):
    """Connects a channel to bot logic.

    Implementations deliver outgoing activities to their channel. Turning
    inbound activities into contexts is shared and lives here.
    """

    @abstractmethod
    async def send_activities(
        self, context: TurnContext, activities: list[Activity]
    ) -> list[str]:  # pragma: no cover - interface
        ...

    async def process_activity(self, activity: Activity, logic: BotLogic) -> Any:
        context = TurnContext(self, activity)
        return await logic(context)
