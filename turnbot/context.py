from __future__ import annotations

from typing import TYPE_CHECKING

from turnbot.domain import Activity, ActivityTypes

if TYPE_CHECKING:
    from turnbot.adapters.base import ChannelAdapter


class TurnContext:
    """Everything known about one inbound activity while it is being handled.

    Created by an adapter per activity and discarded once the bot's logic
    returns.
    """

    def __init__(self, adapter: ChannelAdapter, activity: Activity | None) -> None:
        self.adapter = adapter
        self.activity = activity
        self.responded = False

    async def send_activity(self, activity_or_text: Activity | str) -> str | None:
        """Send a reply in the current conversation and return its id."""
        if isinstance(activity_or_text, str):
            outgoing = self._reply(activity_or_text)
        else:
            outgoing = activity_or_text
        ids = await self.send_activities([outgoing])
        return ids[0] if ids else None

    async def send_activities(self, activities: list[Activity]) -> list[str]:
        ids = await self.adapter.send_activities(self, activities)
        if any(a.type == ActivityTypes.MESSAGE.value for a in activities):
            self.responded = True
        return ids

    def _reply(self, text: str) -> Activity:
        if self.activity is None:
            return Activity(type=ActivityTypes.MESSAGE.value, text=text)
        return self.activity.create_reply(text)
