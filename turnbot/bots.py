from __future__ import annotations

from turnbot.config import Settings
from turnbot.context import TurnContext
from turnbot.domain import ActivityTypes, InvokeResponse
from turnbot.handler import ActivityHandler
from turnbot.registry import Next


class EchoBot(ActivityHandler):
    """Replies to messages with what it heard and reports every other activity."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.settings = settings
        (
            self.on_turn(self._announce_non_message)
            .on_message(self._echo)
            .on_members_added(self._welcome)
            .on_token_response_event(self._accept_token)
        )

    async def _announce_non_message(self, context: TurnContext, next: Next):
        if context.activity.type != ActivityTypes.MESSAGE.value:
            await context.send_activity(f"[{context.activity.type} event detected]")
        return await next()

    async def _echo(self, context: TurnContext, next: Next):
        await context.send_activity(f"You said '{context.activity.text or ''}'")
        return await next()

    async def _welcome(self, context: TurnContext, next: Next):
        recipient = context.activity.recipient
        bot_id = recipient.id if recipient is not None else self.settings.BOT_ID
        for member in context.activity.members_added:
            if member.id != bot_id:
                await context.send_activity(self.settings.WELCOME_MESSAGE)
        return await next()

    async def _accept_token(self, context: TurnContext, next: Next):
        await next()
        return InvokeResponse(status=200)
