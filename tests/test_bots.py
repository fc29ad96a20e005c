import asyncio

from turnbot.adapters.memory import InMemoryAdapter
from turnbot.bots import EchoBot
from turnbot.config import Settings
from turnbot.domain import Activity, ChannelAccount, InvokeResponse


def _run(bot: EchoBot, **fields):
    adapter = InMemoryAdapter()
    fields.setdefault("recipient", ChannelAccount(id="bot"))
    result = asyncio.run(adapter.process_activity(Activity(**fields), bot.run))
    return adapter.transcript(), result


def test_echoes_messages():
    replies, result = _run(EchoBot(Settings()), type="message", text="ping")
    assert replies == ["You said 'ping'"]
    assert result is None


def test_reports_other_activity_types():
    bot = EchoBot(Settings())
    replies, _ = _run(bot, type="typing")
    assert replies == ["[typing event detected]"]


def test_welcomes_added_members_but_not_itself():
    bot = EchoBot(Settings(WELCOME_MESSAGE="Welcome!"))
    replies, _ = _run(
        bot,
        type="conversationUpdate",
        members_added=[ChannelAccount(id="bot"), ChannelAccount(id="alice"), ChannelAccount(id="bob")],
    )
    assert replies == ["[conversationUpdate event detected]", "Welcome!", "Welcome!"]


def test_token_response_returns_invoke_response():
    bot = EchoBot(Settings())
    replies, result = _run(bot, type="event", name="tokens/response")
    assert replies == ["[event event detected]"]
    assert result == InvokeResponse(status=200)
