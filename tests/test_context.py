import asyncio

from turnbot.adapters.memory import InMemoryAdapter
from turnbot.context import TurnContext
from turnbot.domain import Activity, ChannelAccount, ConversationAccount


def _mk_activity() -> Activity:
    return Activity(
        type="message",
        id="in-7",
        channel_id="test",
        from_property=ChannelAccount(id="user-1"),
        recipient=ChannelAccount(id="bot-1"),
        conversation=ConversationAccount(id="conv-1"),
        text="hello",
    )


def test_send_activity_builds_reply_and_records_it():
    adapter = InMemoryAdapter()
    context = TurnContext(adapter, _mk_activity())

    assert context.responded is False
    sent_id = asyncio.run(context.send_activity("hi there"))

    assert sent_id == "out-1"
    assert context.responded is True
    reply = adapter.sent[0]
    assert reply.text == "hi there"
    assert reply.from_property.id == "bot-1"
    assert reply.recipient.id == "user-1"
    assert reply.conversation.id == "conv-1"
    assert reply.reply_to_id == "in-7"


def test_non_message_activities_do_not_mark_responded():
    adapter = InMemoryAdapter()
    context = TurnContext(adapter, _mk_activity())

    asyncio.run(context.send_activity(Activity(type="typing")))

    assert context.responded is False
    assert adapter.transcript() == [""]


def test_activity_wire_format_uses_camel_case():
    activity = Activity.model_validate(
        {
            "type": "conversationUpdate",
            "from": {"id": "u"},
            "membersAdded": [{"id": "a"}],
            "channelId": "test",
        }
    )
    assert activity.from_property.id == "u"
    assert [m.id for m in activity.members_added] == ["a"]

    dumped = activity.model_dump(by_alias=True, exclude_none=True)
    assert dumped["channelId"] == "test"
    assert dumped["from"] == {"id": "u"}


def test_process_activity_returns_logic_result():
    adapter = InMemoryAdapter()

    async def logic(context):
        await context.send_activity("ok")
        return context.activity.text

    assert asyncio.run(adapter.process_activity(_mk_activity(), logic)) == "hello"
    assert adapter.transcript() == ["ok"]
