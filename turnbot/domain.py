from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TOKEN_RESPONSE_EVENT_NAME = "tokens/response"


class ActivityTypes(str, Enum):
    """Activity type values as they appear on the wire."""

    MESSAGE = "message"
    CONTACT_RELATION_UPDATE = "contactRelationUpdate"
    CONVERSATION_UPDATE = "conversationUpdate"
    TYPING = "typing"
    END_OF_CONVERSATION = "endOfConversation"
    EVENT = "event"
    INVOKE = "invoke"
    DELETE_USER_DATA = "deleteUserData"
    MESSAGE_UPDATE = "messageUpdate"
    MESSAGE_DELETE = "messageDelete"
    INSTALLATION_UPDATE = "installationUpdate"
    MESSAGE_REACTION = "messageReaction"
    SUGGESTION = "suggestion"
    TRACE = "trace"
    HANDOFF = "handoff"


class EventLabel(str, Enum):
    """Closed set of labels handlers can be bound to."""

    TURN = "Turn"
    MESSAGE = "Message"
    CONVERSATION_UPDATE = "ConversationUpdate"
    MEMBERS_ADDED = "MembersAdded"
    MEMBERS_REMOVED = "MembersRemoved"
    EVENT = "Event"
    TOKEN_RESPONSE_EVENT = "TokenResponseEvent"
    UNRECOGNIZED_ACTIVITY_TYPE = "UnrecognizedActivityType"
    DIALOG = "Dialog"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChannelAccount(_WireModel):
    """A participant in a conversation (user or bot)."""

    id: str
    name: str | None = None
    role: str | None = None


class ConversationAccount(_WireModel):
    id: str
    name: str | None = None
    is_group: bool | None = None


class Activity(_WireModel):
    """One inbound or outbound event on a conversational channel.

    Only ``type``, ``name``, ``members_added`` and ``members_removed`` take part
    in routing; the remaining fields are carried for handlers.
    """

    type: str | None = None
    id: str | None = None
    timestamp: datetime | None = None
    channel_id: str | None = None
    from_property: ChannelAccount | None = Field(default=None, alias="from")
    recipient: ChannelAccount | None = None
    conversation: ConversationAccount | None = None
    text: str | None = None
    name: str | None = None
    value: Any = None
    reply_to_id: str | None = None
    members_added: list[ChannelAccount] = Field(default_factory=list)
    members_removed: list[ChannelAccount] = Field(default_factory=list)

    @field_validator("members_added", "members_removed", mode="before")
    @classmethod
    def _null_members_as_empty(cls, v):  # type: ignore[override]
        return [] if v is None else v

    def create_reply(self, text: str | None = None) -> Activity:
        """Build a message addressed back to the sender of this activity."""
        return Activity(
            type=ActivityTypes.MESSAGE.value,
            channel_id=self.channel_id,
            from_property=self.recipient,
            recipient=self.from_property,
            conversation=self.conversation,
            reply_to_id=self.id,
            text=text,
        )


class InvokeResponse(BaseModel):
    """Result a handler returns so it reaches the caller of ``run``."""

    status: int
    body: Any = None
