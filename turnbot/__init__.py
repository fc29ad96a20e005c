"""TurnBot - activity dispatch for conversational bots

An inbound activity is routed through ordered chains of handlers, one chain per
event label (Turn, Message, ConversationUpdate, ... , Dialog). Each handler
decides whether the pipeline continues by awaiting its ``next`` continuation.
"""

from turnbot.domain import Activity, ActivityTypes, ChannelAccount, EventLabel, InvokeResponse
from turnbot.handler import ActivityHandler
from turnbot.registry import HandlerRegistry

__all__ = [
    "__version__",
    "Activity",
    "ActivityHandler",
    "ActivityTypes",
    "ChannelAccount",
    "EventLabel",
    "HandlerRegistry",
    "InvokeResponse",
]

__version__ = "0.1.0"
