from .base import ChannelAdapter
from .memory import InMemoryAdapter

__all__ = ["ChannelAdapter", "InMemoryAdapter"]
