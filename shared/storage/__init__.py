"""
Storage module for the channel list
"""

from .channel_store import ChannelStore, ChannelStoreParseError

__all__ = ["ChannelStore", "ChannelStoreParseError"]
