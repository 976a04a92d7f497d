"""
YouTube API integration module
"""

from .channel_metadata import ChannelMetadata
from .youtube_client import (
    ChannelFetchError,
    ChannelNotFoundError,
    ResponseParseError,
    TransportError,
    YouTubeClient,
)

__all__ = [
    "ChannelMetadata",
    "ChannelFetchError",
    "ChannelNotFoundError",
    "ResponseParseError",
    "TransportError",
    "YouTubeClient",
]
