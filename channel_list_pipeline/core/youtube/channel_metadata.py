"""
Channel Metadata Domain Model
Public snippet data returned for one channel by the YouTube Data API.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelMetadata:
    """Fresh metadata for a single channel, as extracted from a channels.list response."""
    title: str
    thumbnail_url: str
    description: str
    country: str = ""
