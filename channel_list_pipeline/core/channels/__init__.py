"""
Channel collection module
"""

from .channel_record import ChannelRecord
from .consolidator import ChannelConsolidator, RefreshPolicy

__all__ = ["ChannelRecord", "ChannelConsolidator", "RefreshPolicy"]
