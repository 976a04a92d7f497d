"""
Channel Record Domain Model
One entry of channels.json.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


OPTIONAL_FIELDS = ("name", "thumbnail", "description", "country")


@dataclass(frozen=True)
class ChannelRecord:
    """
    Cached metadata for one curated channel.

    Only channel_id is guaranteed. A record without a name has not been
    fetched yet.
    """
    channel_id: str
    name: Optional[str] = None
    thumbnail: Optional[str] = None
    description: Optional[str] = None
    country: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the channels.json shape, omitting absent fields."""
        data: Dict[str, Any] = {"id": self.channel_id}
        for field_name in OPTIONAL_FIELDS:
            value = getattr(self, field_name)
            if value is not None:
                data[field_name] = value
        return data
