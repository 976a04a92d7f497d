"""
Channel Consolidator
Refreshes stale records from the YouTube API and sorts the collection.
"""

import logging
from enum import Enum
from typing import List, Protocol

from .channel_record import ChannelRecord
from ..youtube.channel_metadata import ChannelMetadata

logger = logging.getLogger(__name__)


class RefreshPolicy(Enum):
    """Which records get re-fetched during a run."""
    INCOMPLETE_ONLY = "incomplete-only"
    ALL = "all"


class MetadataFetcher(Protocol):
    def fetch_channel_metadata(self, channel_id: str) -> ChannelMetadata:
        ...


def needs_refresh(record: ChannelRecord, policy: RefreshPolicy) -> bool:
    """A record is stale when it has no name yet, or always under RefreshPolicy.ALL."""
    return policy is RefreshPolicy.ALL or not record.is_complete


def replace_with_fetched(record: ChannelRecord, metadata: ChannelMetadata) -> ChannelRecord:
    """
    Wholesale replacement policy.

    Only the identifier survives from the existing record. Name, thumbnail,
    description and country all come from the fetch, so any hand-edited
    values in channels.json are discarded on refresh.
    """
    return ChannelRecord(
        channel_id=record.channel_id,
        name=metadata.title,
        thumbnail=metadata.thumbnail_url,
        description=metadata.description,
        country=metadata.country or ""
    )


def sort_channels(channels: List[ChannelRecord]) -> List[ChannelRecord]:
    """Case-insensitive ascending sort by name. Equal names keep their order."""
    return sorted(channels, key=lambda record: (record.name or "").lower())


class ChannelConsolidator:
    """
    Service responsible for bringing channels.json up to date.

    Responsibilities:
    - Decide which records are stale under the refresh policy.
    - Fetch stale records one at a time, in collection order.
    - Return the resolved collection sorted by name.

    Any fetch error propagates unchanged and nothing is returned, so the
    caller never persists a half-refreshed collection.
    """

    def __init__(self, fetcher: MetadataFetcher, policy: RefreshPolicy = RefreshPolicy.INCOMPLETE_ONLY):
        self._fetcher = fetcher
        self._policy = policy

    @property
    def policy(self) -> RefreshPolicy:
        return self._policy

    def consolidate(self, channels: List[ChannelRecord]) -> List[ChannelRecord]:
        total = len(channels)
        logger.info(f"Consolidating {total} channels (policy: {self._policy.value})")

        resolved: List[ChannelRecord] = []
        fetched = 0
        for index, record in enumerate(channels, start=1):
            position = f"{index}/{total}"
            if not needs_refresh(record, self._policy):
                logger.debug(f"Skipping channel {position}: {record.channel_id}")
                resolved.append(record)
                continue

            logger.info(f"Fetching channel {position}: {record.channel_id}")
            metadata = self._fetcher.fetch_channel_metadata(record.channel_id)
            resolved.append(replace_with_fetched(record, metadata))
            fetched += 1

        logger.info(f"Fetched {fetched} channels, skipped {total - fetched}")
        return sort_channels(resolved)
