"""
Channel Store
Loads and persists the curated channel list (channels.json).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from channel_list_pipeline.core.channels.channel_record import OPTIONAL_FIELDS, ChannelRecord

logger = logging.getLogger(__name__)


class ChannelStoreParseError(Exception):
    """Raised when channels.json is missing, unreadable or malformed."""
    pass


class ChannelStore:
    """
    Service responsible for the channels.json file.

    Responsibilities:
    - Parse the JSON array into ChannelRecord values.
    - Validate the shape of every entry.
    - Overwrite the whole file on save, never a partial write.
    """

    def __init__(self, channels_path: Path):
        """
        Initialize the ChannelStore.

        Args:
            channels_path (Path): Location of channels.json.
        """
        self._path = Path(channels_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[ChannelRecord]:
        """
        Read every channel record from disk.

        Raises:
            ChannelStoreParseError: If the file is missing, unreadable or malformed.
        """
        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ChannelStoreParseError(f"Channel file not found: {self._path}")
        except (OSError, UnicodeDecodeError) as e:
            raise ChannelStoreParseError(f"Could not read {self._path}: {e}")
        except json.JSONDecodeError as e:
            raise ChannelStoreParseError(f"Invalid JSON in {self._path}: {e}")

        if not isinstance(data, list):
            raise ChannelStoreParseError(
                f"{self._path} must contain a JSON array, got {type(data).__name__}"
            )

        channels = [self._parse_record(index, entry) for index, entry in enumerate(data)]
        logger.info(f"Loaded {len(channels)} channels from {self._path}")
        return channels

    def save(self, channels: List[ChannelRecord]) -> None:
        """
        Overwrite channels.json with the given collection.

        The payload goes to a sibling .tmp file first and then replaces the
        target, so readers never see a truncated file.
        """
        payload = json.dumps([record.to_dict() for record in channels], indent=2, ensure_ascii=False)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp, 'w', encoding='utf-8') as f:
                f.write(payload)
            tmp.replace(self._path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            logger.error(f"Error writing channel file {self._path}: {e}")
            raise
        logger.info(f"✓ Saved {len(channels)} channels to {self._path}")

    def _parse_record(self, index: int, entry: Any) -> ChannelRecord:
        """Validate one array element and build its ChannelRecord."""
        if not isinstance(entry, dict):
            raise ChannelStoreParseError(
                f"Entry {index} must be an object, got {type(entry).__name__}"
            )

        channel_id = entry.get("id")
        if not isinstance(channel_id, str) or not channel_id.strip():
            raise ChannelStoreParseError(f"Entry {index} has no valid 'id'")

        fields: Dict[str, Any] = {}
        for field_name in OPTIONAL_FIELDS:
            value = entry.get(field_name)
            if value is not None and not isinstance(value, str):
                raise ChannelStoreParseError(
                    f"Entry {index} ({channel_id}): '{field_name}' must be a string, "
                    f"got {type(value).__name__}"
                )
            fields[field_name] = value

        return ChannelRecord(channel_id=channel_id, **fields)

    def __repr__(self):
        return f"ChannelStore(path={self._path})"
