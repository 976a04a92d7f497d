"""
YouTube API Client
Fetches the public snippet of a single channel by its ID.
"""

import logging
from typing import Any, Dict

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .channel_metadata import ChannelMetadata

logger = logging.getLogger(__name__)


class ChannelFetchError(Exception):
    """Base class for failures while fetching one channel's metadata."""

    def __init__(self, channel_id: str, message: str):
        super().__init__(f"{message} (channel {channel_id})")
        self.channel_id = channel_id


class TransportError(ChannelFetchError):
    """The API could not be reached or answered with an HTTP error."""
    pass


class ResponseParseError(ChannelFetchError):
    """The API answered with a body that is not the expected JSON shape."""
    pass


class ChannelNotFoundError(ChannelFetchError):
    """The API answered with zero items for the requested channel ID."""
    pass


class YouTubeClient:
    """
    YouTube Data API client for channel metadata.

    One call to fetch_channel_metadata() issues exactly one channels.list
    request. There is no retry; a failed request raises immediately.
    """

    def __init__(self, api_key: str):
        """Initialize the YouTube API service."""
        # Bundled discovery document, so building the service does no I/O.
        self._service = build('youtube', 'v3', developerKey=api_key, cache_discovery=False)

    def fetch_channel_metadata(self, channel_id: str) -> ChannelMetadata:
        """
        Fetch title, medium thumbnail, description and country for a channel.

        Raises:
            ChannelNotFoundError: The response holds no items.
            ResponseParseError: The body is not JSON or lacks expected fields.
            TransportError: Network failure or HTTP error status.
        """
        logger.debug(f"Requesting channels.list for {channel_id}")
        try:
            response = self._service.channels().list(
                part="snippet",
                id=channel_id,
                maxResults=1
            ).execute()
        except HttpError as e:
            raise TransportError(channel_id, f"API request failed with HTTP {e.resp.status}")
        except ValueError as e:
            # googleapiclient decodes the body with json.loads
            raise ResponseParseError(channel_id, f"Could not parse response ({e})")
        except (httplib2.HttpLib2Error, OSError) as e:
            raise TransportError(channel_id, f"Could not reach the YouTube API ({e})")

        return self._parse_channel(channel_id, response)

    def _parse_channel(self, channel_id: str, response: Any) -> ChannelMetadata:
        """Extracts ChannelMetadata from the first item of a channels.list response."""
        if not isinstance(response, dict):
            raise ResponseParseError(channel_id, "Response is not a JSON object")

        items = response.get("items") or []
        if not isinstance(items, list):
            raise ResponseParseError(channel_id, "Field 'items' is not a list")
        if not items:
            raise ChannelNotFoundError(channel_id, "Channel not found in response")

        snippet = _field(channel_id, items[0], "snippet", dict)
        localized = _field(channel_id, snippet, "localized", dict)
        thumbnails = _field(channel_id, snippet, "thumbnails", dict)
        medium = _field(channel_id, thumbnails, "medium", dict)

        country = snippet.get("country") or ""
        if not isinstance(country, str):
            raise ResponseParseError(channel_id, "Field 'country' is not a string")

        return ChannelMetadata(
            title=_field(channel_id, localized, "title", str),
            thumbnail_url=_field(channel_id, medium, "url", str),
            description=_field(channel_id, localized, "description", str),
            country=country
        )


def _field(channel_id: str, container: Dict[str, Any], key: str, expected: type) -> Any:
    if not isinstance(container, dict) or key not in container:
        raise ResponseParseError(channel_id, f"Missing field '{key}' in response")
    value = container[key]
    if not isinstance(value, expected):
        raise ResponseParseError(
            channel_id, f"Field '{key}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
