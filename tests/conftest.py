import json
from pathlib import Path

import pytest

from channel_list_pipeline.core.channels.channel_record import ChannelRecord
from channel_list_pipeline.core.youtube.channel_metadata import ChannelMetadata


README_TEMPLATE = """# Curated channels

Some intro text.

<!-- CHANNELS -->
placeholder
<!-- /CHANNELS -->

## Contributing
"""


class FakeFetcher:
    """Returns canned metadata and records every channel ID it was asked for."""

    def __init__(self, metadata=None, errors=None):
        self.metadata = metadata or {}
        self.errors = errors or {}
        self.calls = []

    def fetch_channel_metadata(self, channel_id):
        self.calls.append(channel_id)
        if channel_id in self.errors:
            raise self.errors[channel_id]
        if channel_id in self.metadata:
            return self.metadata[channel_id]
        return ChannelMetadata(
            title=f"Title {channel_id}",
            thumbnail_url=f"https://yt3.example/{channel_id}.jpg",
            description=f"About {channel_id}",
            country=""
        )


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def sample_channels():
    return [
        ChannelRecord("UCbanana", name="banana", thumbnail="https://t/b.jpg", description="", country=""),
        ChannelRecord("UCnew"),
        ChannelRecord("UCapple", name="Apple", thumbnail="https://t/a.jpg", description="Fruit", country="FR"),
    ]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A working directory with config.yaml, channels.json and readme.md."""
    (tmp_path / "config.yaml").write_text(
        "api_key: test-key\nchannels_path: channels.json\nreadme_path: readme.md\nlogs_dir: logs\n",
        encoding="utf-8"
    )
    (tmp_path / "channels.json").write_text(json.dumps([
        {"id": "UCzeta", "name": "zeta", "thumbnail": "https://t/z.jpg", "description": "Z", "country": ""},
        {"id": "UCnew"},
    ], indent=2), encoding="utf-8")
    (tmp_path / "readme.md").write_text(README_TEMPLATE, encoding="utf-8")
    return tmp_path
