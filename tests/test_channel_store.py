import json
from pathlib import Path
from unittest.mock import patch

import pytest

from channel_list_pipeline.core.channels.channel_record import ChannelRecord
from shared.storage.channel_store import ChannelStore, ChannelStoreParseError


def test_load_parses_records(tmp_path):
    path = tmp_path / "channels.json"
    path.write_text(json.dumps([
        {"id": "UC1", "name": "One", "thumbnail": "https://t/1.jpg", "description": "Line\nbreak", "country": "US"},
        {"id": "UC2"},
    ]), encoding="utf-8")

    channels = ChannelStore(path).load()

    assert channels == [
        ChannelRecord("UC1", name="One", thumbnail="https://t/1.jpg", description="Line\nbreak", country="US"),
        ChannelRecord("UC2"),
    ]
    assert not channels[1].is_complete


def test_save_then_load_round_trip(tmp_path, sample_channels):
    store = ChannelStore(tmp_path / "channels.json")
    store.save(sample_channels)
    assert store.load() == sample_channels


def test_save_writes_two_space_indent_and_unicode(tmp_path):
    path = tmp_path / "channels.json"
    ChannelStore(path).save([ChannelRecord("UC1", name="Café", thumbnail="t", description="", country="")])

    text = path.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "id": "UC1",')
    assert "Café" in text
    assert not (tmp_path / "channels.json.tmp").exists()


def test_save_omits_absent_fields(tmp_path):
    path = tmp_path / "channels.json"
    ChannelStore(path).save([ChannelRecord("UConly")])
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "UConly"}]


def test_save_overwrites_whole_file(tmp_path):
    path = tmp_path / "channels.json"
    path.write_text(json.dumps([{"id": "a"}, {"id": "b"}, {"id": "c"}]), encoding="utf-8")
    ChannelStore(path).save([ChannelRecord("z")])
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": "z"}]


def test_save_propagates_write_failure(tmp_path):
    store = ChannelStore(tmp_path / "missing-dir" / "channels.json")
    with pytest.raises(OSError):
        store.save([ChannelRecord("UC1")])


def test_load_missing_file(tmp_path):
    with pytest.raises(ChannelStoreParseError, match="not found"):
        ChannelStore(tmp_path / "nope.json").load()


@pytest.mark.parametrize("content, message", [
    ("{not json", "Invalid JSON"),
    ('{"id": "UC1"}', "JSON array"),
    ('["UC1"]', "must be an object"),
    ('[{"name": "No id"}]', "no valid 'id'"),
    ('[{"id": ""}]', "no valid 'id'"),
    ('[{"id": "UC1", "country": 7}]', "'country' must be a string"),
])
def test_load_rejects_malformed_content(tmp_path, content, message):
    path = tmp_path / "channels.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ChannelStoreParseError, match=message):
        ChannelStore(path).load()


def test_failed_replace_removes_tmp_file(tmp_path):
    path = tmp_path / "channels.json"
    path.write_text('[{"id": "old"}]', encoding="utf-8")

    with patch.object(Path, "replace", side_effect=OSError("target busy")):
        with pytest.raises(OSError, match="target busy"):
            ChannelStore(path).save([ChannelRecord("UC1")])

    assert not (tmp_path / "channels.json.tmp").exists()
    assert path.read_text(encoding="utf-8") == '[{"id": "old"}]'
