"""
Markdown Table Renderer
Turns a sorted channel collection into the readme table.
"""

from typing import List, Optional

from ..channels.channel_record import ChannelRecord


CHANNEL_URL_PREFIX = "https://www.youtube.com/channel/"
THUMBNAIL_WIDTH = "100px"
SUMMARY_LENGTH = 120
NO_DESCRIPTION = "_No description_"

TABLE_HEADER = "📷|Channel|Description"
TABLE_RULE = "---|---|---"


def render_table(channels: List[ChannelRecord]) -> str:
    """Render one row per record, in the order given."""
    lines = [TABLE_HEADER, TABLE_RULE]
    for record in channels:
        lines.append(render_row(record))
    return "\n".join(lines)


def render_row(record: ChannelRecord) -> str:
    image = f'<img src="{record.thumbnail or ""}" width="{THUMBNAIL_WIDTH}" alt="{record.channel_id}">'
    channel = f"[{record.name or ''}]({CHANNEL_URL_PREFIX}{record.channel_id})"
    if record.country:
        channel = f"{channel} ({record.country})"
    return "|".join([image, channel, render_description(record.description)])


def render_description(description: Optional[str]) -> str:
    """
    Single-line description cell.

    Text longer than SUMMARY_LENGTH is split at the first space at or after
    that index into a visible summary and a collapsed remainder. A text with
    no such space is cut hard at SUMMARY_LENGTH.
    """
    if not description:
        return NO_DESCRIPTION

    flat = description.replace("\r\n", " ").replace("\n", " ")
    if len(flat) <= SUMMARY_LENGTH:
        return flat

    space = flat.find(" ", SUMMARY_LENGTH)
    if space == -1:
        summary, rest = flat[:SUMMARY_LENGTH], flat[SUMMARY_LENGTH:]
    else:
        summary, rest = flat[:space], flat[space + 1:]
    return f"<details><summary>{summary} [...]</summary>{rest}</details>"
