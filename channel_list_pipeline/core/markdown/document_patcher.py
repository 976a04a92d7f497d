"""
Document Patcher
Replaces the generated table region of the readme.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


START_MARKER = "<!-- CHANNELS -->"
END_MARKER = "<!-- /CHANNELS -->"


class MarkerNotFoundError(Exception):
    """Raised when the document has no START_MARKER ... END_MARKER region."""
    pass


def patch_document(document: str, fragment: str) -> str:
    """
    Replace the first marker region (markers included) with the fragment
    wrapped in the same markers.

    Markers must sit on their own lines. When a marker occurs more than
    once, the first start marker and the first end marker after it win.
    """
    lines = document.split("\n")
    try:
        start = next(i for i, line in enumerate(lines) if line.strip() == START_MARKER)
    except StopIteration:
        raise MarkerNotFoundError(f"Start marker {START_MARKER!r} not found")
    try:
        end = next(i for i in range(start + 1, len(lines)) if lines[i].strip() == END_MARKER)
    except StopIteration:
        raise MarkerNotFoundError(f"End marker {END_MARKER!r} not found after {START_MARKER!r}")

    region = [START_MARKER, fragment, END_MARKER]
    return "\n".join(lines[:start] + region + lines[end + 1:])


class ReadmePatcher:
    """Reads, patches and rewrites the markdown document on disk."""

    def __init__(self, readme_path: Path):
        self._path = Path(readme_path)

    @property
    def path(self) -> Path:
        return self._path

    def update(self, fragment: str) -> bool:
        """
        Splice the fragment into the readme.

        Returns:
            bool: True if the file changed, False if it was already up to date.
        """
        document = self._path.read_text(encoding="utf-8")
        patched = patch_document(document, fragment)
        if patched == document:
            logger.info(f"Readme already up to date: {self._path}")
            return False

        self._path.write_text(patched, encoding="utf-8")
        logger.info(f"Readme table updated: {self._path}")
        return True
