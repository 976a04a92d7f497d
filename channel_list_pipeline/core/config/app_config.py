"""
Application Configuration Model
Represents a validated configuration state
"""

from pathlib import Path
from typing import Optional


class AppConfig:
    """
    Immutable configuration object for the channel list pipeline.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: Optional[str],
        channels_path: Path,
        readme_path: Path,
        logs_dir: Path
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube Data API key (None when running without fetches)
            channels_path: Absolute path to the channels JSON store
            readme_path: Absolute path to the markdown document holding the table
            logs_dir: Directory for the run log file
        """
        self._api_key = api_key
        self._channels_path = channels_path
        self._readme_path = readme_path
        self._logs_dir = logs_dir

    @property
    def api_key(self) -> Optional[str]:
        """YouTube Data API key."""
        return self._api_key

    @property
    def channels_path(self) -> Path:
        """Location of channels.json."""
        return self._channels_path

    @property
    def readme_path(self) -> Path:
        """Location of the readme that embeds the channel table."""
        return self._readme_path

    @property
    def logs_dir(self) -> Path:
        return self._logs_dir

    def __repr__(self) -> str:
        """String representation for debugging. Never includes the key."""
        return (
            f"AppConfig(channels_path={str(self.channels_path)!r}, "
            f"readme_path={str(self.readme_path)!r}, "
            f"api_key={'set' if self.api_key else 'unset'})"
        )
