"""
Channel List Pipeline
Refreshes channels.json from the YouTube API and rebuilds the readme table.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from channel_list_pipeline.core.channels import ChannelConsolidator, ChannelRecord, RefreshPolicy
from channel_list_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError
from channel_list_pipeline.core.markdown import MarkerNotFoundError, ReadmePatcher, render_table
from channel_list_pipeline.core.youtube import ChannelFetchError, YouTubeClient
from shared.storage.channel_store import ChannelStore, ChannelStoreParseError

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    """Raised when a pipeline step fails and the run must stop."""
    pass


def setup_logging(logs_dir: Path, verbose: bool = False) -> logging.Logger:
    """Configure logging with file and console handlers."""
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "app.log"

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch channel metadata, sort channels.json and rebuild the readme table."
    )
    parser.add_argument("--config", type=Path, default=Path("config.yaml"),
                        help="YAML configuration file (default: ./config.yaml).")
    parser.add_argument("--fetch-all", action="store_true",
                        help="Refresh every channel, not only the ones without a name.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--render-only", action="store_true",
                      help="Print the table for the current channels.json without fetching or writing.")
    mode.add_argument("--skip-readme", action="store_true",
                      help="Update channels.json but leave the readme untouched.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def load_configuration(config_path: Path, require_api_key: bool) -> AppConfig:
    """Load and validate application configuration."""
    try:
        return ConfigLoader(config_path, require_api_key=require_api_key).load()
    except FileNotFoundError as e:
        raise PipelineError(str(e))
    except (OSError, UnicodeDecodeError) as e:
        raise PipelineError(f"Could not read configuration: {e}")
    except ConfigValidationError as e:
        raise PipelineError(f"Configuration validation failed: {e}")


def consolidate_channels(config: AppConfig, policy: RefreshPolicy) -> List[ChannelRecord]:
    """Load, refresh, sort and persist channels.json. Nothing is written on failure."""
    store = ChannelStore(config.channels_path)
    try:
        channels = store.load()
    except ChannelStoreParseError as e:
        raise PipelineError(f"Could not load channels: {e}")

    consolidator = ChannelConsolidator(YouTubeClient(config.api_key), policy)
    try:
        consolidated = consolidator.consolidate(channels)
    except ChannelFetchError as e:
        raise PipelineError(f"Channel fetch failed, channels.json left untouched: {e}")

    try:
        store.save(consolidated)
    except OSError as e:
        raise PipelineError(f"Could not write channels: {e}")
    return consolidated


def write_readme(config: AppConfig, channels: List[ChannelRecord]) -> None:
    """Render the table and splice it into the readme."""
    patcher = ReadmePatcher(config.readme_path)
    try:
        patcher.update(render_table(channels))
    except MarkerNotFoundError as e:
        raise PipelineError(f"Readme {config.readme_path} has no channel table region: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise PipelineError(f"Could not update readme: {e}")


def render_only(config: AppConfig) -> None:
    """Print the table for the channels as they are on disk."""
    try:
        channels = ChannelStore(config.channels_path).load()
    except ChannelStoreParseError as e:
        raise PipelineError(f"Could not load channels: {e}")
    print(render_table(channels))


def run(args: argparse.Namespace, config: AppConfig) -> None:
    if args.render_only:
        render_only(config)
        return

    policy = RefreshPolicy.ALL if args.fetch_all else RefreshPolicy.INCOMPLETE_ONLY

    logger.info("=" * 60)
    logger.info("Phase 1: Channel Consolidation")
    logger.info("=" * 60)
    channels = consolidate_channels(config, policy)

    if args.skip_readme:
        logger.info("Readme update skipped (--skip-readme)")
        return

    logger.info("=" * 60)
    logger.info("Phase 2: Readme Table")
    logger.info("=" * 60)
    write_readme(config, channels)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry for the channel list pipeline."""
    args = parse_args(argv)

    try:
        config = load_configuration(args.config, require_api_key=not args.render_only)
    except PipelineError as e:
        # Logging is not configured yet; stderr is the only channel.
        print(f"Run error: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(config.logs_dir, args.verbose)
    except OSError as e:
        print(f"Run error: Could not set up logging in {config.logs_dir}: {e}", file=sys.stderr)
        return 1
    logger.debug(f"Loaded {config!r}")

    try:
        run(args, config)
    except PipelineError as e:
        logger.error(f"Run error: {e}")
        return 1

    if not args.render_only:
        logger.info("✅ Channel list pipeline complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
