"""
Command line entry point for Squad Data

Loads configuration, sets up logging, and either serves the snapshot
endpoint or fetches the source tabs once and writes the snapshot JSON.
"""

import asyncio
import json
import logging
import sys
from typing import Optional

from .config import SquadDataConfig, load_config
from .fetcher import FetchError, create_fetcher
from .normalizer import normalize_matches
from .parser import read_records
from .season import available_seasons
from .snapshot import RawSources, build_snapshot

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(config: SquadDataConfig):
    """Setup logging configuration"""
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('aiohttp').setLevel(logging.WARNING)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(file_handler)


async def fetch_sources(config: SquadDataConfig) -> RawSources:
    """Fetch the three source tabs once"""
    async with create_fetcher(config) as fetcher:
        return await fetcher.fetch_all()


def write_snapshot(config: SquadDataConfig, season: Optional[str], output: Optional[str]):
    """Fetch, build and write one snapshot as JSON"""
    sources = asyncio.run(fetch_sources(config))
    snapshot = build_snapshot(sources, season)

    payload = {'sheetId': config.sheet_id}
    payload.update(snapshot.to_dict())
    text = json.dumps(payload, ensure_ascii=False, indent=2)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(text)
        logger.info(f"Snapshot written to {output}")
    else:
        print(text)


def list_seasons(config: SquadDataConfig):
    """Print the seasons present in the matches tab"""
    sources = asyncio.run(fetch_sources(config))
    for season in available_seasons(normalize_matches(read_records(sources.matches))):
        print(season)


def main(argv=None) -> int:
    """Main entry point for Squad Data"""
    import argparse

    parser = argparse.ArgumentParser(description='Season snapshot of club spreadsheet data')
    parser.add_argument('--config', default='config/squad_data.yaml',
                        help='Configuration file path')
    parser.add_argument('--create-config', action='store_true',
                        help='Create sample configuration file and exit')
    parser.add_argument('--serve', action='store_true',
                        help='Run the HTTP snapshot endpoint')
    parser.add_argument('--season', default='',
                        help='Season to scope the snapshot to (default: all seasons)')
    parser.add_argument('--list-seasons', action='store_true',
                        help='List seasons found in the matches tab and exit')
    parser.add_argument('--output',
                        help='Write snapshot JSON to this file instead of stdout')

    args = parser.parse_args(argv)

    if args.create_config:
        from .config import create_sample_config
        create_sample_config(args.config)
        print(f"Sample configuration created at {args.config}")
        return 0

    config = load_config(args.config)
    setup_logging(config)

    if not config.sheet_id:
        logger.error("No sheet id configured; set sheet_id or the SHEET_ID environment variable")
        return 1

    if args.serve:
        from .server import run_server
        run_server(config)
        return 0

    try:
        if args.list_seasons:
            list_seasons(config)
        else:
            write_snapshot(config, args.season.strip() or None, args.output)
    except FetchError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
