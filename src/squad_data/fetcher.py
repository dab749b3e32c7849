"""
Source fetcher for Squad Data

Handles:
- Fetching the CSV export of each spreadsheet tab over HTTP
- Reading file:// sources for local data and offline runs
- Fetching the three source tables concurrently over one session
"""

import asyncio
import aiohttp
import logging
import time
from typing import Optional
from urllib.parse import quote

from .config import SquadDataConfig
from .snapshot import RawSources

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a source table cannot be fetched"""

    def __init__(self, sheet_name: str, message: str, http_status: int = 0):
        super().__init__(f'Failed to fetch sheet="{sheet_name}": {message}')
        self.sheet_name = sheet_name
        self.http_status = http_status


class SheetFetcher:
    """Fetches raw CSV text for the configured source tabs"""

    def __init__(self, config: SquadDataConfig):
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None

    async def start(self):
        """Open the HTTP session"""
        if self.session:
            return

        fetch_config = self.config.fetch
        timeout = aiohttp.ClientTimeout(
            total=fetch_config.timeout_seconds,
            connect=fetch_config.connect_timeout_seconds
        )
        connector = aiohttp.TCPConnector(limit=fetch_config.max_concurrent_requests)

        self.session = aiohttp.ClientSession(
            timeout=timeout,
            connector=connector,
            headers={'User-Agent': fetch_config.user_agent}
        )

    async def close(self):
        """Close the HTTP session"""
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> 'SheetFetcher':
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def build_url(self, sheet_name: str) -> str:
        """Build the source URL for a tab from the configured template"""
        template = self.config.fetch.url_template
        if template.startswith('file://'):
            return template.format(sheet_id=self.config.sheet_id, sheet_name=sheet_name)

        return template.format(
            sheet_id=quote(self.config.sheet_id or '', safe=''),
            sheet_name=quote(sheet_name, safe='')
        )

    async def fetch_sheet(self, sheet_name: str) -> str:
        """Fetch the raw CSV text of one tab"""
        url = self.build_url(sheet_name)

        if url.startswith('file://'):
            return self._read_file_source(sheet_name, url)

        if not self.session:
            await self.start()

        start_time = time.time()

        try:
            async with self.session.get(url, allow_redirects=True) as response:
                if response.status != 200:
                    raise FetchError(sheet_name, f"HTTP {response.status}", response.status)

                text = await response.text(encoding='utf-8-sig')
        except asyncio.TimeoutError as e:
            raise FetchError(sheet_name, "Request timeout") from e
        except aiohttp.ClientError as e:
            raise FetchError(sheet_name, str(e)) from e

        duration_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"Fetched sheet {sheet_name} ({len(text)} chars) in {duration_ms}ms")
        return text

    def _read_file_source(self, sheet_name: str, url: str) -> str:
        """Read a local file:// source"""
        file_path = url[len('file://'):]

        try:
            with open(file_path, 'r', encoding='utf-8-sig', newline='') as f:
                return f.read()
        except OSError as e:
            raise FetchError(sheet_name, str(e)) from e

    async def fetch_all(self) -> RawSources:
        """Fetch the three source tables concurrently"""
        sheets = self.config.sheets

        players, matches, player_stats = await asyncio.gather(
            self.fetch_sheet(sheets.players),
            self.fetch_sheet(sheets.matches),
            self.fetch_sheet(sheets.player_stats),
        )

        return RawSources(players=players, matches=matches, player_stats=player_stats)


def create_fetcher(config: SquadDataConfig) -> SheetFetcher:
    """Create a sheet fetcher"""
    return SheetFetcher(config)
