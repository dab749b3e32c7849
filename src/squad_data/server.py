"""
HTTP endpoint for Squad Data

Serves the season snapshot as JSON. Each request fetches the three
source tabs, runs the snapshot pipeline and returns the result with the
configured Cache-Control header.
"""

import logging
from typing import Any, Dict

from aiohttp import web

from .config import SquadDataConfig
from .fetcher import SheetFetcher, create_fetcher
from .snapshot import build_snapshot

logger = logging.getLogger(__name__)

CONFIG_KEY = web.AppKey("config", SquadDataConfig)
FETCHER_KEY = web.AppKey("fetcher", SheetFetcher)


def _error_response(payload: Dict[str, Any]) -> web.Response:
    return web.json_response(payload, status=500)


async def handle_data(request: web.Request) -> web.Response:
    """GET handler: ?season=<id> scopes matches and stats to one season"""
    config = request.app[CONFIG_KEY]

    if not config.sheet_id:
        return _error_response({"error": "Missing env var SHEET_ID"})

    season = request.query.get('season', '').strip()

    try:
        sources = await request.app[FETCHER_KEY].fetch_all()
        snapshot = build_snapshot(sources, season or None)
    except Exception as e:
        logger.error(f"Failed to build snapshot for season {season or 'ALL'}: {e}")
        return _error_response({"error": "Server error", "details": str(e)})

    payload = {'sheetId': config.sheet_id}
    payload.update(snapshot.to_dict())

    response = web.json_response(payload)
    response.headers['Cache-Control'] = config.server.cache_control
    return response


async def _fetcher_context(app: web.Application):
    fetcher = app[FETCHER_KEY]
    await fetcher.start()
    yield
    await fetcher.close()


def create_app(config: SquadDataConfig) -> web.Application:
    """Create the aiohttp application serving the snapshot endpoint"""
    app = web.Application()
    app[CONFIG_KEY] = config
    app[FETCHER_KEY] = create_fetcher(config)

    app.cleanup_ctx.append(_fetcher_context)
    app.router.add_get(config.server.route, handle_data)

    logger.info(f"Serving season snapshots at {config.server.route}")
    return app


def run_server(config: SquadDataConfig):
    """Run the HTTP server until interrupted"""
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
