"""
Snapshot pipeline for Squad Data

Raw CSV text for the three source tables -> parsed records -> typed
domain records -> season-scoped snapshot. Pure and synchronous; safe to
call from any number of concurrent requests.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .normalizer import normalize
from .parser import read_records
from .season import SeasonSnapshot, filter_by_season

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawSources:
    """Raw CSV text of the three source tables"""
    players: str
    matches: str
    player_stats: str


def build_snapshot(sources: RawSources, season: Optional[str] = None) -> SeasonSnapshot:
    """Run the full parse / normalize / season-filter pipeline"""
    data = normalize(
        read_records(sources.players),
        read_records(sources.matches),
        read_records(sources.player_stats),
    )

    snapshot = filter_by_season(data.players, data.matches, data.stats, season)

    logger.info(f"Built snapshot for season {snapshot.season or 'ALL'}: "
                f"{len(snapshot.players)} players, {len(snapshot.matches)} matches, "
                f"{len(snapshot.stats)} player stats")
    return snapshot
