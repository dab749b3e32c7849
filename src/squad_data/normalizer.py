"""
Domain normalizer for Squad Data

Maps header-keyed string records from each source table onto typed
domain records. Rows missing a required field are dropped silently:
each builder returns None for such a row and the table-level functions
filter those out, preserving input order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .coerce import to_boolean, to_number_or_default, to_number_or_none
from .models import (
    DEFAULT_MATCH_STATUS,
    DEFAULT_MATCH_TYPE,
    Match,
    Player,
    PlayerMatchStat,
)

logger = logging.getLogger(__name__)

Record = Dict[str, str]


@dataclass
class NormalizedData:
    """Typed record sets for the three source tables"""
    players: List[Player] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    stats: List[PlayerMatchStat] = field(default_factory=list)


def _cell(record: Record, column: str) -> str:
    return (record.get(column) or '').strip()


def build_player(record: Record) -> Optional[Player]:
    """Build a Player, or None when player_id or name is blank"""
    player = Player(
        id=_cell(record, 'player_id'),
        name=_cell(record, 'name'),
        pos=_cell(record, 'pos'),
        active=to_boolean(record.get('active')),
    )
    if not (player.id and player.name):
        return None
    return player


def build_match(record: Record) -> Optional[Match]:
    """Build a Match, or None when match_id, season, date or opponent is blank"""
    match = Match(
        id=_cell(record, 'match_id'),
        season=_cell(record, 'season'),
        type=_cell(record, 'type') or DEFAULT_MATCH_TYPE,
        round=to_number_or_none(record.get('round')),
        date=_cell(record, 'date'),
        time=_cell(record, 'time'),
        opponent=_cell(record, 'opponent'),
        location=_cell(record, 'location'),
        status=_cell(record, 'status') or DEFAULT_MATCH_STATUS,
        score_for=to_number_or_none(record.get('score_for')),
        score_against=to_number_or_none(record.get('score_against')),
    )
    if not (match.id and match.season and match.date and match.opponent):
        return None
    return match


def build_stat(record: Record) -> Optional[PlayerMatchStat]:
    """Build a PlayerMatchStat, or None when match_id or player_id is blank"""
    stat = PlayerMatchStat(
        match_id=_cell(record, 'match_id'),
        player_id=_cell(record, 'player_id'),
        attended=to_boolean(record.get('attended')),
        goals=to_number_or_default(record.get('goals')),
        assists=to_number_or_default(record.get('assists')),
        yc=to_number_or_default(record.get('yc')),
        rc=to_number_or_default(record.get('rc')),
        clean_sheet=to_boolean(record.get('clean_sheet')),
    )
    if not (stat.match_id and stat.player_id):
        return None
    return stat


def normalize_players(records: Iterable[Record]) -> List[Player]:
    return [p for p in map(build_player, records) if p is not None]


def normalize_matches(records: Iterable[Record]) -> List[Match]:
    return [m for m in map(build_match, records) if m is not None]


def normalize_stats(records: Iterable[Record]) -> List[PlayerMatchStat]:
    return [s for s in map(build_stat, records) if s is not None]


def normalize(raw_players: Iterable[Record], raw_matches: Iterable[Record],
              raw_stats: Iterable[Record]) -> NormalizedData:
    """Normalize all three source tables"""
    data = NormalizedData(
        players=normalize_players(raw_players),
        matches=normalize_matches(raw_matches),
        stats=normalize_stats(raw_stats),
    )

    logger.debug(f"Normalized {len(data.players)} players, {len(data.matches)} matches, "
                 f"{len(data.stats)} player stats")
    return data
