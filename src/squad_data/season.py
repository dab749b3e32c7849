"""Season scoping of normalized record sets"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .models import Match, Player, PlayerMatchStat


@dataclass
class SeasonSnapshot:
    """Record sets scoped to one season, or to all seasons when season is None"""
    season: Optional[str] = None
    players: List[Player] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    stats: List[PlayerMatchStat] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable payload; absent values stay in place as None"""
        return {
            'season': self.season,
            'players': [p.to_dict() for p in self.players],
            'matches': [m.to_dict() for m in self.matches],
            'playerMatchStats': [s.to_dict() for s in self.stats],
        }


def filter_by_season(players: Iterable[Player], matches: Iterable[Match],
                     stats: Iterable[PlayerMatchStat],
                     season: Optional[str] = None) -> SeasonSnapshot:
    """Restrict matches to ``season`` and stats to the retained matches.

    Season comparison is exact. Players are season-independent and always
    pass through. An empty or missing season keeps everything.
    """
    players = list(players)
    matches = list(matches)
    stats = list(stats)

    if not season:
        return SeasonSnapshot(season=None, players=players, matches=matches, stats=stats)

    season_matches = [m for m in matches if m.season == season]
    season_match_ids = {m.id for m in season_matches}
    season_stats = [s for s in stats if s.match_id in season_match_ids]

    return SeasonSnapshot(
        season=season,
        players=players,
        matches=season_matches,
        stats=season_stats,
    )


def available_seasons(matches: Iterable[Match]) -> List[str]:
    """Distinct seasons present in ``matches``, sorted"""
    return sorted({m.season for m in matches if m.season})
