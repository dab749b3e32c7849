"""
Domain records for Squad Data

Typed, immutable records built from the three source tables. Each record
serializes to the camelCase field names used by the JSON snapshot.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .coerce import Number

DEFAULT_MATCH_TYPE = "LEAGUE"
DEFAULT_MATCH_STATUS = "SCHEDULED"  # SCHEDULED | DONE


@dataclass(frozen=True)
class Player:
    """A squad member, independent of season"""
    id: str
    name: str
    pos: str = ""
    active: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'pos': self.pos,
            'active': self.active,
        }


@dataclass(frozen=True)
class Match:
    """A fixture or result. Round and scores are None when unknown"""
    id: str
    season: str
    date: str  # YYYY-MM-DD
    opponent: str
    type: str = DEFAULT_MATCH_TYPE
    round: Optional[Number] = None
    time: str = ""  # HH:MM
    location: str = ""
    status: str = DEFAULT_MATCH_STATUS
    score_for: Optional[Number] = None
    score_against: Optional[Number] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'season': self.season,
            'type': self.type,
            'round': self.round,
            'date': self.date,
            'time': self.time,
            'opponent': self.opponent,
            'location': self.location,
            'status': self.status,
            'scoreFor': self.score_for,
            'scoreAgainst': self.score_against,
        }


@dataclass(frozen=True)
class PlayerMatchStat:
    """One player's line for one match. Counters default to 0"""
    match_id: str
    player_id: str
    attended: bool = False
    goals: Number = 0
    assists: Number = 0
    yc: Number = 0  # yellow cards
    rc: Number = 0  # red cards
    clean_sheet: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'matchId': self.match_id,
            'playerId': self.player_id,
            'attended': self.attended,
            'goals': self.goals,
            'assists': self.assists,
            'yc': self.yc,
            'rc': self.rc,
            'cleanSheet': self.clean_sheet,
        }
