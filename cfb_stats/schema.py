"""Normalized record types returned by the operation facade.

Recruiting records are built field by field from HTML or JSON rows. Game
records keep ESPN's nested sub-documents as-is and only pick which of them
are returned; sub-documents ESPN omits for some games (e.g. drives before
kickoff) are Optional.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional, Union


class Record:
    """Mixin giving dataclass records a plain-dict view."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]  # type: ignore[arg-type]


@dataclass
class PlayerRanking(Record):
    rank: int
    name: str
    high_school: str
    position: str
    height: str
    weight: int
    stars: int
    rating: Union[float, str]
    college: str
    player_id: Optional[str] = None
    alt_id: Optional[str] = None
    nil_value: Optional[str] = None


@dataclass
class SchoolRanking(Record):
    rank: int
    school: str
    total_commits: int
    five_stars: int
    four_stars: int
    three_stars: int
    average_rating: float
    points: float


@dataclass
class SchoolCommit(Record):
    name: str
    high_school: str
    position: str
    height: str
    weight: int
    stars: int
    rating: Union[float, str]
    national_rank: str
    state_rank: str
    position_rank: str


@dataclass
class PlayByPlay(Record):
    id: str
    teams: list[dict[str, Any]]
    competitions: list[dict[str, Any]]
    season: dict[str, Any]
    week: Optional[int] = None
    drives: Optional[dict[str, Any]] = None
    box_score: Optional[dict[str, Any]] = None
    scoring_plays: Optional[list[dict[str, Any]]] = None
    standings: Optional[dict[str, Any]] = None


@dataclass
class BoxScore(Record):
    id: str
    teams: list[dict[str, Any]]
    players: Optional[list[dict[str, Any]]] = None


@dataclass
class GameSummary(Record):
    id: int
    header: dict[str, Any]
    teams: list[dict[str, Any]]
    competitions: list[dict[str, Any]]
    season: dict[str, Any]
    week: Optional[int] = None
    box_score: Optional[dict[str, Any]] = None
    game_info: Optional[dict[str, Any]] = None
    drives: Optional[dict[str, Any]] = None
    leaders: Optional[list[dict[str, Any]]] = None
    scoring_plays: Optional[list[dict[str, Any]]] = None
    win_probability: Optional[list[dict[str, Any]]] = None
    standings: Optional[dict[str, Any]] = None


@dataclass
class GamePicks(Record):
    id: int
    header: dict[str, Any]
    teams: list[dict[str, Any]]
    competitions: list[dict[str, Any]]
    season: dict[str, Any]
    week: Optional[int] = None
    game_info: Optional[dict[str, Any]] = None
    leaders: Optional[list[dict[str, Any]]] = None
    win_probability: Optional[list[dict[str, Any]]] = None
    pickcenter: Optional[list[dict[str, Any]]] = None
    against_the_spread: Optional[list[dict[str, Any]]] = None
    odds: Optional[list[dict[str, Any]]] = None
    standings: Optional[dict[str, Any]] = None


__all__ = [
    "Record",
    "PlayerRanking",
    "SchoolRanking",
    "SchoolCommit",
    "PlayByPlay",
    "BoxScore",
    "GameSummary",
    "GamePicks",
]
