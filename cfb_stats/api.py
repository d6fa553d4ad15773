"""Public operations for college football data.

Each function builds one target, acquires it once and maps the raw content
into a normalized record, a list of records, or the ESPN document itself.
Calls share no state. Pass a `requests.Session` to reuse connections or to
stub the network in tests.

Example:
    >>> from cfb_stats import get_player_rankings
    >>> players = get_player_rankings(2016, service="247")
    >>> players[0].rank
    1
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import requests

from . import request as targets
from .extract import (
    PLAYER_EXTRACTORS,
    extract_box_score,
    extract_picks,
    extract_play_by_play,
    extract_schedule,
    extract_school_commits,
    extract_school_rankings,
    extract_summary,
)
from .fetch import fetch_content
from .request import RankingService
from .schema import (
    BoxScore,
    GamePicks,
    GameSummary,
    PlayByPlay,
    PlayerRanking,
    SchoolCommit,
    SchoolRanking,
)

logger = logging.getLogger(__name__)

GameId = Union[int, str]


# Games


def get_play_by_play(game_id: GameId, *, session: Optional[requests.Session] = None) -> PlayByPlay:
    """Drives, scoring plays and header info for one game."""
    payload = fetch_content(targets.play_by_play_target(game_id), session)
    return extract_play_by_play(payload)


def get_box_score(game_id: GameId, *, session: Optional[requests.Session] = None) -> BoxScore:
    """Team and player box score for one game."""
    payload = fetch_content(targets.box_score_target(game_id), session)
    return extract_box_score(payload)


def get_summary(game_id: GameId, *, session: Optional[requests.Session] = None) -> GameSummary:
    """Game summary: box score, drives, leaders, win probability and more."""
    payload = fetch_content(targets.summary_target(game_id), session)
    return extract_summary(payload)


def get_picks(game_id: GameId, *, session: Optional[requests.Session] = None) -> GamePicks:
    """PickCenter lines, against-the-spread records and odds for one game."""
    payload = fetch_content(targets.summary_target(game_id), session)
    return extract_picks(payload)


# Recruiting


def get_player_rankings(
    year: Union[int, str],
    *,
    page: int = 1,
    group: str = targets.DEFAULT_INSTITUTION_GROUP,
    position: Optional[str] = None,
    state: Optional[str] = None,
    service: Union[str, RankingService] = RankingService.COMPOSITE_247,
    session: Optional[requests.Session] = None,
) -> list[PlayerRanking]:
    """Recruit rankings for a class year from one ranking service.

    Args:
        year: Recruiting class year (YYYY)
        page: 1-based page, 50 players per page (25 for ESPN). Rivals
            always returns its single Rivals250 page.
        group: Institution type for 247Sports: "HighSchool",
            "JuniorCollege" or "PrepSchool"
        position: Position filter (247Sports only)
        state: State filter (247Sports only)
        service: One of "247Composite", "247", "Rivals", "On3",
            "On3Composite", "ESPN"
        session: Optional requests session for plain fetches

    Raises:
        InvalidParameterError: For an unknown `service`, before any request.
    """
    service = RankingService.parse(service)
    target = targets.player_rankings_target(
        year, service, page=page, group=group, position=position, state=state
    )
    content = fetch_content(target, session)
    # Rivals serves one page whatever was asked for
    content_page = 1 if service is RankingService.RIVALS else page
    players = PLAYER_EXTRACTORS[service](content, content_page)
    logger.info(f"{service.value} {year} page {page}: {len(players)} players")
    return players


def get_school_rankings(
    year: Union[int, str],
    page: int = 1,
    *,
    session: Optional[requests.Session] = None,
) -> list[SchoolRanking]:
    """247Sports composite team recruiting rankings for a class year."""
    html = fetch_content(targets.school_rankings_target(year, page), session)
    return extract_school_rankings(html, page)


def get_school_commits(
    school: str,
    year: Union[int, str],
    *,
    session: Optional[requests.Session] = None,
) -> list[SchoolCommit]:
    """Committed recruits for one school (247Sports subdomain) and class year."""
    html = fetch_content(targets.school_commits_target(school, year), session)
    return extract_school_commits(html)


# League and teams (ESPN documents returned as-is)


def get_rankings(
    year: Any = None, week: Any = None, *, session: Optional[requests.Session] = None
) -> dict[str, Any]:
    """Poll rankings (AP, Coaches, CFP) for a season and week."""
    return fetch_content(targets.rankings_target(year, week), session)


def get_schedule(
    year: Any = None,
    month: Any = None,
    day: Any = None,
    groups: int = targets.DEFAULT_GROUP,
    seasontype: int = targets.DEFAULT_SEASON_TYPE,
    *,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    """Schedule keyed by date; the date filter applies only when year, month and day are all given."""
    payload = fetch_content(
        targets.schedule_target(year, month, day, groups, seasontype), session
    )
    return extract_schedule(payload)


def get_scoreboard(
    year: Any = None,
    month: Any = None,
    day: Any = None,
    groups: int = targets.DEFAULT_GROUP,
    seasontype: int = targets.DEFAULT_SEASON_TYPE,
    limit: int = targets.DEFAULT_LIMIT,
    *,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    return fetch_content(
        targets.scoreboard_target(year, month, day, groups, seasontype, limit), session
    )


def get_conferences(
    year: Optional[int] = None,
    group: int = targets.DEFAULT_GROUP,
    *,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    return fetch_content(targets.conferences_target(year, group), session)


def get_standings(
    year: Optional[int] = None,
    group: int = targets.DEFAULT_GROUP,
    *,
    session: Optional[requests.Session] = None,
) -> dict[str, Any]:
    return fetch_content(targets.standings_target(year, group), session)


def get_team_list(
    group: int = targets.DEFAULT_GROUP, *, session: Optional[requests.Session] = None
) -> dict[str, Any]:
    return fetch_content(targets.team_list_target(group), session)


def get_team_info(team_id: GameId, *, session: Optional[requests.Session] = None) -> dict[str, Any]:
    return fetch_content(targets.team_info_target(team_id), session)


def get_team_players(
    team_id: GameId, *, session: Optional[requests.Session] = None
) -> dict[str, Any]:
    """Team document with the roster included."""
    return fetch_content(targets.team_roster_target(team_id), session)


__all__ = [
    "get_play_by_play",
    "get_box_score",
    "get_summary",
    "get_picks",
    "get_player_rankings",
    "get_school_rankings",
    "get_school_commits",
    "get_rankings",
    "get_schedule",
    "get_scoreboard",
    "get_conferences",
    "get_standings",
    "get_team_list",
    "get_team_info",
    "get_team_players",
]
