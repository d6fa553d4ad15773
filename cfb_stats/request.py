"""Target construction for every college football endpoint.

Each builder maps caller parameters onto a `TargetDescriptor`: the URL, the
query string, request headers and how the page has to be acquired. Builders
do no I/O, so invalid input is rejected before anything touches the network.

Endpoints:
- ESPN core CDN (``cdn.espn.com/core``): play-by-play, box score, rankings
  poll and schedule. These need the ``xhr=1`` flag to return JSON.
- ESPN site API (``site.api.espn.com``): summary, scoreboard, conferences,
  standings, teams.
- 247Sports, On3 and Rivals recruiting rankings (HTML), plus the ESPN
  recruiting feed (JSON).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Union

from .config import browser_headers


ESPN_CORE_URL = "http://cdn.espn.com/core/college-football"
ESPN_SITE_URL = "http://site.api.espn.com/apis/site/v2/sports/football/college-football"
ESPN_STANDINGS_URL = (
    "https://site.web.api.espn.com/apis/v2/sports/football/college-football/standings"
)
ESPN_RECRUITING_URL = (
    "https://sports.core.api.espn.com/v2/sports/football/leagues/college-football/recruiting"
)

# Defaults shared by the ESPN endpoints
DEFAULT_GROUP = 80  # FBS; 81 is FCS
DEFAULT_SEASON_TYPE = 2  # 1 pre, 2 regular, 3 post, 4 off-season
DEFAULT_LIMIT = 300
DEFAULT_INSTITUTION_GROUP = "HighSchool"

STANDINGS_SORT = (
    "winpercent:desc,leaguewinpercent:desc,vsconf_winpercent:desc,"
    "vsconf_gamesbehind:asc,vsconf_playoffseed:asc,wins:desc,"
    "losses:desc,playoffseed:asc,alpha:asc"
)

Scalar = Union[str, int, float, None]


class CFBStatsError(Exception):
    """Base exception for the cfb_stats package."""

    pass


class InvalidParameterError(CFBStatsError, ValueError):
    """Raised for caller input that cannot be turned into a request."""

    pass


class RenderMode(Enum):
    PLAIN_FETCH = "plain-fetch"
    BROWSER_RENDERED = "browser-rendered"


class RankingService(Enum):
    """Recruiting ranking vendors accepted by the player rankings lookup."""

    COMPOSITE_247 = "247Composite"
    SPORTS_247 = "247"
    RIVALS = "Rivals"
    ON3 = "On3"
    ON3_COMPOSITE = "On3Composite"
    ESPN = "ESPN"

    @classmethod
    def parse(cls, value: Union[str, "RankingService"]) -> "RankingService":
        """Resolve a service name (case-insensitive) to a member.

        Raises:
            InvalidParameterError: If the name matches no known service.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        valid = ", ".join(m.value for m in cls)
        raise InvalidParameterError(
            f"Invalid rankings service '{value}'. Use one of: {valid}"
        )


@dataclass(frozen=True)
class TargetDescriptor:
    """Everything needed to acquire one page or JSON document."""

    url: str
    params: Mapping[str, Scalar] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    render_mode: RenderMode = RenderMode.PLAIN_FETCH
    as_json: bool = True


def _as_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"Invalid {name} '{value}'") from e


def format_date(year: Any, month: Any, day: Any) -> str:
    """Format a date triple as YYYYMMDD, zero-padding month and day."""
    return f"{_as_int(year, 'year')}{_as_int(month, 'month'):02d}{_as_int(day, 'day'):02d}"


def date_param(year: Any = None, month: Any = None, day: Any = None) -> Optional[str]:
    """Return the `dates` query value, or None unless all three parts are set."""
    if year and month and day:
        return format_date(year, month, day)
    return None


# ESPN game endpoints


def play_by_play_target(game_id: Union[int, str]) -> TargetDescriptor:
    return TargetDescriptor(
        url=f"{ESPN_CORE_URL}/playbyplay",
        params={"gameId": game_id, "xhr": 1, "render": "false", "userab": 18},
    )


def box_score_target(game_id: Union[int, str]) -> TargetDescriptor:
    return TargetDescriptor(
        url=f"{ESPN_CORE_URL}/boxscore",
        params={
            "gameId": game_id,
            "xhr": 1,
            "render": "false",
            "device": "desktop",
            "userab": 18,
        },
    )


def summary_target(game_id: Union[int, str]) -> TargetDescriptor:
    """Game summary; the PickCenter lookup reads the same document."""
    return TargetDescriptor(url=f"{ESPN_SITE_URL}/summary", params={"event": game_id})


# Recruiting


def player_rankings_target(
    year: Union[int, str],
    service: Union[str, RankingService] = RankingService.COMPOSITE_247,
    *,
    page: int = 1,
    group: str = DEFAULT_INSTITUTION_GROUP,
    position: Optional[str] = None,
    state: Optional[str] = None,
) -> TargetDescriptor:
    """Build the player rankings target for one recruiting service.

    `group`, `position` and `state` only apply to the 247Sports services.
    Rivals is rendered client side, so its target is a browser page whose
    URL carries every parameter in the path.

    Raises:
        InvalidParameterError: If `service` is not a known ranking service.
    """
    service = RankingService.parse(service)
    headers = browser_headers()

    if service in (RankingService.COMPOSITE_247, RankingService.SPORTS_247):
        path = (
            "CompositeRecruitRankings"
            if service is RankingService.COMPOSITE_247
            else "recruitrankings"
        )
        return TargetDescriptor(
            url=f"http://247sports.com/Season/{year}-Football/{path}",
            params={
                "InstitutionGroup": group,
                "Page": page,
                "Position": position,
                "State": state,
            },
            headers=headers,
            as_json=False,
        )
    if service is RankingService.RIVALS:
        return TargetDescriptor(
            url=f"https://n.rivals.com/prospect_rankings/rivals250/{year}",
            headers=headers,
            render_mode=RenderMode.BROWSER_RENDERED,
            as_json=False,
        )
    if service in (RankingService.ON3, RankingService.ON3_COMPOSITE):
        kind = "player" if service is RankingService.ON3 else "industry-player"
        return TargetDescriptor(
            url=f"https://www.on3.com/db/rankings/{kind}/football/{year}/",
            headers=headers,
            as_json=False,
        )
    return TargetDescriptor(
        url=f"{ESPN_RECRUITING_URL}/{year}/athletes",
        params={"page": page, "lang": "en", "region": "us"},
        headers=headers,
    )


def school_rankings_target(year: Union[int, str], page: int = 1) -> TargetDescriptor:
    return TargetDescriptor(
        url=f"http://247sports.com/Season/{year}-Football/CompositeTeamRankings",
        params={"Page": page},
        headers=browser_headers(),
        as_json=False,
    )


def school_commits_target(school: str, year: Union[int, str]) -> TargetDescriptor:
    """247Sports commit list; `school` is the team subdomain, e.g. "floridastate"."""
    if not school or not str(school).strip():
        raise InvalidParameterError("School is required")
    return TargetDescriptor(
        url=f"http://{str(school).strip()}.247sports.com/Season/{year}-Football/Commits",
        headers=browser_headers(),
        as_json=False,
    )


# ESPN league endpoints


def rankings_target(year: Any = None, week: Any = None) -> TargetDescriptor:
    params: dict[str, Scalar] = {}
    if year:
        params["year"] = year
    if week:
        params["week"] = week
    return TargetDescriptor(url=f"{ESPN_CORE_URL}/rankings", params=params)


def schedule_target(
    year: Any = None,
    month: Any = None,
    day: Any = None,
    groups: int = DEFAULT_GROUP,
    seasontype: int = DEFAULT_SEASON_TYPE,
) -> TargetDescriptor:
    params: dict[str, Scalar] = {
        "groups": groups,
        "seasontype": seasontype,
        "xhr": 1,
        "render": "false",
        "device": "desktop",
        "userab": 18,
    }
    dates = date_param(year, month, day)
    if dates:
        params["dates"] = dates
    return TargetDescriptor(url=f"{ESPN_CORE_URL}/schedule", params=params)


def scoreboard_target(
    year: Any = None,
    month: Any = None,
    day: Any = None,
    groups: int = DEFAULT_GROUP,
    seasontype: int = DEFAULT_SEASON_TYPE,
    limit: int = DEFAULT_LIMIT,
) -> TargetDescriptor:
    params: dict[str, Scalar] = {
        "groups": groups,
        "seasontype": seasontype,
        "limit": limit,
    }
    dates = date_param(year, month, day)
    if dates:
        params["dates"] = dates
    return TargetDescriptor(url=f"{ESPN_SITE_URL}/scoreboard", params=params)


def conferences_target(year: Optional[int] = None, group: int = DEFAULT_GROUP) -> TargetDescriptor:
    return TargetDescriptor(
        url=f"{ESPN_SITE_URL}/scoreboard/conferences",
        params={"season": year or date.today().year, "group": group},
    )


def standings_target(year: Optional[int] = None, group: int = DEFAULT_GROUP) -> TargetDescriptor:
    return TargetDescriptor(
        url=ESPN_STANDINGS_URL,
        params={
            "region": "us",
            "lang": "en",
            "contentorigin": "espn",
            "season": year or date.today().year,
            "group": group,
            "type": 0,
            "level": 1,
            "sort": STANDINGS_SORT,
        },
    )


def team_list_target(group: int = DEFAULT_GROUP) -> TargetDescriptor:
    return TargetDescriptor(
        url=f"{ESPN_SITE_URL}/teams", params={"group": group, "limit": 1000}
    )


def team_info_target(team_id: Union[int, str]) -> TargetDescriptor:
    return TargetDescriptor(url=f"{ESPN_SITE_URL}/teams/{team_id}")


def team_roster_target(team_id: Union[int, str]) -> TargetDescriptor:
    return TargetDescriptor(
        url=f"{ESPN_SITE_URL}/teams/{team_id}", params={"enable": "roster"}
    )


__all__ = [
    "CFBStatsError",
    "InvalidParameterError",
    "RenderMode",
    "RankingService",
    "TargetDescriptor",
    "format_date",
    "date_param",
    "play_by_play_target",
    "box_score_target",
    "summary_target",
    "player_rankings_target",
    "school_rankings_target",
    "school_commits_target",
    "rankings_target",
    "schedule_target",
    "scoreboard_target",
    "conferences_target",
    "standings_target",
    "team_list_target",
    "team_info_target",
    "team_roster_target",
]
