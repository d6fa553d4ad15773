"""Field extraction from ESPN JSON and recruiting-site HTML.

JSON documents are projected by key path; a missing required key raises
`ExtractionError` instead of producing a half-empty record. HTML pages are
parsed with BeautifulSoup: each record comes from one row element matched by
a fixed selector, and every field is read with a sub-selector relative to
that row. HTML fields that are absent come back as "" or 0, and rows without
both a name and a rating (header rows, ad slots) are dropped.

Several vendors don't expose a usable rank per row, so rank is backfilled
from the page number and the row's position on the page.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional, Union

from bs4 import BeautifulSoup, Tag

from .request import CFBStatsError, RankingService
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

RECRUITING_PAGE_SIZE = 50
ESPN_RECRUITING_PAGE_SIZE = 25

# 247Sports
SELECTOR_247_PLAYER_ROWS = (
    "ul.rankings-page__list > li.rankings-page__list-item"
    ":not(.rankings-page__list-item--header)"
)
SELECTOR_247_SCHOOL_ROWS = ".rankings-page__list-item"
SELECTOR_247_COMMIT_ROWS = ".ri-page__list-item"

# Rivals (browser rendered)
SELECTOR_RIVALS_ROWS = "div.scrollable-table-container table > tbody > tr"

# On3 uses CSS-module class names; these change when the site redeploys
SELECTOR_ON3_ROWS = (
    "section.PlayerRankings_playerRankings__7DK27 > "
    "div.PlayerRankingItem_playerRankingItem__P26jQ"
)
ON3_COMMITTED_LOGO = "img.PlayerRankingItem_committedLogo__w1QtO"
ON3_PREDICTION = "div.PlayerRankingItem_prediction__LXknz"


class ExtractionError(CFBStatsError, LookupError):
    """Raised when a response lacks a field every valid response carries."""

    pass


# Helpers


def require(payload: Any, *path: Union[str, int]) -> Any:
    """Walk `path` through nested dicts/lists, failing loudly on a gap."""
    current = payload
    for i, key in enumerate(path):
        try:
            current = current[key]
        except (KeyError, IndexError, TypeError) as e:
            dotted = ".".join(str(k) for k in path[: i + 1])
            raise ExtractionError(f"Response is missing '{dotted}'") from e
    return current


def backfill_rank(page: int, page_size: int, index: int) -> int:
    """Overall rank of the `index`-th row (0-based) on a 1-based `page`."""
    return 1 + page_size * (page - 1) + index


def _text(row: Tag, selector: str) -> str:
    """Trimmed text of every element matching `selector`, concatenated."""
    return "".join(el.get_text() for el in row.select(selector)).strip()


def _first_text(row: Tag, selector: str) -> str:
    el = row.select_one(selector)
    return el.get_text().strip() if el else ""


def _own_text(row: Tag, selector: str) -> str:
    """Text directly inside the first match, ignoring child elements."""
    el = row.select_one(selector)
    if el is None:
        return ""
    return "".join(el.find_all(string=True, recursive=False)).strip()


def _to_int(text: Any, default: int = 0) -> int:
    match = re.search(r"-?\d+", str(text or ""))
    return int(match.group()) if match else default


def _to_float(text: Any, default: float = 0.0) -> float:
    try:
        return float(str(text).strip())
    except (TypeError, ValueError):
        return default


def _rating(text: str) -> Union[float, str]:
    """Numeric rating when it parses, otherwise the text as displayed (e.g. "NA")."""
    try:
        return float(text)
    except ValueError:
        return text


def _squash(text: str) -> str:
    return " ".join(text.split())


def _keep(name: str, rating: str) -> bool:
    return bool(name) and bool(rating)


# ESPN game documents


def extract_play_by_play(payload: dict[str, Any]) -> PlayByPlay:
    package = require(payload, "gamepackageJSON")
    header = require(package, "header")
    competitions = require(header, "competitions")
    return PlayByPlay(
        id=str(require(payload, "gameId")),
        teams=require(competitions, 0, "competitors"),
        competitions=competitions,
        season=require(header, "season"),
        week=header.get("week"),
        drives=package.get("drives"),
        box_score=package.get("boxscore"),
        scoring_plays=package.get("scoringPlays"),
        standings=package.get("standings"),
    )


def extract_box_score(payload: dict[str, Any]) -> BoxScore:
    box = require(payload, "gamepackageJSON", "boxscore")
    return BoxScore(
        id=str(require(payload, "gameId")),
        teams=require(box, "teams"),
        players=box.get("players"),
    )


def extract_summary(payload: dict[str, Any]) -> GameSummary:
    header = require(payload, "header")
    competitions = require(header, "competitions")
    return GameSummary(
        id=int(require(header, "id")),
        header=header,
        teams=require(competitions, 0, "competitors"),
        competitions=competitions,
        season=require(header, "season"),
        week=header.get("week"),
        box_score=payload.get("boxscore"),
        game_info=payload.get("gameInfo"),
        drives=payload.get("drives"),
        leaders=payload.get("leaders"),
        scoring_plays=payload.get("scoringPlays"),
        win_probability=payload.get("winprobability"),
        standings=payload.get("standings"),
    )


def extract_picks(payload: dict[str, Any]) -> GamePicks:
    header = require(payload, "header")
    competitions = require(header, "competitions")
    return GamePicks(
        id=int(require(header, "id")),
        header=header,
        teams=require(competitions, 0, "competitors"),
        competitions=competitions,
        season=require(header, "season"),
        week=header.get("week"),
        game_info=payload.get("gameInfo"),
        leaders=payload.get("leaders"),
        win_probability=payload.get("winprobability"),
        pickcenter=payload.get("pickcenter"),
        against_the_spread=payload.get("againstTheSpread"),
        odds=payload.get("odds"),
        standings=payload.get("standings"),
    )


def extract_schedule(payload: dict[str, Any]) -> dict[str, Any]:
    return require(payload, "content", "schedule")


# Player rankings, one extractor per vendor


def extract_247_players(html: str, page: int = 1) -> list[PlayerRanking]:
    """247Sports (composite or in-house) player rankings.

    The displayed rank can't be read reliably from the row markup, so rank
    is backfilled from `page` (50 players per page).
    """
    soup = BeautifulSoup(html, "html.parser")
    players: list[PlayerRanking] = []

    for row in soup.select(SELECTOR_247_PLAYER_ROWS):
        name = _text(row, ".rankings-page__name-link")
        rating = _text(row, ".score")
        if not _keep(name, rating):
            continue

        metrics = _text(row, ".metrics").split("/")
        logo = row.select_one(".img-link > img")
        players.append(
            PlayerRanking(
                rank=backfill_rank(page, RECRUITING_PAGE_SIZE, len(players)),
                name=name,
                high_school=_text(row, "span.meta"),
                position=_text(row, ".position"),
                height=metrics[0].strip(),
                weight=_to_int(metrics[1]) if len(metrics) > 1 else 0,
                stars=len(row.select(".rankings-page__star-and-score > .yellow")),
                rating=_rating(rating),
                college=(logo.get("title") if logo is not None else None) or "uncommitted",
            )
        )

    return players


def extract_rivals_players(html: str, page: int = 1) -> list[PlayerRanking]:
    """Rivals250 table, as rendered by the browser."""
    soup = BeautifulSoup(html, "html.parser")
    players: list[PlayerRanking] = []

    for row in soup.select(SELECTOR_RIVALS_ROWS):
        name = f"{_text(row, 'div.first-name')} {_text(row, 'div.last-name')}".strip()
        rating = _text(row, ".score")
        if not _keep(name, rating):
            continue

        # "WR\n\n185": position and weight share one cell
        parts = [p.strip() for p in re.split(r"\n\s*\n", _text(row, "span.pos")) if p.strip()]
        fallback = backfill_rank(page, RECRUITING_PAGE_SIZE, len(players))
        players.append(
            PlayerRanking(
                rank=_to_int(_text(row, "span.ordinality"), default=fallback),
                name=name,
                high_school=_squash(_text(row, "div.break-text")),
                position=parts[0] if parts else "",
                height=_text(row, "span.height"),
                weight=_to_int(parts[-1]) if len(parts) > 1 else 0,
                stars=len(row.select("rv-stars i.star-on")),
                rating=_rating(rating),
                college=_text(row, "div.school-name").split("\n")[0].strip() or "uncommitted",
            )
        )

    return players


def _on3_college(row: Tag) -> str:
    logo = row.select_one(ON3_COMMITTED_LOGO)
    if logo is not None:
        return logo.get("title") or "unknown"
    if row.select_one(ON3_PREDICTION) is not None:
        return "uncommitted"
    return "unknown"


def extract_on3_players(html: str, page: int = 1) -> list[PlayerRanking]:
    """On3 (in-house or industry composite) player rankings."""
    soup = BeautifulSoup(html, "html.parser")
    players: list[PlayerRanking] = []

    for row in soup.select(SELECTOR_ON3_ROWS):
        name = _text(row, "div.PlayerRankingItem_name__Xrs6_")
        rating = _text(row, "span.StarRating_overallRating__wz9dE")
        if not _keep(name, rating):
            continue

        high_school = _text(row, "a.PlayerRankingItem_highSchool__yTm5m")
        home_town = _text(row, "span.PlayerRankingItem_homeTownName__C2R9c")
        fallback = backfill_rank(page, RECRUITING_PAGE_SIZE, len(players))
        players.append(
            PlayerRanking(
                rank=_to_int(_text(row, "p.PlayerRankingItem_overallRank__ttJJC"), default=fallback),
                name=name,
                high_school=f"{high_school} {home_town}".strip(),
                position=_text(row, "span.PlayerRankingItem_position__xH0rl"),
                height=_text(row, "span.PlayerRankingItem_height__zEWyC"),
                weight=0,
                stars=len(row.select("span.StarRating_star__GR_Ff span.MuiRating-iconFilled")),
                rating=_rating(rating),
                college=_on3_college(row),
                nil_value=_text(row, "p.PlayerRankingItem_nilValuation__hzo42") or None,
            )
        )

    return players


def _espn_listed_rank(record: dict[str, Any]) -> Optional[int]:
    """Rank carried as the type-0 attribute, when ESPN provides one."""
    athlete = record.get("athlete") or {}
    attributes = list(record.get("attributes") or []) + list(athlete.get("attributes") or [])
    for attribute in attributes:
        if attribute.get("type") == 0 and attribute.get("value") is not None:
            return _to_int(attribute["value"], default=0) or None
    return None


def extract_espn_players(payload: dict[str, Any], page: int = 1) -> list[PlayerRanking]:
    """ESPN recruiting feed (JSON, 25 athletes per page).

    ESPN publishes no star ratings or commitments here, so stars is 0 and
    college is "unknown". Older classes lack a listed rank; those are
    backfilled from the page number.
    """
    players: list[PlayerRanking] = []

    for index, record in enumerate(require(payload, "items")):
        athlete = require(record, "athlete")
        hometown = athlete.get("hometown") or {}
        town = ", ".join(
            part for part in (hometown.get("city"), hometown.get("stateAbbreviation")) if part
        )
        grade = record.get("grade")
        players.append(
            PlayerRanking(
                rank=_espn_listed_rank(record)
                or backfill_rank(page, ESPN_RECRUITING_PAGE_SIZE, index),
                name=require(athlete, "fullName"),
                high_school=town,
                position=require(athlete, "position", "abbreviation"),
                height=str(athlete.get("displayHeight") or athlete.get("height") or ""),
                weight=_to_int(athlete.get("weight")),
                stars=0,
                rating=grade if grade is not None else "",
                college="unknown",
                player_id=str(require(athlete, "id")),
                alt_id=athlete.get("alternateId"),
            )
        )

    return players


PlayerExtractor = Callable[[Any, int], list[PlayerRanking]]

PLAYER_EXTRACTORS: dict[RankingService, PlayerExtractor] = {
    RankingService.COMPOSITE_247: extract_247_players,
    RankingService.SPORTS_247: extract_247_players,
    RankingService.RIVALS: extract_rivals_players,
    RankingService.ON3: extract_on3_players,
    RankingService.ON3_COMPOSITE: extract_on3_players,
    RankingService.ESPN: extract_espn_players,
}


# 247Sports school pages


def extract_school_rankings(html: str, page: int = 1) -> list[SchoolRanking]:
    """247Sports composite team (class) rankings."""
    soup = BeautifulSoup(html, "html.parser")
    schools: list[SchoolRanking] = []

    for row in soup.select(SELECTOR_247_SCHOOL_ROWS):
        school = _text(row, ".rankings-page__name-link")
        points = _text(row, ".number")
        if not _keep(school, points):
            continue

        # "5: 2", "4: 14", "3: 9"
        star_counts = [
            _to_int(re.sub(r"^\s*\d\s*:", "", div.get_text()))
            for div in row.select("ul.star-commits-list > li > div")[:3]
        ]
        star_counts += [0] * (3 - len(star_counts))
        fallback = backfill_rank(page, RECRUITING_PAGE_SIZE, len(schools))
        schools.append(
            SchoolRanking(
                rank=_to_int(_text(row, ".rank-column .primary"), default=fallback),
                school=school,
                total_commits=_to_int(_text(row, ".total a")),
                five_stars=star_counts[0],
                four_stars=star_counts[1],
                three_stars=star_counts[2],
                average_rating=_to_float(_text(row, ".avg")),
                points=_to_float(points),
            )
        )

    return schools


def extract_school_commits(html: str) -> list[SchoolCommit]:
    """Commit list for one school's recruiting class on 247Sports."""
    soup = BeautifulSoup(html, "html.parser")
    commits: list[SchoolCommit] = []

    for row in soup.select(SELECTOR_247_COMMIT_ROWS):
        name = _text(row, ".ri-page__name-link")
        # the score span also wraps a rank badge; only its own text is the rating
        rating = _own_text(row, "span.score")
        if not _keep(name, rating):
            continue

        metrics = _text(row, ".metrics").split("/")
        commits.append(
            SchoolCommit(
                name=name,
                high_school=_text(row, "span.meta"),
                position=_text(row, ".position"),
                height=metrics[0].strip(),
                weight=_to_int(metrics[1]) if len(metrics) > 1 else 0,
                stars=len(row.select(".ri-page__star-and-score .yellow")),
                rating=_rating(rating),
                national_rank=_first_text(row, ".natrank"),
                state_rank=_first_text(row, ".sttrank"),
                position_rank=_first_text(row, ".posrank"),
            )
        )

    logger.debug(f"Kept {len(commits)} commits")
    return commits


__all__ = [
    "ExtractionError",
    "require",
    "backfill_rank",
    "extract_play_by_play",
    "extract_box_score",
    "extract_summary",
    "extract_picks",
    "extract_schedule",
    "extract_247_players",
    "extract_rivals_players",
    "extract_on3_players",
    "extract_espn_players",
    "PLAYER_EXTRACTORS",
    "extract_school_rankings",
    "extract_school_commits",
    "RECRUITING_PAGE_SIZE",
    "ESPN_RECRUITING_PAGE_SIZE",
]
