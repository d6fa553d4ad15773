"""Test configuration and fixtures for the college football client.

HTML fixtures are trimmed-down copies of each vendor's row markup, keeping
only the elements the extractors select on.
"""

from __future__ import annotations

from typing import Any, Optional
from unittest.mock import Mock

import pytest


def row_247(
    name: str,
    score: str = "0.9812",
    *,
    stars: int = 4,
    metrics: str = "6-2 / 205",
    college: Optional[str] = "Texas",
) -> str:
    """One 247Sports player rankings list item."""
    star_spans = '<span class="icon-starsolid yellow"></span>' * stars
    star_spans += '<span class="icon-starsolid"></span>' * (5 - stars)
    logo = (
        f'<div class="status"><a class="img-link" href="#"><img title="{college}" src="x.png"></a></div>'
        if college
        else '<div class="status"></div>'
    )
    return f"""
    <li class="rankings-page__list-item">
      <div class="rank-column"><div class="primary">99</div></div>
      <div class="recruit">
        <a class="rankings-page__name-link" href="#">{name}</a>
        <span class="meta"> Lake Travis (Austin, TX) </span>
      </div>
      <div class="position"> QB </div>
      <div class="metrics">{metrics}</div>
      <div class="rankings-page__star-and-score">{star_spans}<span class="score">{score}</span></div>
      {logo}
    </li>"""


def page_247(rows: list[str]) -> str:
    header = (
        '<li class="rankings-page__list-item rankings-page__list-item--header">'
        "<div>Rank</div><div>Player</div></li>"
    )
    return f'<html><body><ul class="rankings-page__list">{header}{"".join(rows)}</ul></body></html>'


def decorative_247() -> str:
    """Ad slot that matches the row selector but carries no player."""
    return '<li class="rankings-page__list-item"><div class="ad-slot">Advertisement</div></li>'


@pytest.fixture
def sample_247_html() -> str:
    return page_247(
        [
            row_247("Casey Rivers", "0.9999", stars=5, metrics="6-4 / 220", college="Texas"),
            row_247("Jordan Vale", "0.9871", stars=4, metrics="5-11 / 180", college=None),
            row_247("Morgan Hale", "0.9702", stars=4, metrics="6-6 / ", college="Georgia"),
        ]
    )


@pytest.fixture
def sample_rivals_html() -> str:
    return """
    <html><body>
    <div class="scrollable-table-container"><table>
      <thead><tr><th>Rank</th><th>Name</th></tr></thead>
      <tbody>
        <tr>
          <td><span class="ordinality">1</span></td>
          <td>
            <div class="first-name">Riley</div><div class="last-name">Stone</div>
            <div class="break-text">Chaminade-Madonna

Hollywood, FL</div>
          </td>
          <td><span class="pos">WR

190</span><span class="height">6-3</span></td>
          <td><rv-stars><i class="star-on"></i><i class="star-on"></i><i class="star-on"></i><i class="star-on"></i><i class="star-on"></i></rv-stars></td>
          <td><span class="score">6.1</span></td>
          <td><div class="school-name">Ohio State
Committed</div></td>
        </tr>
        <tr>
          <td><span class="ordinality"></span></td>
          <td>
            <div class="first-name">Avery</div><div class="last-name">Brooks</div>
            <div class="break-text">IMG Academy

Bradenton, FL</div>
          </td>
          <td><span class="pos">OT</span><span class="height">6-6</span></td>
          <td><rv-stars><i class="star-on"></i><i class="star-on"></i><i class="star-on"></i><i class="star-on"></i><i class="star-off"></i></rv-stars></td>
          <td><span class="score">5.9</span></td>
          <td><div class="school-name"></div></td>
        </tr>
        <tr class="ad-row"><td colspan="6"></td></tr>
      </tbody>
    </table></div>
    </body></html>"""


def row_on3(
    rank: str,
    name: str,
    rating: str,
    *,
    committed: Optional[str] = None,
    prediction: bool = False,
    stars: int = 5,
    nil: str = "",
) -> str:
    filled = '<span class="MuiRating-iconFilled"></span>' * stars
    empty = '<span class="MuiRating-iconEmpty"></span>' * (5 - stars)
    logo = (
        f'<img class="PlayerRankingItem_committedLogo__w1QtO" title="{committed}" src="c.png">'
        if committed
        else ""
    )
    predict = '<div class="PlayerRankingItem_prediction__LXknz">RPM</div>' if prediction else ""
    nil_html = f'<p class="PlayerRankingItem_nilValuation__hzo42">{nil}</p>' if nil else ""
    return f"""
    <div class="PlayerRankingItem_playerRankingItem__P26jQ">
      <p class="PlayerRankingItem_overallRank__ttJJC">{rank}</p>
      <div class="PlayerRankingItem_name__Xrs6_">{name}</div>
      <a class="PlayerRankingItem_highSchool__yTm5m">Belleville</a>
      <span class="PlayerRankingItem_homeTownName__C2R9c">(Belleville, MI)</span>
      <span class="PlayerRankingItem_position__xH0rl">QB</span>
      <span class="PlayerRankingItem_height__zEWyC">6-4 </span>
      <span class="StarRating_star__GR_Ff">{filled}{empty}</span>
      <span class="StarRating_overallRating__wz9dE">{rating}</span>
      {logo}{predict}{nil_html}
    </div>"""


@pytest.fixture
def sample_on3_html() -> str:
    rows = [
        row_on3("1", "Drew Parker", "98.98", committed="Michigan", nil="$2.5M"),
        row_on3("2", "Sam Ortiz", "98.50", prediction=True, stars=5),
        row_on3("", "Taylor Quinn", "97.10", stars=4),
    ]
    return (
        '<html><body><section class="PlayerRankings_playerRankings__7DK27">'
        + "".join(rows)
        + "</section></body></html>"
    )


@pytest.fixture
def sample_espn_recruits() -> dict[str, Any]:
    return {
        "count": 2,
        "pageIndex": 2,
        "items": [
            {
                "athlete": {
                    "id": "4685001",
                    "alternateId": "112233",
                    "fullName": "Jamie Cole",
                    "position": {"abbreviation": "QB"},
                    "hometown": {"city": "Austin", "stateAbbreviation": "TX"},
                    "height": 76,
                    "displayHeight": "6' 4\"",
                    "weight": 220,
                },
                "grade": 95,
                "attributes": [{"type": 1, "value": "QB"}, {"type": 0, "value": "3"}],
            },
            {
                "athlete": {
                    "id": "4685002",
                    "fullName": "Lee Grant",
                    "position": {"abbreviation": "WR"},
                    "hometown": {"city": "Miami"},
                    "height": 72,
                    "weight": 185,
                },
                "grade": 88,
            },
        ],
    }


@pytest.fixture
def sample_school_rankings_html() -> str:
    def school(rank: str, name: str, commits: str, stars: tuple[str, str, str], avg: str, points: str) -> str:
        return f"""
        <li class="rankings-page__list-item">
          <div class="rank-column"><div class="primary">{rank}</div></div>
          <div class="team"><a class="rankings-page__name-link" href="#">{name}</a></div>
          <div class="total"><a href="#">{commits} Commits</a></div>
          <ul class="star-commits-list">
            <li><h2>5-Star</h2><div>5: {stars[0]}</div></li>
            <li><h2>4-Star</h2><div>4: {stars[1]}</div></li>
            <li><h2>3-Star</h2><div>3: {stars[2]}</div></li>
          </ul>
          <div class="avg">{avg}</div>
          <div class="number">{points}</div>
        </li>"""

    header = (
        '<li class="rankings-page__list-item rankings-page__list-item--header">'
        "<div>Rank</div><div>Team</div></li>"
    )
    return (
        '<html><body><ul class="rankings-page__list">'
        + header
        + school("1", "Alabama", "27", ("4", "19", "4"), "93.39", "328.03")
        + school("2", "Georgia", "30", ("3", "22", "5"), "92.10", "315.50")
        + "</ul></body></html>"
    )


@pytest.fixture
def sample_commits_html() -> str:
    def commit(name: str, rating: str) -> str:
        return f"""
        <li class="ri-page__list-item">
          <a class="ri-page__name-link" href="#">{name}</a>
          <span class="meta">IMG Academy (Bradenton, FL)</span>
          <div class="position">QB</div>
          <div class="metrics">6-2 / 205</div>
          <div class="ri-page__star-and-score">
            <span class="icon-starsolid yellow"></span><span class="icon-starsolid yellow"></span>
            <span class="icon-starsolid yellow"></span><span class="icon-starsolid yellow"></span>
            <span class="icon-starsolid"></span>
            <span class="score">{rating}<span class="rank">NA</span></span>
          </div>
          <div class="natrank">45</div><div class="natrank">ignored</div>
          <div class="sttrank">7</div>
          <div class="posrank">3</div>
        </li>"""

    header = '<li class="ri-page__list-item"><b>Player</b><b>Pos</b></li>'
    return (
        '<html><body><ul class="ri-page__list">'
        + header
        + commit("Jesse Lane", "0.9512")
        + commit("Robin Park", "")
        + commit("Quinn Hart", "0.8890")
        + "</ul></body></html>"
    )


@pytest.fixture
def sample_summary() -> dict[str, Any]:
    """ESPN site API summary payload (trimmed)."""
    competitors = [
        {"homeAway": "home", "score": "35", "team": {"id": "52", "displayName": "Florida State Seminoles"}},
        {"homeAway": "away", "score": "17", "team": {"id": "2", "displayName": "Auburn Tigers"}},
    ]
    return {
        "header": {
            "id": "401256194",
            "season": {"year": 2020, "type": 2},
            "week": 5,
            "competitions": [{"id": "401256194", "competitors": competitors}],
        },
        "boxscore": {"teams": [], "players": []},
        "gameInfo": {"venue": {"fullName": "Doak Campbell Stadium"}},
        "drives": {"previous": []},
        "leaders": [],
        "scoringPlays": [],
        "winprobability": [{"homeWinPercentage": 0.6}],
        "pickcenter": [{"provider": {"name": "consensus"}, "spread": -7.5}],
        "againstTheSpread": [],
        "odds": [],
        "standings": {"groups": []},
    }


@pytest.fixture
def sample_game_package() -> dict[str, Any]:
    """ESPN core CDN play-by-play / box score payload (trimmed)."""
    return {
        "gameId": 401256194,
        "gamepackageJSON": {
            "header": {
                "season": {"year": 2020, "type": 2},
                "week": 5,
                "competitions": [
                    {
                        "competitors": [
                            {"homeAway": "home", "team": {"displayName": "Florida State Seminoles"}},
                            {"homeAway": "away", "team": {"displayName": "Auburn Tigers"}},
                        ]
                    }
                ],
            },
            "drives": {"previous": [{"id": "1"}]},
            "boxscore": {"teams": [{"team": {"id": "52"}}], "players": [{"team": {"id": "52"}}]},
            "scoringPlays": [{"id": "9"}],
            "standings": {"groups": []},
        },
    }


@pytest.fixture
def sample_scoreboard() -> dict[str, Any]:
    return {
        "events": [
            {
                "id": "401112233",
                "date": "2019-11-16T17:00Z",
                "competitions": [
                    {
                        "date": "2019-11-16T17:00Z",
                        "competitors": [
                            {"homeAway": "home", "score": "38", "team": {"displayName": "Clemson Tigers"}},
                            {"homeAway": "away", "score": "3", "team": {"displayName": "Wake Forest Demon Deacons"}},
                        ],
                        "venue": {"fullName": "Memorial Stadium"},
                        "status": {"type": {"name": "STATUS_FINAL"}},
                    }
                ],
            }
        ]
    }


def mock_session(payload: Any = None, text: str = "") -> Mock:
    """requests.Session stand-in whose GET returns `payload` (JSON) or `text`."""
    resp = Mock()
    resp.json.return_value = payload
    resp.text = text
    resp.raise_for_status.return_value = None
    session = Mock()
    session.get.return_value = resp
    return session
