"""cfb_stats package.

College football data from ESPN's APIs and the recruiting ranking sites.
"""

from .api import (
    get_box_score,
    get_conferences,
    get_picks,
    get_play_by_play,
    get_player_rankings,
    get_rankings,
    get_schedule,
    get_school_commits,
    get_school_rankings,
    get_scoreboard,
    get_standings,
    get_summary,
    get_team_info,
    get_team_list,
    get_team_players,
)
from .extract import ExtractionError
from .request import CFBStatsError, InvalidParameterError, RankingService

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
    "CFBStatsError",
    "InvalidParameterError",
    "ExtractionError",
    "RankingService",
]
