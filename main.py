#!/usr/bin/env python3
"""Command-line interface for the college football data client.

Each subcommand calls exactly one operation and prints the result as JSON,
or as CSV for the list-shaped recruiting and scoreboard results.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

import pandas as pd

import cfb_stats
from cfb_stats.request import InvalidParameterError, RankingService
from cfb_stats.schema import Record
from cfb_stats.transform import (
    player_rankings_frame,
    school_commits_frame,
    school_rankings_frame,
    scoreboard_frame,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Commands whose result can be written as CSV
CSV_FRAMES: dict[str, Callable[[Any], pd.DataFrame]] = {
    "player-rankings": player_rankings_frame,
    "school-rankings": school_rankings_frame,
    "school-commits": school_commits_frame,
    "scoreboard": scoreboard_frame,
}


def to_jsonable(result: Any) -> Any:
    """Convert records (or lists of records) into plain JSON-ready values."""
    if isinstance(result, Record):
        return result.to_dict()
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


def write_result(command: str, result: Any, fmt: str, output: str | None) -> None:
    if fmt == "csv":
        text = CSV_FRAMES[command](result).to_csv(index=False)
    else:
        text = json.dumps(to_jsonable(result), indent=2, default=str) + "\n"

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
        logger.info(f"Wrote {command} result to {output}")
    else:
        sys.stdout.write(text)


def run_command(args: argparse.Namespace) -> Any:
    """Dispatch parsed arguments to the matching operation."""
    cmd = args.command
    if cmd == "play-by-play":
        return cfb_stats.get_play_by_play(args.game_id)
    if cmd == "box-score":
        return cfb_stats.get_box_score(args.game_id)
    if cmd == "summary":
        return cfb_stats.get_summary(args.game_id)
    if cmd == "picks":
        return cfb_stats.get_picks(args.game_id)
    if cmd == "player-rankings":
        return cfb_stats.get_player_rankings(
            args.year,
            page=args.page,
            group=args.group,
            position=args.position,
            state=args.state,
            service=args.service,
        )
    if cmd == "school-rankings":
        return cfb_stats.get_school_rankings(args.year, args.page)
    if cmd == "school-commits":
        return cfb_stats.get_school_commits(args.school, args.year)
    if cmd == "rankings":
        return cfb_stats.get_rankings(args.year, args.week)
    if cmd == "schedule":
        return cfb_stats.get_schedule(
            args.year, args.month, args.day, args.group, args.seasontype
        )
    if cmd == "scoreboard":
        return cfb_stats.get_scoreboard(
            args.year, args.month, args.day, args.group, args.seasontype, args.limit
        )
    if cmd == "conferences":
        return cfb_stats.get_conferences(args.year, args.group)
    if cmd == "standings":
        return cfb_stats.get_standings(args.year, args.group)
    if cmd == "teams":
        return cfb_stats.get_team_list(args.group)
    if cmd == "team-info":
        return cfb_stats.get_team_info(args.team_id)
    if cmd == "roster":
        return cfb_stats.get_team_players(args.team_id)
    raise ValueError(f"Unknown command: {cmd}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="College football data from ESPN and recruiting ranking sites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play-by-play for a game
  python main.py play-by-play 401256194

  # 247Sports composite rankings, second page, as CSV
  python main.py player-rankings 2024 --page 2 --format csv

  # Rivals250 (rendered in a headless browser)
  python main.py player-rankings 2024 --service Rivals

  # Scoreboard for a date, FCS
  python main.py scoreboard --year 2019 --month 11 --day 16 --group 81

  # Florida State commits
  python main.py school-commits floridastate 2021 --output fsu.json
        """,
    )
    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format (default: json). CSV is available for "
        + ", ".join(sorted(CSV_FRAMES)),
    )
    parser.add_argument("--output", type=str, help="Write to this file instead of stdout")

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("play-by-play", "Game drives and plays"),
        ("box-score", "Game box score"),
        ("summary", "Game summary"),
        ("picks", "PickCenter odds for a game"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("game_id", type=int, help="ESPN game id")

    players = sub.add_parser("player-rankings", help="Recruit rankings")
    players.add_argument("year", type=int, help="Recruiting class year")
    players.add_argument("--page", type=int, default=1)
    players.add_argument(
        "--group", default="HighSchool", help="HighSchool, JuniorCollege or PrepSchool (247 only)"
    )
    players.add_argument("--position", help="Position filter (247 only)")
    players.add_argument("--state", help="State filter (247 only)")
    players.add_argument(
        "--service",
        default=RankingService.COMPOSITE_247.value,
        help="Ranking service: " + ", ".join(m.value for m in RankingService),
    )

    schools = sub.add_parser("school-rankings", help="Team recruiting class rankings")
    schools.add_argument("year", type=int)
    schools.add_argument("--page", type=int, default=1)

    commits = sub.add_parser("school-commits", help="Commits for a school")
    commits.add_argument("school", help="247Sports subdomain, e.g. floridastate")
    commits.add_argument("year", type=int)

    rankings = sub.add_parser("rankings", help="Poll rankings")
    rankings.add_argument("--year", type=int)
    rankings.add_argument("--week", type=int)

    for name in ("schedule", "scoreboard"):
        cmd = sub.add_parser(name, help=f"Game {name} for a date")
        cmd.add_argument("--year", type=int)
        cmd.add_argument("--month", type=int)
        cmd.add_argument("--day", type=int)
        cmd.add_argument("--group", type=int, default=80, help="80 for FBS, 81 for FCS")
        cmd.add_argument(
            "--seasontype", type=int, default=2, help="1 pre, 2 regular, 3 post, 4 off-season"
        )
        if name == "scoreboard":
            cmd.add_argument("--limit", type=int, default=300)

    for name in ("conferences", "standings"):
        cmd = sub.add_parser(name, help=f"Season {name}")
        cmd.add_argument("--year", type=int, help="Season (default: current year)")
        cmd.add_argument("--group", type=int, default=80)

    teams = sub.add_parser("teams", help="All teams in a group")
    teams.add_argument("--group", type=int, default=80)

    for name in ("team-info", "roster"):
        cmd = sub.add_parser(name, help=f"Team {name.replace('-', ' ')}")
        cmd.add_argument("team_id", type=int, help="ESPN team id")

    return parser


def main() -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if args.format == "csv" and args.command not in CSV_FRAMES:
        parser.error(
            f"--format csv is not available for {args.command}. "
            f"Use one of: {', '.join(sorted(CSV_FRAMES))}"
        )

    try:
        result = run_command(args)
    except InvalidParameterError as e:
        parser.error(str(e))
    except Exception as e:
        logger.error(f"❌ {args.command} failed: {e}")
        raise

    write_result(args.command, result, args.format, args.output)


if __name__ == "__main__":
    main()
