from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .schema import PlayerRanking, Record, SchoolCommit, SchoolRanking


SCOREBOARD_COLUMNS = [
	"event_id",
	"date",
	"start_time",
	"home_team",
	"away_team",
	"home_score",
	"away_score",
	"venue",
	"status",
]


def records_frame(records: Sequence[Record], columns: List[str]) -> pd.DataFrame:
	"""Build a DataFrame from records with a fixed column order.

	Every column in `columns` is present even when `records` is empty.
	"""
	df = pd.DataFrame([r.to_dict() for r in records])
	for c in columns:
		if c not in df.columns:
			df[c] = None
	return df[columns]


def player_rankings_frame(players: Sequence[PlayerRanking]) -> pd.DataFrame:
	return records_frame(players, PlayerRanking.field_names())


def school_rankings_frame(schools: Sequence[SchoolRanking]) -> pd.DataFrame:
	return records_frame(schools, SchoolRanking.field_names())


def school_commits_frame(commits: Sequence[SchoolCommit]) -> pd.DataFrame:
	return records_frame(commits, SchoolCommit.field_names())


def _score(value: Any) -> Optional[int]:
	try:
		return int(value)
	except (TypeError, ValueError):
		return None


def _parse_scoreboard_events(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
	"""Flatten scoreboard events into one dict per game.

	Missing values are returned as None.
	"""
	results: List[Dict[str, Any]] = []
	for ev in payload.get("events") or []:
		# We'll use the first competition if present
		competitions = ev.get("competitions") or []
		comp = competitions[0] if competitions else {}

		ev_date = ev.get("date") or comp.get("date")
		date_str = None
		time_str = None
		if ev_date:
			try:
				dt = datetime.fromisoformat(ev_date.replace("Z", "+00:00"))
				date_str = dt.date().isoformat()
				time_str = dt.time().isoformat()
			except ValueError:
				date_str = ev_date

		home_team = away_team = None
		home_score = away_score = None
		for team in comp.get("competitors") or []:
			team_obj = team.get("team") or {}
			display_name = team_obj.get("displayName") or team_obj.get("name")
			if team.get("homeAway") == "home":
				home_team = display_name
				home_score = _score(team.get("score"))
			elif team.get("homeAway") == "away":
				away_team = display_name
				away_score = _score(team.get("score"))

		venue_obj = comp.get("venue") or {}
		status_type = ((comp.get("status") or ev.get("status") or {}).get("type")) or {}

		results.append(
			{
				"event_id": ev.get("id"),
				"date": date_str,
				"start_time": time_str,
				"home_team": home_team,
				"away_team": away_team,
				"home_score": home_score,
				"away_score": away_score,
				"venue": venue_obj.get("fullName") or venue_obj.get("name"),
				"status": status_type.get("name"),
			}
		)

	return results


def scoreboard_frame(payload: Dict[str, Any]) -> pd.DataFrame:
	"""Convert a scoreboard JSON payload to one row per game."""
	df = pd.DataFrame(_parse_scoreboard_events(payload))
	for c in SCOREBOARD_COLUMNS:
		if c not in df.columns:
			df[c] = None
	return df[SCOREBOARD_COLUMNS]


__all__ = [
	"records_frame",
	"player_rankings_frame",
	"school_rankings_frame",
	"school_commits_frame",
	"scoreboard_frame",
	"SCOREBOARD_COLUMNS",
]
