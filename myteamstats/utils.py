from typing import List, Optional, Iterable

from .models import Match, MatchResult, parse_match_date


def sort_matches_by_date(matches: Iterable[Match], descending: bool = False) -> List[Match]:
    """Sort matches by date into a new list.

    The sort is stable, so matches sharing a date keep their input order
    in both directions.
    """
    return sorted(matches, key=lambda m: m.match_date, reverse=descending)


def filter_matches_by_date_range(matches: List[Match], start_date: Optional[str], end_date: Optional[str]) -> List[Match]:
    """Keep matches played between two dates (inclusive). Both bounds are required to filter."""
    if not start_date or not end_date:
        return list(matches)
    start = parse_match_date(start_date)
    end = parse_match_date(end_date)
    return [m for m in matches if start <= m.match_date <= end]


def filter_matches_by_year(matches: List[Match], year: int) -> List[Match]:
    return [m for m in matches if m.match_date.year == year]


def get_match_years(matches: List[Match]) -> List[int]:
    """Distinct years with at least one match, ascending"""
    return sorted({m.match_date.year for m in matches})


def contribution(match: Match) -> int:
    """Goals plus assists of the tracked player in one match"""
    return match.myGoals + match.myAssists


def count_results(matches: Iterable[Match]) -> dict:
    wins = 0
    draws = 0
    losses = 0
    for match in matches:
        if match.result == MatchResult.WIN:
            wins += 1
        elif match.result == MatchResult.DRAW:
            draws += 1
        else:
            losses += 1
    return {'wins': wins, 'draws': draws, 'losses': losses}


def format_record(wins: int, draws: int, losses: int) -> str:
    """Format a W-D-L record the way it is displayed ("3V-1E-2D")"""
    return f"{wins}V-{draws}E-{losses}D"


