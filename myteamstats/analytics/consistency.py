"""
Consistency scoring.

A consistency score maps the spread of per-match contributions (goals plus
assists) onto 0-10: steadier output scores higher.
"""

import math
from typing import List, Optional

from ..config import (
    CONSISTENCY_DEFAULT_SCORE,
    CONSISTENCY_MAX_SCORE,
    CONSISTENCY_STDDEV_FACTOR,
    MOMENTUM_WINDOW,
)
from ..models import Match, MomentumPoint, YearlyConsistency, MonthlyConsistency
from ..utils import sort_matches_by_date, filter_matches_by_year, get_match_years, contribution


def calculate_standard_deviation(values: List[float]) -> float:
    """Population standard deviation; 0 for fewer than two values"""
    if len(values) <= 1:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def consistency_score(values: List[float]) -> float:
    """
    Score a series of per-match contributions on a 0-10 scale.

    Fewer than two values carry no spread information, so they get the
    neutral default instead of a perfect score.
    """
    if len(values) < 2:
        return CONSISTENCY_DEFAULT_SCORE
    std_dev = calculate_standard_deviation(values)
    return max(0, CONSISTENCY_MAX_SCORE - std_dev * CONSISTENCY_STDDEV_FACTOR)


def calculate_consistency(matches: List[Match]) -> float:
    """Consistency score of a set of matches, taken in chronological order"""
    return consistency_score([contribution(m) for m in sort_matches_by_date(matches)])


def momentum_series(matches: List[Match], year: Optional[int] = None) -> List[MomentumPoint]:
    """
    Trailing consistency score at each match of a year.

    The window at each match holds the MOMENTUM_WINDOW most recent matches of
    the whole history up to and including it, so early-season points still
    look back into the previous year.

    Args:
        matches: Full match history
        year: Year to report; defaults to the latest year with matches

    Returns:
        MomentumPoint list in chronological order
    """
    if not matches:
        return []

    all_sorted = sort_matches_by_date(matches)
    if year is None:
        year = all_sorted[-1].match_date.year

    series = []
    for index, match in enumerate(all_sorted):
        if match.match_date.year != year:
            continue
        start = max(0, index - MOMENTUM_WINDOW + 1)
        window = all_sorted[start:index + 1]
        series.append(MomentumPoint(
            matchId=match.id,
            date=match.date,
            score=consistency_score([contribution(m) for m in window]),
        ))
    return series


def yearly_consistency(matches: List[Match]) -> List[YearlyConsistency]:
    """One score per year with more than one match, ascending by year"""
    data = []
    for year in get_match_years(matches):
        year_matches = filter_matches_by_year(matches, year)
        if len(year_matches) > 1:
            data.append(YearlyConsistency(year=year, score=calculate_consistency(year_matches)))
    return data


def monthly_consistency(matches: List[Match], year: int) -> List[MonthlyConsistency]:
    """One score per month (1-12) of the given year with more than one match"""
    by_month = {}
    for match in filter_matches_by_year(matches, year):
        by_month.setdefault(match.match_date.month, []).append(match)

    return [
        MonthlyConsistency(month=month, score=calculate_consistency(by_month[month]))
        for month in sorted(by_month)
        if len(by_month[month]) > 1
    ]
