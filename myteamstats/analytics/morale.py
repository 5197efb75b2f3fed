"""
Player morale.

Morale is a 0-100 score over the most recent matches, each weighted by how
recent it is, plus a qualitative level and a trend against the window one
match earlier. Nothing is carried between calls.
"""

import logging
from typing import List, Optional

from ..config import (
    MORALE_WINDOW,
    MORALE_MIN_MATCHES,
    MORALE_WEIGHT_DECAY,
    MORALE_POINTS,
    MORALE_GOAL_WEIGHT,
    MORALE_ASSIST_WEIGHT,
    MORALE_GOAL_DIFFERENCE_WEIGHT,
    MORALE_MIN_RAW_SCORE,
    MORALE_MAX_RAW_SCORE,
    MORALE_TREND_MARGIN,
)
from ..models import Match, MatchResult, MoraleLevel, MoraleTrend, PlayerMorale, RecentMatchesSummary
from ..utils import sort_matches_by_date, count_results, format_record

logger = logging.getLogger(__name__)

# Lower bound of each level, checked top-down. A perfect 100 is its own level.
MORALE_LEVEL_THRESHOLDS = [
    (90, MoraleLevel.ESTELAR),
    (80, MoraleLevel.INSPIRADO),
    (70, MoraleLevel.CONFIADO),
    (60, MoraleLevel.SOLIDO),
    (50, MoraleLevel.REGULAR),
    (40, MoraleLevel.DUDOSO),
    (30, MoraleLevel.BLOQUEADO),
    (10, MoraleLevel.EN_CAIDA_LIBRE),
]


def match_morale_points(match: Match) -> float:
    """Raw morale contribution of a single match"""
    if match.result == MatchResult.WIN:
        points = MORALE_POINTS['win']
    elif match.result == MatchResult.DRAW:
        points = MORALE_POINTS['draw']
    else:
        points = MORALE_POINTS['loss']
    points += match.myGoals * MORALE_GOAL_WEIGHT
    points += match.myAssists * MORALE_ASSIST_WEIGHT
    points += match.goalDifference * MORALE_GOAL_DIFFERENCE_WEIGHT
    return points


def score_for_window(matches: List[Match]) -> Optional[float]:
    """
    Weighted morale score for a window of matches, most recent first.

    Returns:
        Score clamped to 0-100, or None with fewer than MORALE_MIN_MATCHES matches
    """
    if len(matches) < MORALE_MIN_MATCHES:
        return None

    weighted_sum = 0.0
    weight_sum = 0.0
    for index, match in enumerate(matches):
        weight = 1.0 - index * MORALE_WEIGHT_DECAY
        weighted_sum += match_morale_points(match) * weight
        weight_sum += weight

    average = weighted_sum / weight_sum if weight_sum > 0 else 0
    score = (average - MORALE_MIN_RAW_SCORE) / (MORALE_MAX_RAW_SCORE - MORALE_MIN_RAW_SCORE) * 100
    return max(0.0, min(100.0, score))


def morale_level(score: float) -> MoraleLevel:
    if score == 100:
        return MoraleLevel.MODO_D10S
    for threshold, level in MORALE_LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return MoraleLevel.DESCONOCIDO


def morale_trend(current: float, previous: Optional[float], total_matches: int) -> MoraleTrend:
    if previous is None or total_matches <= MORALE_WINDOW:
        return MoraleTrend.NEW
    if current > previous + MORALE_TREND_MARGIN:
        return MoraleTrend.UP
    if current < previous - MORALE_TREND_MARGIN:
        return MoraleTrend.DOWN
    return MoraleTrend.SAME


def calculate_team_morale(matches: List[Match]) -> Optional[PlayerMorale]:
    """
    Calculate the current morale from the most recent matches.

    Args:
        matches: Match history in any order (left untouched)

    Returns:
        PlayerMorale, or None when the window holds fewer than 3 matches
    """
    sorted_matches = sort_matches_by_date(matches, descending=True)
    current_matches = sorted_matches[:MORALE_WINDOW]
    previous_matches = sorted_matches[1:MORALE_WINDOW + 1]

    current_score = score_for_window(current_matches)
    if current_score is None:
        return None
    previous_score = score_for_window(previous_matches)

    results = count_results(current_matches)
    summary = RecentMatchesSummary(
        matchesConsidered=len(current_matches),
        record=format_record(results['wins'], results['draws'], results['losses']),
        goals=sum(m.myGoals for m in current_matches),
        assists=sum(m.myAssists for m in current_matches),
    )

    morale = PlayerMorale(
        level=morale_level(current_score),
        score=current_score,
        trend=morale_trend(current_score, previous_score, len(sorted_matches)),
        recentMatchesSummary=summary,
    )
    logger.debug("Morale %.1f (%s, trend %s)", morale.score, morale.level.value, morale.trend.value)
    return morale
