"""
Personal goals and player level progression.
"""

import math
from typing import List

from ..config import XP_PER_MATCH, XP_PER_GOAL, XP_PER_ASSIST, XP_BASE, XP_GROWTH
from ..models import Match, MatchResult, Goal, GoalMetric, GoalProgress, PlayerStats
from ..utils import filter_matches_by_date_range
from .records import calculate_historical_records


def calculate_goal_progress(goal: Goal, matches: List[Match]) -> float:
    """
    Current value of a goal's metric.

    Only matches inside the goal's date range count when both ends are set;
    otherwise the whole history does.
    """
    relevant = filter_matches_by_date_range(matches, goal.startDate, goal.endDate)
    total = len(relevant)

    if goal.metric == GoalMetric.GOALS:
        return sum(m.myGoals for m in relevant)
    if goal.metric == GoalMetric.ASSISTS:
        return sum(m.myAssists for m in relevant)
    if goal.metric == GoalMetric.WINS:
        return sum(1 for m in relevant if m.result == MatchResult.WIN)
    if goal.metric == GoalMetric.WIN_RATE:
        if total == 0:
            return 0.0
        return sum(1 for m in relevant if m.result == MatchResult.WIN) / total * 100
    if goal.metric == GoalMetric.GOALS_PER_MATCH:
        if total == 0:
            return 0.0
        return sum(m.myGoals for m in relevant) / total
    if goal.metric == GoalMetric.LONGEST_WIN_STREAK:
        return calculate_historical_records(relevant).longestWinStreak.value
    if goal.metric == GoalMetric.LONGEST_UNDEFEATED_STREAK:
        return calculate_historical_records(relevant).longestUndefeatedStreak.value
    return 0


def evaluate_goals(goals: List[Goal], matches: List[Match]) -> List[GoalProgress]:
    results = []
    for goal in goals:
        progress = calculate_goal_progress(goal, matches)
        results.append(GoalProgress(goal=goal, progress=progress, completed=progress >= goal.target))
    return results


def xp_for_next_level(level: int) -> int:
    """XP needed to go from `level` to `level + 1`"""
    return math.floor(XP_BASE * XP_GROWTH ** (level - 1))


def calculate_player_stats(matches: List[Match]) -> PlayerStats:
    """Level and XP earned from matches played, goals and assists"""
    total_xp = sum(
        XP_PER_MATCH + m.myGoals * XP_PER_GOAL + m.myAssists * XP_PER_ASSIST
        for m in matches
    )

    level = 1
    cumulative = 0
    needed = xp_for_next_level(level)
    while total_xp >= cumulative + needed:
        cumulative += needed
        level += 1
        needed = xp_for_next_level(level)

    xp_in_level = total_xp - cumulative
    progress = (xp_in_level / needed) * 100 if needed > 0 else 100
    return PlayerStats(
        level=level,
        xp=xp_in_level,
        xpToNextLevel=needed,
        progress=min(progress, 100),
    )
