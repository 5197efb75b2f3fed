"""
Evaluation of user-defined achievement rules.

A rule names one metric from a fixed set. Ongoing-streak metrics look at the
`window` most recent matches and count the streak running at the latest one.
Streak-break metrics only hold when the latest match ends a run of the
opposite kind, and ignore `window`.
"""

import logging
from typing import Callable, Dict, List

from ..models import Match, MatchResult, AchievementMetric, CustomAchievement
from ..utils import sort_matches_by_date
from .records import count_ongoing_streak

logger = logging.getLogger(__name__)

OPERATOR_GREATER_THAN_OR_EQUAL_TO = 'greater_than_or_equal_to'

ONGOING_STREAK_CONDITIONS: Dict[str, Callable[[Match], bool]] = {
    AchievementMetric.WIN_STREAK.value: lambda m: m.result == MatchResult.WIN,
    AchievementMetric.LOSS_STREAK.value: lambda m: m.result == MatchResult.LOSS,
    AchievementMetric.UNDEFEATED_STREAK.value: lambda m: m.result != MatchResult.LOSS,
    AchievementMetric.WINLESS_STREAK.value: lambda m: m.result != MatchResult.WIN,
    AchievementMetric.GOAL_STREAK.value: lambda m: m.myGoals > 0,
    AchievementMetric.ASSIST_STREAK.value: lambda m: m.myAssists > 0,
    AchievementMetric.GOAL_DROUGHT.value: lambda m: m.myGoals == 0,
    AchievementMetric.ASSIST_DROUGHT.value: lambda m: m.myAssists == 0,
}

# metric -> (what the latest match must be, what the run before it must be)
STREAK_BREAK_CONDITIONS: Dict[str, tuple] = {
    AchievementMetric.BREAK_WIN_AFTER_LOSS_STREAK.value: (
        lambda m: m.result == MatchResult.WIN,
        lambda m: m.result == MatchResult.LOSS,
    ),
    AchievementMetric.BREAK_UNDEFEATED_AFTER_WINLESS_STREAK.value: (
        lambda m: m.result != MatchResult.LOSS,
        lambda m: m.result != MatchResult.WIN,
    ),
}


def _metric_name(metric) -> str:
    return metric.value if isinstance(metric, AchievementMetric) else str(metric)


def ongoing_streak_length(metric: str, sorted_desc: List[Match], window: int) -> int:
    """Streak running at the latest match within the window; -1 if history is too short"""
    recent = sorted_desc[:window]
    if len(recent) < window:
        return -1
    return count_ongoing_streak(recent, ONGOING_STREAK_CONDITIONS[metric])


def broken_streak_length(metric: str, sorted_desc: List[Match]) -> int:
    """Length of the run the latest match just broke; -1 if it broke nothing"""
    is_break, in_streak = STREAK_BREAK_CONDITIONS[metric]
    if not sorted_desc or not is_break(sorted_desc[0]):
        return -1
    return count_ongoing_streak(sorted_desc[1:], in_streak)


def evaluate_custom_achievement(achievement: CustomAchievement, matches: List[Match]) -> bool:
    """
    Decide whether a custom achievement is unlocked by the current history.

    The stored `unlocked` flag is ignored. Unknown metrics and operators,
    and windows longer than the history, evaluate to False.
    """
    condition = achievement.condition
    metric = _metric_name(condition.metric)
    sorted_desc = sort_matches_by_date(matches, descending=True)

    if metric in STREAK_BREAK_CONDITIONS:
        # Breaking a run of at least `value` is the only reading of these metrics
        length = broken_streak_length(metric, sorted_desc)
        return length >= 0 and length >= condition.value

    if metric not in ONGOING_STREAK_CONDITIONS:
        logger.debug("Unknown achievement metric %r", metric)
        return False

    length = ongoing_streak_length(metric, sorted_desc, condition.window)
    if length < 0:
        return False
    if condition.operator == OPERATOR_GREATER_THAN_OR_EQUAL_TO:
        return length >= condition.value
    return False


def evaluate_custom_achievements(achievements: List[CustomAchievement], matches: List[Match]) -> List[CustomAchievement]:
    """Copies of the achievements with `unlocked` re-derived from the matches"""
    return [
        a.model_copy(update={'unlocked': evaluate_custom_achievement(a, matches)})
        for a in achievements
    ]
