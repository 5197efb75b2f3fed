"""
Historical records and streaks.

Every call rescans the full match history; nothing is cached between calls.
"""

import logging
from typing import Callable, Dict, List

from ..models import Match, MatchResult, HistoricalRecord, HistoricalRecords, CurrentStreaks
from ..utils import sort_matches_by_date

logger = logging.getLogger(__name__)


def _is_win(match: Match) -> bool:
    return match.result == MatchResult.WIN


def _is_draw(match: Match) -> bool:
    return match.result == MatchResult.DRAW


def _is_loss(match: Match) -> bool:
    return match.result == MatchResult.LOSS


# Record field -> condition that keeps the streak alive
STREAK_CONDITIONS: Dict[str, Callable[[Match], bool]] = {
    'longestWinStreak': _is_win,
    'longestUndefeatedStreak': lambda m: not _is_loss(m),
    'longestDrawStreak': _is_draw,
    'longestLossStreak': _is_loss,
    'longestWinlessStreak': lambda m: not _is_win(m),
    'longestGoalStreak': lambda m: m.myGoals > 0,
    'longestAssistStreak': lambda m: m.myAssists > 0,
    'longestGoalDrought': lambda m: m.myGoals == 0,
    'longestAssistDrought': lambda m: m.myAssists == 0,
    'longestCleanSheetStreak': lambda m: m.opponentScore == 0,
}


class StreakAccumulator:
    """Running counters plus the completed streak lengths for each condition"""

    def __init__(self, conditions: Dict[str, Callable[[Match], bool]]):
        self.conditions = conditions
        self.current = {name: 0 for name in conditions}
        self.completed: Dict[str, List[int]] = {name: [] for name in conditions}

    def add(self, match: Match) -> 'StreakAccumulator':
        for name, condition in self.conditions.items():
            if condition(match):
                self.current[name] += 1
            else:
                self._close(name)
        return self

    def finish(self) -> Dict[str, List[int]]:
        """Close every open streak; a streak still running counts as completed"""
        for name in self.conditions:
            self._close(name)
        return self.completed

    def _close(self, name: str) -> None:
        if self.current[name] > 0:
            self.completed[name].append(self.current[name])
        self.current[name] = 0


def record_from_streaks(streaks: List[int]) -> HistoricalRecord:
    """Longest streak and how many times it was reached"""
    if not streaks:
        return HistoricalRecord()
    max_value = max(streaks)
    if max_value == 0:
        return HistoricalRecord()
    return HistoricalRecord(value=max_value, count=streaks.count(max_value))


def _max_record(values: List[int]) -> HistoricalRecord:
    max_value = max([0] + values)
    if max_value == 0:
        return HistoricalRecord()
    return HistoricalRecord(value=max_value, count=values.count(max_value))


def _min_record(values: List[int]) -> HistoricalRecord:
    if not values:
        return HistoricalRecord()
    min_value = min(values)
    return HistoricalRecord(value=min_value, count=values.count(min_value))


def calculate_historical_records(matches: List[Match]) -> HistoricalRecords:
    """
    Calculate all-time streak and single-match records.

    Args:
        matches: Match history in any order (left untouched)

    Returns:
        HistoricalRecords; every record is {0, 0} for an empty history
    """
    records = HistoricalRecords()
    if not matches:
        return records

    sorted_matches = sort_matches_by_date(matches)

    # Single match records
    records.bestGoalPerformance = _max_record([m.myGoals for m in sorted_matches])
    records.bestAssistPerformance = _max_record([m.myAssists for m in sorted_matches])
    records.bestOffensivePerformance = _max_record([m.teamScore for m in sorted_matches])
    records.bestDefensivePerformance = _min_record([m.opponentScore for m in sorted_matches])
    records.biggestWin = _max_record([m.goalDifference for m in sorted_matches if _is_win(m)])

    accumulator = StreakAccumulator(STREAK_CONDITIONS)
    for match in sorted_matches:
        accumulator.add(match)
    streaks = accumulator.finish()

    for name, lengths in streaks.items():
        setattr(records, name, record_from_streaks(lengths))

    logger.debug("Calculated historical records over %d matches", len(sorted_matches))
    return records


def count_ongoing_streak(sorted_desc: List[Match], condition: Callable[[Match], bool]) -> int:
    streak = 0
    for match in sorted_desc:
        if not condition(match):
            break
        streak += 1
    return streak


def calculate_current_streaks(matches: List[Match]) -> CurrentStreaks:
    """Streaks still running, counted back from the most recent match"""
    sorted_desc = sort_matches_by_date(matches, descending=True)
    return CurrentStreaks(
        winStreak=count_ongoing_streak(sorted_desc, STREAK_CONDITIONS['longestWinStreak']),
        undefeatedStreak=count_ongoing_streak(sorted_desc, STREAK_CONDITIONS['longestUndefeatedStreak']),
        goalStreak=count_ongoing_streak(sorted_desc, STREAK_CONDITIONS['longestGoalStreak']),
        cleanSheetStreak=count_ongoing_streak(sorted_desc, STREAK_CONDITIONS['longestCleanSheetStreak']),
    )
