"""
MyTeamStats analytics engine

Pure functions that derive records, morale, consistency and achievements
from a match history:
1. Records - longest streaks and best single-match performances
2. Morale - recency-weighted form score with level and trend
3. Consistency - spread of per-match contributions
4. Achievements - built-in catalog and user-defined streak rules
"""

from .records import calculate_historical_records, calculate_current_streaks
from .consistency import (
    calculate_standard_deviation,
    consistency_score,
    calculate_consistency,
    momentum_series,
    yearly_consistency,
    monthly_consistency,
)
from .morale import calculate_team_morale
from .rules import evaluate_custom_achievement, evaluate_custom_achievements
from .achievements import evaluate_achievements
from .progress import calculate_goal_progress, evaluate_goals, calculate_player_stats

__all__ = [
    'calculate_historical_records',
    'calculate_current_streaks',
    'calculate_standard_deviation',
    'consistency_score',
    'calculate_consistency',
    'momentum_series',
    'yearly_consistency',
    'monthly_consistency',
    'calculate_team_morale',
    'evaluate_custom_achievement',
    'evaluate_custom_achievements',
    'evaluate_achievements',
    'calculate_goal_progress',
    'evaluate_goals',
    'calculate_player_stats',
]
