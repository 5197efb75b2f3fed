import unittest
from datetime import date, timedelta

# Add the project and test directories to the path
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.dirname(__file__))

from myteamstats.analytics.consistency import (
    calculate_standard_deviation,
    consistency_score,
    calculate_consistency,
    momentum_series,
    yearly_consistency,
    monthly_consistency,
)
from myteamstats.models import MomentumPoint, YearlyConsistency, MonthlyConsistency
from match_builders import make_match


class TestStandardDeviation(unittest.TestCase):
    def test_small_samples(self):
        """Fewer than two values have no spread"""
        self.assertEqual(calculate_standard_deviation([]), 0)
        self.assertEqual(calculate_standard_deviation([3]), 0)

    def test_constant_values(self):
        self.assertEqual(calculate_standard_deviation([5, 5, 5, 5]), 0)

    def test_population_deviation(self):
        """Divides by N, not N - 1"""
        self.assertAlmostEqual(calculate_standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]), 2.0)
        self.assertAlmostEqual(calculate_standard_deviation([0, 10]), 5.0)


class TestConsistencyScore(unittest.TestCase):
    def test_perfectly_steady(self):
        self.assertEqual(consistency_score([5, 5, 5, 5]), 10)

    def test_default_for_small_samples(self):
        """Not enough matches gives the neutral score, not a perfect one"""
        self.assertEqual(consistency_score([]), 5)
        self.assertEqual(consistency_score([7]), 5)

    def test_formula(self):
        self.assertAlmostEqual(consistency_score([2, 4, 4, 4, 5, 5, 7, 9]), 2.0)

    def test_never_negative(self):
        self.assertEqual(consistency_score([0, 10]), 0)

    def test_matches_use_goals_plus_assists(self):
        matches = [
            make_match("2024-01-01", 2, 0, goals=1, assists=1),
            make_match("2024-01-08", 1, 0, goals=2, assists=0),
            make_match("2024-01-15", 3, 0, goals=0, assists=2),
        ]
        self.assertEqual(calculate_consistency(matches), 10)
        self.assertEqual(calculate_consistency(matches[:1]), 5)


class TestMomentumSeries(unittest.TestCase):
    def test_empty_history(self):
        self.assertEqual(momentum_series([]), [])

    def test_window_reaches_into_previous_year(self):
        """The trailing window is taken over the whole history"""
        matches = [
            make_match("2023-11-01", 1, 0, goals=1),
            make_match("2023-11-08", 1, 0, goals=1),
            make_match("2023-11-15", 1, 0, goals=1),
            make_match("2024-01-10", 1, 0, goals=1, match_id="latest"),
        ]
        series = momentum_series(matches)

        # Defaults to the latest year
        self.assertEqual(len(series), 1)
        self.assertEqual(series[0].matchId, "latest")
        self.assertEqual(series[0].date, "2024-01-10")
        self.assertEqual(series[0].score, 10)

    def test_first_point_is_neutral(self):
        """A single match in the window has no spread yet"""
        matches = [make_match("2024-01-01", 1, 0, goals=3)]
        self.assertEqual(momentum_series(matches, 2024)[0].score, 5)

    def test_window_is_ten_matches(self):
        """A big game drops out of the window after ten matches"""
        start = date(2024, 1, 1)
        matches = [make_match(start, 5, 0, goals=10)]
        matches += [make_match(start + timedelta(days=i), 0, 0) for i in range(1, 11)]

        series = momentum_series(matches, 2024)

        self.assertEqual(len(series), 11)
        # Tenth match: [10, 0 x 9] -> stddev 3 -> 10 - 12 clamps to 0
        self.assertEqual(series[9].score, 0)
        # Eleventh match: ten zeros
        self.assertEqual(series[10].score, 10)

    def test_points_are_models(self):
        matches = [make_match("2024-01-01", 1, 0, goals=1, match_id="a")]
        point = momentum_series(matches)[0]
        self.assertIsInstance(point, MomentumPoint)
        self.assertEqual(point.model_dump(), {'matchId': "a", 'date': "2024-01-01", 'score': 5})

    def test_other_year(self):
        matches = [
            make_match("2023-05-01", 1, 0, goals=1),
            make_match("2024-05-01", 1, 0, goals=1),
        ]
        series = momentum_series(matches, 2023)
        self.assertEqual([p.date for p in series], ["2023-05-01"])


class TestPeriodConsistency(unittest.TestCase):
    def setUp(self):
        self.matches = [
            make_match("2023-03-01", 1, 0, goals=1),
            make_match("2023-04-01", 1, 0, goals=1),
            make_match("2024-01-05", 1, 0, goals=0),
            make_match("2024-01-20", 1, 0, goals=4),
            make_match("2024-02-10", 1, 0, goals=2),
        ]

    def test_yearly(self):
        """Years with more than one match, ascending"""
        data = yearly_consistency(self.matches)
        self.assertEqual([d.year for d in data], [2023, 2024])
        self.assertEqual(data[0].score, 10)

    def test_yearly_skips_single_match_years(self):
        data = yearly_consistency(self.matches[:3])
        self.assertEqual([d.year for d in data], [2023])

    def test_monthly(self):
        """Months with more than one match in the chosen year"""
        data = monthly_consistency(self.matches, 2024)
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0].month, 1)
        # [0, 4] -> stddev 2 -> 10 - 8
        self.assertAlmostEqual(data[0].score, 2.0)

    def test_period_scores_are_models(self):
        self.assertIsInstance(yearly_consistency(self.matches)[0], YearlyConsistency)
        self.assertIsInstance(monthly_consistency(self.matches, 2024)[0], MonthlyConsistency)

    def test_monthly_without_matches(self):
        self.assertEqual(monthly_consistency(self.matches, 2020), [])


if __name__ == '__main__':
    unittest.main()
