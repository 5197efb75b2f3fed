import unittest

# Add the project and test directories to the path
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.dirname(__file__))

from myteamstats.utils import (
    sort_matches_by_date,
    filter_matches_by_date_range,
    filter_matches_by_year,
    get_match_years,
    contribution,
    count_results,
    format_record,
)
from match_builders import make_match, matches_from_results


class TestUtils(unittest.TestCase):
    def test_sort_matches_by_date(self):
        """Sorting returns a new list and leaves the input alone"""
        matches = [
            make_match("2024-03-01", 1, 0, match_id="c"),
            make_match("2024-01-01", 1, 0, match_id="a"),
            make_match("2024-02-01", 1, 0, match_id="b"),
        ]
        self.assertEqual([m.id for m in sort_matches_by_date(matches)], ["a", "b", "c"])
        self.assertEqual([m.id for m in sort_matches_by_date(matches, descending=True)], ["c", "b", "a"])
        self.assertEqual([m.id for m in matches], ["c", "a", "b"])

    def test_sort_keeps_input_order_for_same_date(self):
        matches = [
            make_match("2024-01-01", 1, 0, match_id="first"),
            make_match("2024-01-01", 0, 1, match_id="second"),
        ]
        self.assertEqual([m.id for m in sort_matches_by_date(matches)], ["first", "second"])
        self.assertEqual([m.id for m in sort_matches_by_date(matches, descending=True)], ["first", "second"])

    def test_filter_by_date_range(self):
        matches = matches_from_results("WWWWW")  # 1-5 Jan 2024
        self.assertEqual(len(filter_matches_by_date_range(matches, "2024-01-02", "2024-01-04")), 3)
        # Both bounds are needed to filter
        self.assertEqual(len(filter_matches_by_date_range(matches, "2024-01-02", None)), 5)

    def test_years(self):
        matches = [
            make_match("2023-06-01", 1, 0),
            make_match("2025-06-01", 1, 0),
            make_match("2023-07-01", 1, 0),
        ]
        self.assertEqual(get_match_years(matches), [2023, 2025])
        self.assertEqual(len(filter_matches_by_year(matches, 2023)), 2)
        self.assertEqual(get_match_years([]), [])

    def test_contribution(self):
        self.assertEqual(contribution(make_match("2024-01-01", 3, 0, goals=2, assists=1)), 3)

    def test_count_and_format_results(self):
        results = count_results(matches_from_results("WWDLW"))
        self.assertEqual(results, {'wins': 3, 'draws': 1, 'losses': 1})
        self.assertEqual(format_record(**results), "3V-1E-1D")


if __name__ == '__main__':
    unittest.main()
