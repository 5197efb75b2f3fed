import unittest
from datetime import date, timedelta

# Add the project and test directories to the path
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.dirname(__file__))

from myteamstats.analytics.achievements import (
    ACHIEVEMENTS,
    evaluate_achievements,
    current_tier,
    resilience_progress,
)
from myteamstats.analytics.records import calculate_historical_records
from match_builders import make_match, matches_from_results


def by_id(results):
    return {a.id: a for a in results}


class TestAchievementCatalog(unittest.TestCase):
    def test_catalog_ids(self):
        self.assertEqual(
            [a.id for a in ACHIEVEMENTS],
            ['goleador', 'playmaker', 'victorias', 'win_streak', 'undefeated_streak',
             'hat_trick', 'assist_masterclass', 'resilience']
        )

    def test_nothing_unlocked_without_matches(self):
        results = evaluate_achievements([])
        self.assertEqual(len(results), len(ACHIEVEMENTS))
        self.assertFalse(any(a.unlocked for a in results))
        self.assertTrue(all(a.currentTier is None for a in results))

    def test_only_resilience_is_secret(self):
        results = by_id(evaluate_achievements([]))
        self.assertTrue(results['resilience'].isSecret)
        self.assertFalse(results['goleador'].isSecret)

    def test_progress_and_tiers(self):
        """Streak and career achievements unlock from the match history"""
        matches = matches_from_results("WWWLW", goals=[3, 1, 1, 0, 0], assists=[0, 1, 0, 0, 0])
        results = by_id(evaluate_achievements(matches))

        self.assertEqual(results['goleador'].progress, 5)
        self.assertFalse(results['goleador'].unlocked)
        self.assertEqual(results['playmaker'].progress, 1)
        self.assertEqual(results['victorias'].progress, 4)
        self.assertFalse(results['victorias'].unlocked)

        self.assertEqual(results['win_streak'].progress, 3)
        self.assertTrue(results['win_streak'].unlocked)
        self.assertEqual(results['win_streak'].currentTier.name, 'Bronce')

        self.assertTrue(results['hat_trick'].unlocked)
        self.assertEqual(results['hat_trick'].currentTier.name, 'Hat-Trick')
        self.assertFalse(results['assist_masterclass'].unlocked)

    def test_highest_reached_tier(self):
        tiers = ACHIEVEMENTS[0].tiers
        self.assertIsNone(current_tier(9, tiers))
        self.assertEqual(current_tier(10, tiers).name, 'Bronce')
        self.assertEqual(current_tier(60, tiers).name, 'Plata')
        self.assertEqual(current_tier(1000, tiers).name, 'Platino')


class TestResilience(unittest.TestCase):
    def test_win_after_morale_crisis(self):
        """A win right after morale hit the bottom level"""
        start = date(2024, 1, 1)
        matches = [make_match(start + timedelta(days=i), 0, 10) for i in range(4)]
        matches.append(make_match(start + timedelta(days=4), 1, 0))

        records = calculate_historical_records(matches)
        self.assertEqual(resilience_progress(matches, records), 1)
        self.assertTrue(by_id(evaluate_achievements(matches))['resilience'].unlocked)

    def test_no_crisis(self):
        matches = matches_from_results("DDDDW")
        records = calculate_historical_records(matches)
        self.assertEqual(resilience_progress(matches, records), 0)

    def test_too_few_matches(self):
        matches = matches_from_results("LLW")
        records = calculate_historical_records(matches)
        self.assertEqual(resilience_progress(matches, records), 0)


if __name__ == '__main__':
    unittest.main()
