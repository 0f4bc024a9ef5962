#!/usr/bin/env python3
"""
Test suite for the individual scoring rules.
"""

import unittest
from core.config_loader import ScorerConfig
from core.scorer import Internship, Preference
from core.scorer import rules


def make_internship(**overrides) -> Internship:
    fields = dict(
        id="int-1",
        title="Data Analyst Intern",
        org_name="FinServ",
        sector="IT Sector",
        city=None,
        remote=False,
        required_skills=[],
        min_education=None,
    )
    fields.update(overrides)
    return Internship(**fields)


class TestSectorRule(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_sector_match_adds_weight(self):
        internship = make_internship(sector="IT Sector")
        preference = Preference(sectors=["Healthcare", "IT Sector"])
        self.assertEqual(rules.sector_points(internship, preference, self.config), 20)

    def test_sector_match_is_case_sensitive(self):
        internship = make_internship(sector="IT Sector")
        preference = Preference(sectors=["it sector"])
        self.assertEqual(rules.sector_points(internship, preference, self.config), 0)

    def test_no_sectors_selected(self):
        internship = make_internship(sector="IT Sector")
        self.assertEqual(rules.sector_points(internship, Preference(), self.config), 0)

    def test_custom_weight(self):
        config = ScorerConfig(sector_weight=10)
        internship = make_internship(sector="Finance")
        preference = Preference(sectors=["Finance"])
        self.assertEqual(rules.sector_points(internship, preference, config), 10)


class TestSkillRule(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_skills_overlap_is_bidirectional(self):
        self.assertTrue(rules.skills_overlap("Python 3", "python"))
        self.assertTrue(rules.skills_overlap("SQL", "PostgreSQL"))
        self.assertFalse(rules.skills_overlap("Java", "Python"))

    def test_blank_skill_never_matches(self):
        self.assertFalse(rules.skills_overlap("", "Python"))
        self.assertFalse(rules.skills_overlap("   ", "Python"))
        self.assertFalse(rules.skills_overlap("Python", ""))

    def test_matched_skills_keep_internship_labels(self):
        internship = make_internship(required_skills=["Python", "SQL", "Tableau"])
        preference = Preference(skills=["python", "Excel", "PostgreSQL"])

        points, matched = rules.skill_points(internship, preference, self.config)

        self.assertEqual(matched, ["Python", "SQL"])
        self.assertEqual(points, 20)

    def test_required_skill_counts_once(self):
        """A required skill matching several user skills is counted once."""
        internship = make_internship(required_skills=["Data"])
        preference = Preference(skills=["Data Analysis", "Data Science"])

        points, matched = rules.skill_points(internship, preference, self.config)

        self.assertEqual(points, 10)
        self.assertEqual(matched, ["Data"])

    def test_duplicate_required_skills_are_inert(self):
        internship = make_internship(required_skills=["Python", "Python"])
        preference = Preference(skills=["Python"])

        points, matched = rules.skill_points(internship, preference, self.config)

        self.assertEqual(points, 10)
        self.assertEqual(matched, ["Python"])

    def test_no_user_skills(self):
        internship = make_internship(required_skills=["Python"])
        self.assertEqual(rules.skill_points(internship, Preference(), self.config), (0, []))


class TestLocationRule(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_remote_sentinel(self):
        internship = make_internship(remote=True)
        preference = Preference(preferred_locations=["Remote"])
        self.assertEqual(rules.location_points(internship, preference, self.config), 15)

    def test_remote_sentinel_is_exact(self):
        internship = make_internship(remote=True)
        preference = Preference(preferred_locations=["remote"])
        self.assertEqual(rules.location_points(internship, preference, self.config), 0)

    def test_remote_internship_without_remote_preference(self):
        internship = make_internship(remote=True, city="Delhi")
        preference = Preference(preferred_locations=["Mumbai"])
        self.assertEqual(rules.location_points(internship, preference, self.config), 0)

    def test_city_match_is_case_insensitive(self):
        internship = make_internship(city="Mumbai")
        preference = Preference(preferred_locations=["mumbai"])
        self.assertEqual(rules.location_points(internship, preference, self.config), 15)

    def test_remote_and_city_are_additive(self):
        internship = make_internship(remote=True, city="Pune")
        preference = Preference(preferred_locations=["Remote", "Pune"])
        self.assertEqual(rules.location_points(internship, preference, self.config), 30)


class TestEducationRule(unittest.TestCase):

    def setUp(self):
        self.config = ScorerConfig()

    def test_presence_on_both_sides(self):
        internship = make_internship(min_education="10+2")
        preference = Preference(education="PhD")
        self.assertEqual(rules.education_points(internship, preference, self.config), 5)

    def test_missing_on_either_side(self):
        self.assertEqual(
            rules.education_points(make_internship(min_education=None), Preference(education="BCA"), self.config), 0
        )
        self.assertEqual(
            rules.education_points(make_internship(min_education="BCA"), Preference(education=None), self.config), 0
        )
        self.assertEqual(
            rules.education_points(make_internship(min_education="BCA"), Preference(education="  "), self.config), 0
        )


if __name__ == '__main__':
    unittest.main()
