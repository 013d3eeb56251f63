import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.pipeline.fallback import extract_fallback_structure, find_phone, guess_name  # noqa: E402

SAMPLE = (
    "Jane Allen Doe\n"
    "jane.doe@example.com\n"
    "555-123-4567\n"
    "Senior backend engineer with eight years of experience building payment APIs, "
    "data pipelines and internal tooling in Python and Go."
)


class HeuristicFallbackTests(unittest.TestCase):
    def test_extracts_contact_fields_and_two_token_name(self):
        resume = extract_fallback_structure(SAMPLE)
        self.assertEqual(resume.header.email, "jane.doe@example.com")
        self.assertEqual(resume.header.phone, "555-123-4567")
        self.assertEqual(resume.header.name, "Jane Allen")
        self.assertEqual(resume.header.linkedin_url, "")
        self.assertEqual(resume.header.github_url, "")

    def test_name_requires_two_alphabetic_tokens(self):
        self.assertEqual(guess_name("Jane"), "")
        self.assertEqual(guess_name("Jane 2024 Doe"), "")
        self.assertEqual(guess_name("jane.doe@example.com"), "")
        self.assertEqual(guess_name("Jane Allen Doe"), "Jane Allen")
        self.assertEqual(guess_name("  John   Smith PhD"), "John Smith")
        self.assertEqual(guess_name("John, Smith"), "")
        self.assertEqual(guess_name("John Smith-Jones"), "")

    def test_name_tokens_are_limited_to_nineteen_letters(self):
        self.assertEqual(guess_name("A B"), "A B")
        self.assertEqual(guess_name("Bartholomewsonnnnnn Lee"), "Bartholomewsonnnnnn Lee")
        self.assertEqual(guess_name("Bartholomewsonnnnnnn Lee"), "")

    def test_phone_formats(self):
        self.assertEqual(find_phone(["Call +1 (555) 123-4567 today"]), "+1 (555) 123-4567")
        self.assertEqual(find_phone(["555.123.4567"]), "555.123.4567")
        self.assertEqual(find_phone(["5551234567"]), "5551234567")
        self.assertEqual(find_phone(["no digits here", "2019 - 2024"]), "")

    def test_first_match_wins_across_lines(self):
        text = "Jane Doe\nfirst@example.com\nsecond@example.org\n555-000-1111\n555-222-3333"
        resume = extract_fallback_structure(text)
        self.assertEqual(resume.header.email, "first@example.com")
        self.assertEqual(resume.header.phone, "555-000-1111")

    def test_sections_hold_single_placeholder_entries(self):
        resume = extract_fallback_structure(SAMPLE)
        self.assertEqual(len(resume.experience), 1)
        self.assertEqual(len(resume.projects), 1)
        self.assertEqual(len(resume.education), 1)
        self.assertEqual(resume.skills.technical, ["Technical Skills"])
        self.assertEqual(resume.achievements, ["Professional achievements"])
        self.assertTrue(resume.summary)

    def test_placeholders_are_not_shared_between_runs(self):
        first = extract_fallback_structure(SAMPLE)
        first.experience[0].bullets.append("mutated")
        second = extract_fallback_structure(SAMPLE)
        self.assertEqual(second.experience[0].bullets, ["Professional experience in technology sector"])

    def test_never_raises_on_odd_input(self):
        for text in ("", "\n\n\n", "x" * 60, "€€€ ### ***\n" * 10, "1234567890" * 8):
            resume = extract_fallback_structure(text)
            self.assertIsInstance(resume.experience, list)
            self.assertIn(resume.header.name, {""})


if __name__ == "__main__":
    unittest.main()
