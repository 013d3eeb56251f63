import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.normalize.text import enforce_min_length, normalize_cv_text, normalize_text  # noqa: E402
from app.pipeline.errors import ContentTooShort  # noqa: E402


class TextNormalizerTests(unittest.TestCase):
    def test_collapses_inline_whitespace_and_keeps_line_breaks(self):
        raw = "  Jane   Allen\tDoe  \njane@example.com\n"
        self.assertEqual(normalize_text(raw), "Jane Allen Doe\njane@example.com")

    def test_compacts_blank_line_runs_to_single_blank_line(self):
        raw = "Summary\n\n\n\n   \nExperience\r\n\r\nEducation"
        self.assertEqual(normalize_text(raw), "Summary\n\nExperience\n\nEducation")

    def test_trims_leading_and_trailing_whitespace(self):
        self.assertEqual(normalize_text("\n\n  hello world \n\n"), "hello world")

    def test_short_content_reports_observed_length(self):
        text = "x" * 40
        with self.assertRaises(ContentTooShort) as ctx:
            normalize_cv_text(text)
        self.assertEqual(ctx.exception.length, 40)
        self.assertEqual(ctx.exception.minimum, 50)
        self.assertIn("50", str(ctx.exception))
        self.assertIn("40", str(ctx.exception))

    def test_length_is_measured_after_normalization(self):
        raw = "a" * 30 + " " * 40 + "\n\n\n\n" + "b" * 10
        with self.assertRaises(ContentTooShort) as ctx:
            normalize_cv_text(raw)
        self.assertEqual(ctx.exception.length, 42)

    def test_exactly_minimum_length_is_accepted(self):
        text = "y" * 50
        self.assertEqual(normalize_cv_text(text), text)

    def test_custom_minimum(self):
        self.assertEqual(enforce_min_length("abc", minimum=3), "abc")
        with self.assertRaises(ContentTooShort):
            enforce_min_length("ab", minimum=3)


if __name__ == "__main__":
    unittest.main()
