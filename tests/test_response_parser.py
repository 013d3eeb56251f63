import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.pipeline.errors import MalformedModelOutput  # noqa: E402
from app.pipeline.response_parser import parse_model_output, strip_code_fences  # noqa: E402

MODEL_JSON = {
    "header": {
        "name": "Jane Allen Doe",
        "email": "jane.doe@example.com",
        "phone": "555-123-4567",
        "linkedin": "https://linkedin.com/in/janedoe",
        "github": "",
    },
    "summary": "Backend engineer focused on payments.",
    "experience": [
        {
            "title": "Senior Engineer",
            "company": "Acme",
            "duration": "2019 - 2024",
            "bullets": ["Led API migration", "Cut latency by 30%"],
        }
    ],
    "projects": [{"title": "Ledger", "description": "Double-entry ledger", "bullets": ["Built in Python"]}],
    "education": [{"degree": "BSc CS", "institution": "State University", "duration": "2011 - 2015", "gpa": "3.8"}],
    "skills": {"technical": ["Python", "PostgreSQL", "Kafka"]},
    "achievements": ["Speaker at PyCon"],
}


class StripCodeFencesTests(unittest.TestCase):
    def test_strips_json_fence(self):
        self.assertEqual(strip_code_fences('```json\n{"a": 1}\n```'), '{"a": 1}')

    def test_strips_bare_fence_and_whitespace(self):
        self.assertEqual(strip_code_fences('  ```\n{"a": 1}```  '), '{"a": 1}')

    def test_leaves_unfenced_text_alone(self):
        self.assertEqual(strip_code_fences(' {"a": 1} '), '{"a": 1}')


class ParseModelOutputTests(unittest.TestCase):
    def test_fenced_output_round_trips_field_for_field(self):
        raw = "```json\n" + json.dumps(MODEL_JSON, indent=2) + "\n```"
        resume = parse_model_output(raw)
        self.assertEqual(resume.header.name, "Jane Allen Doe")
        self.assertEqual(resume.header.linkedin_url, "https://linkedin.com/in/janedoe")
        self.assertEqual(resume.experience[0].bullets, ["Led API migration", "Cut latency by 30%"])
        self.assertEqual(resume.projects[0].description, "Double-entry ledger")
        self.assertEqual(resume.education[0].gpa, "3.8")
        self.assertEqual(resume.skills.technical, ["Python", "PostgreSQL", "Kafka"])
        self.assertEqual(resume.achievements, ["Speaker at PyCon"])

        wire = resume.to_wire()
        self.assertEqual(wire["header"]["linkedinUrl"], MODEL_JSON["header"]["linkedin"])
        for key in ("summary", "experience", "projects", "education", "skills", "achievements"):
            self.assertEqual(wire[key], MODEL_JSON[key])

    def test_missing_sections_default_to_empty(self):
        resume = parse_model_output('{"header": {"name": "Jane Doe"}}')
        self.assertEqual(resume.header.email, "")
        self.assertEqual(resume.summary, "")
        self.assertEqual(resume.experience, [])
        self.assertEqual(resume.projects, [])
        self.assertEqual(resume.education, [])
        self.assertEqual(resume.skills.technical, [])
        self.assertEqual(resume.achievements, [])

    def test_nulls_and_numbers_are_tolerated(self):
        raw = json.dumps(
            {
                "header": {"name": "Jane Doe", "phone": None},
                "summary": None,
                "education": [{"degree": "MSc", "gpa": 3.9}],
                "projects": None,
            }
        )
        resume = parse_model_output(raw)
        self.assertEqual(resume.header.phone, "")
        self.assertEqual(resume.summary, "")
        self.assertEqual(resume.education[0].gpa, "3.9")
        self.assertEqual(resume.projects, [])

    def test_invalid_json_is_malformed(self):
        with self.assertRaises(MalformedModelOutput):
            parse_model_output("Sure! Here is the resume: {not json}")

    def test_non_object_top_level_is_malformed(self):
        with self.assertRaises(MalformedModelOutput):
            parse_model_output('["header", "summary"]')

    def test_wrong_section_shape_is_malformed(self):
        with self.assertRaises(MalformedModelOutput):
            parse_model_output('{"experience": "ten years at Acme"}')

    def test_empty_output_is_malformed(self):
        with self.assertRaises(MalformedModelOutput):
            parse_model_output("```json\n```")

    def test_deeply_nested_output_is_malformed(self):
        with self.assertRaises(MalformedModelOutput):
            parse_model_output("[" * 100000 + "]" * 100000)

    @unittest.skipUnless(hasattr(sys, "get_int_max_str_digits"), "interpreter has no integer digit limit")
    def test_oversized_number_is_malformed(self):
        with self.assertRaises(MalformedModelOutput):
            parse_model_output('{"header": {"phone": ' + "1" * 5000 + "}}")


if __name__ == "__main__":
    unittest.main()
