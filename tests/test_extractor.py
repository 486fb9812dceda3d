import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talent_tracker.extraction import InvalidInput, extract_resume_fields  # noqa: E402

SAMPLE_RESUME = """
John Doe
New York, NY
john.doe@email.com
+1 234 567 8900

PROFESSIONAL SUMMARY
Experienced software engineer with 5 years of developing web applications.
Passionate about creating scalable and maintainable solutions.

EDUCATION
Bachelor of Science in Computer Science
State University, 2018

SKILLS
JavaScript, TypeScript, React, Node.js, MongoDB, Express, AWS, Docker,
Python, SQL, Git, Agile, REST API, GraphQL

EXPERIENCE
Senior Software Engineer - Tech Corp (2021-Present)
- Developed full-stack applications using React and Node.js
- Implemented microservices architecture

Software Engineer - StartupXYZ (2019-2021)
- Built responsive web applications
- Collaborated with cross-functional teams
"""


class ExtractResumeFieldsTests(unittest.TestCase):
    def test_contact_header_example(self):
        text = "John Doe\nNew York, NY\njohn.doe@email.com\n+1 234 567 8900\n\nSKILLS\nJavaScript, React, Node.js"
        parsed = extract_resume_fields(text)

        self.assertEqual(parsed.email, "john.doe@email.com")
        self.assertEqual(parsed.phone, "+1 234 567 8900")
        self.assertEqual(parsed.name, "John Doe")
        self.assertEqual(parsed.location, "New York, NY")
        self.assertEqual(parsed.skills, ["JavaScript", "Node.js", "React"])
        self.assertEqual(parsed.experience_years, 0)
        self.assertEqual(parsed.education, "")
        self.assertEqual(parsed.summary, "")
        self.assertEqual(parsed.work_experience, [])

    def test_full_sample_resume(self):
        parsed = extract_resume_fields(SAMPLE_RESUME)

        self.assertEqual(parsed.name, "John Doe")
        self.assertEqual(parsed.location, "New York, NY")
        self.assertEqual(parsed.education, "Bachelor of Science in Computer Science")
        self.assertEqual(
            parsed.skills,
            sorted(
                [
                    "AWS",
                    "Agile",
                    "Docker",
                    "Express",
                    "Git",
                    "GraphQL",
                    "JavaScript",
                    "MongoDB",
                    "Node.js",
                    "Python",
                    "REST API",
                    "React",
                    "SQL",
                    "TypeScript",
                ]
            ),
        )
        self.assertEqual(parsed.experience_years, 0)
        self.assertTrue(parsed.summary.startswith("Experienced software engineer with 5 years"))
        self.assertLessEqual(len(parsed.summary), 500)

        self.assertEqual(len(parsed.work_experience), 2)
        first, second = parsed.work_experience
        self.assertEqual(first.position, "Senior Software Engineer")
        self.assertEqual(first.company, "Tech Corp")
        self.assertEqual(first.duration, "2021-Present")
        self.assertEqual(
            first.description,
            ["Developed full-stack applications using React and Node.js", "Implemented microservices architecture"],
        )
        self.assertEqual(second.company, "StartupXYZ")
        self.assertEqual(second.duration, "2019-2021")

    def test_record_is_fully_populated_when_nothing_matches(self):
        parsed = extract_resume_fields("lorem ipsum dolor sit amet consectetur adipiscing")
        dumped = parsed.model_dump()

        self.assertEqual(
            set(dumped),
            {
                "name",
                "email",
                "phone",
                "skills",
                "experience_years",
                "education",
                "location",
                "summary",
                "work_experience",
            },
        )
        self.assertEqual(dumped["name"], "")
        self.assertEqual(dumped["email"], "")
        self.assertEqual(dumped["phone"], "")
        self.assertEqual(dumped["skills"], [])
        self.assertEqual(dumped["experience_years"], 0)
        self.assertEqual(dumped["work_experience"], [])

    def test_extraction_is_idempotent(self):
        first = extract_resume_fields(SAMPLE_RESUME)
        second = extract_resume_fields(SAMPLE_RESUME)
        self.assertEqual(first.model_dump_json(), second.model_dump_json())
        self.assertIsNot(first, second)
        self.assertIsNot(first.skills, second.skills)

    def test_experience_years_examples(self):
        self.assertEqual(extract_resume_fields("5+ years of experience").experience_years, 5)
        self.assertEqual(extract_resume_fields("2.5+ years of experience").experience_years, 2.5)

    def test_rejects_unusable_input(self):
        for bad in ("", "   \n\t ", None, 42, b"John Doe"):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInput):
                    extract_resume_fields(bad)

    def test_invalid_input_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidInput, ValueError))


if __name__ == "__main__":
    unittest.main()
