import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talent_tracker.extraction.segmentation import split_lines  # noqa: E402
from talent_tracker.extraction.skills import (  # noqa: E402
    drop_redundant_skills,
    extract_skills,
    find_skills_section,
    is_skills_heading,
)


def _skills(text: str) -> list[str]:
    return extract_skills(split_lines(text), text)


class SkillsExtractionTests(unittest.TestCase):
    def test_section_is_trusted_over_rest_of_document(self):
        text = (
            "Jane Smith\n"
            "jane@example.com\n"
            "Skills:\n"
            "React, Docker\n"
            "Experience\n"
            "- Built Python services on Kubernetes\n"
        )
        self.assertEqual(_skills(text), ["Docker", "React"])

    def test_global_fallback_without_skills_heading(self):
        text = (
            "Jane Smith\n"
            "EXPERIENCE\n"
            "- Built Python services with Docker and Kubernetes\n"
        )
        self.assertEqual(_skills(text), ["Docker", "Kubernetes", "Python"])

    def test_terms_on_heading_line_form_the_section(self):
        text = (
            "Jane Roe\n"
            "jane@example.com\n"
            "Skills: React, Node.js\n"
            "EXPERIENCE\n"
            "- Built Python services with Docker\n"
        )
        self.assertEqual(find_skills_section(split_lines(text)), "React, Node.js")
        self.assertEqual(_skills(text), ["Node.js", "React"])

    def test_heading_line_terms_kept_when_prose_follows(self):
        text = "Jane Roe\nSkills: React, Node.js\nWorked on Python services with Docker\n"
        skills = _skills(text)
        self.assertIn("React", skills)
        self.assertIn("Node.js", skills)

    def test_global_fallback_ignores_variant_spellings(self):
        text = "Jane Roe\nEXPERIENCE\n- Helped the rest of the team in Go\n- Mentored juniors on node upgrades\n"
        self.assertEqual(_skills(text), ["Go"])

    def test_variant_not_matched_inside_dotted_name(self):
        self.assertEqual(_skills("Skills\nNode.js\n"), ["Node.js"])

    def test_sparse_section_does_not_fall_back(self):
        text = (
            "Jane Smith\n"
            "Skills\n"
            "Communication, leadership\n"
            "EXPERIENCE\n"
            "- Python and Docker\n"
        )
        self.assertEqual(_skills(text), [])

    def test_heading_with_no_following_text_falls_back(self):
        text = "Jane Smith\nSkills\nEXPERIENCE\n- Python and Docker\n"
        self.assertEqual(find_skills_section(split_lines(text)), "")
        self.assertEqual(_skills(text), ["Docker", "Python"])

    def test_variants_are_canonicalized(self):
        text = "Technical Skills\nReactJS, nodejs, postgres, ExpressJS\n"
        self.assertEqual(_skills(text), ["Express", "Node.js", "PostgreSQL", "React"])

    def test_symbol_terminated_terms_match(self):
        text = "Skills\nC++, C#, Python\n"
        self.assertEqual(_skills(text), sorted(["C#", "C++", "Python"]))

    def test_longer_skill_wins_over_contained_one(self):
        text = "Skills\nReact Native, React\n"
        self.assertEqual(_skills(text), ["React Native"])

    def test_section_stops_at_next_heading_or_caps_line(self):
        lines = ["SKILLS", "Python, Flask", "PROJECTS", "Django portal"]
        self.assertEqual(find_skills_section(lines), "Python, Flask")
        lines = ["Skills", "Python", "Education", "Django"]
        self.assertEqual(find_skills_section(lines), "Python")

    def test_section_collects_at_most_ten_lines(self):
        lines = ["Skills"] + [f"item {index}" for index in range(15)]
        section = find_skills_section(lines)
        self.assertIn("item 9", section)
        self.assertNotIn("item 10", section)

    def test_heading_shapes(self):
        self.assertTrue(is_skills_heading("SKILLS"))
        self.assertTrue(is_skills_heading("Core Competencies:"))
        self.assertTrue(is_skills_heading("skills: Python, Go and several other languages"))
        self.assertTrue(is_skills_heading("Key Technologies"))
        self.assertFalse(is_skills_heading("Led a team that grew technical skills across the organisation"))
        self.assertFalse(is_skills_heading("Experience"))

    def test_drop_redundant_skills(self):
        result = drop_redundant_skills(["React", "React Native", "Java", "JavaScript", "SQL", "SQL"])
        self.assertEqual(result, ["JavaScript", "React Native", "SQL"])

    def test_output_invariants(self):
        samples = [
            "Skills\nGit, GitHub, GitLab, SQL, MySQL, PostgreSQL, Java, JavaScript, React, React Native\n",
            "Worked with Vue.js, Angular, Spring, Hadoop, Spark and Big Data pipelines in Go and Rust.",
        ]
        for text in samples:
            with self.subTest(text=text):
                skills = _skills(text)
                self.assertEqual(skills, sorted(skills))
                self.assertEqual(len(skills), len(set(skills)))
                for skill in skills:
                    for other in skills:
                        if skill != other:
                            self.assertNotIn(skill.lower(), other.lower())


if __name__ == "__main__":
    unittest.main()
