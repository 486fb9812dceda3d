import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from talent_tracker.extraction.location import (  # noqa: E402
    LocationPass,
    build_location_passes,
    extract_location,
    has_location_shape,
    is_excluded,
)
from talent_tracker.extraction.segmentation import split_lines  # noqa: E402


def _location(text: str) -> str:
    return extract_location(split_lines(text), text)


class LocationExtractionTests(unittest.TestCase):
    def test_passes_are_ranked(self):
        names = [location_pass.name for location_pass in build_location_passes()]
        self.assertEqual(names, ["contact_header", "extended_header", "contact_line", "short_city_state"])

    def test_city_state_in_contact_header(self):
        self.assertEqual(_location("Jane Roe\nAustin, TX\njane@example.com"), "Austin, TX")

    def test_city_state_does_not_absorb_previous_line(self):
        self.assertEqual(_location("John Doe\nNew York, NY\njohn@example.com"), "New York, NY")

    def test_city_pin_code(self):
        self.assertEqual(_location("Ravi Kumar\nOngole - 523316\nravi@example.com"), "Ongole - 523316")

    def test_city_country(self):
        self.assertEqual(_location("Amelia Hart\nLondon, England\namelia@example.com"), "London, England")

    def test_extended_window_requires_known_city(self):
        header = [
            "Jane Roe",
            "jane@example.com",
            "555-123-4567",
            "Backend engineer",
            "Portfolio available on request",
            "Relocating soon",
        ]
        known = "\n".join(header + ["Seattle, WA"])
        unknown = "\n".join(header + ["Springfield, IL"])
        self.assertEqual(_location(known), "Seattle, WA")
        self.assertEqual(_location(unknown), "")

    def test_exclusions_reject_header_match(self):
        text = "Jane Roe\nDeployment Engineer, Production Systems\njane@example.com"
        self.assertEqual(_location(text), "")

    def test_contact_line_fallback(self):
        filler = [f"Filler line {index}" for index in range(16)]
        text = "\n".join(filler + ["jane@example.com | 555-123-4567 | Portland, OR"])
        self.assertEqual(_location(text), "Portland, OR")

    def test_short_city_state_fallback_ignores_exclusions(self):
        # The last-resort shape check is not filtered by the exclusion list.
        text = "Jane Roe\nStanford University, CA\njane@example.com"
        self.assertEqual(_location(text), "Stanford University, CA")

    def test_custom_passes_run_in_order(self):
        passes = [
            LocationPass("empty", lambda lines, text: ""),
            LocationPass("fixed", lambda lines, text: "Berlin, Germany"),
            LocationPass("never", lambda lines, text: "Paris, France"),
        ]
        self.assertEqual(extract_location(["x"], "x", passes=passes), "Berlin, Germany")

    def test_shape_and_exclusion_helpers(self):
        self.assertTrue(has_location_shape("Austin, TX"))
        self.assertTrue(has_location_shape("Pune 411001"))
        self.assertFalse(has_location_shape("Austin Texas"))
        self.assertFalse(has_location_shape("A, B"))
        self.assertTrue(is_excluded("March, TX"))
        self.assertFalse(is_excluded("Denver, CO"))

    def test_no_location(self):
        self.assertEqual(_location("Jane Roe\njane@example.com\nBuilt APIs"), "")


if __name__ == "__main__":
    unittest.main()
