import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from imagesearch.models.image_types import Image  # noqa: E402
from imagesearch.models.search_results_types import ImageQuery, ImageSearchResults  # noqa: E402


class SearchResultsTypesTests(unittest.TestCase):
    def test_empty_results(self):
        results = ImageSearchResults(search_string="", search_results=[])
        self.assertEqual(results.search_string, "")
        self.assertEqual(results.search_results, ())

    def test_results_preserve_order(self):
        images = [Image(title="b"), Image(title="a"), Image(title="c")]
        results = ImageSearchResults("cats", images)
        self.assertEqual([image.title for image in results.search_results], ["b", "a", "c"])

    def test_results_accept_iterables(self):
        results = ImageSearchResults("cats", (Image(title=t) for t in "xy"))
        self.assertEqual(len(results.search_results), 2)

    def test_results_own_their_sequence(self):
        images = [Image(title="a")]
        results = ImageSearchResults("cats", images)
        images.append(Image(title="b"))
        self.assertEqual(len(results.search_results), 1)

    def test_results_are_immutable(self):
        results = ImageSearchResults("cats", [])
        with self.assertRaises(AttributeError):
            results.search_string = "dogs"  # type: ignore[misc]

    def test_results_id_generated_and_ignored_in_equality(self):
        first = ImageSearchResults("cats", [])
        second = ImageSearchResults("cats", [])
        self.assertNotEqual(first.id, second.id)
        self.assertEqual(first, second)

    def test_results_explicit_id(self):
        self.assertEqual(ImageSearchResults("cats", [], id="abc").id, "abc")

    def test_from_query(self):
        results = ImageSearchResults.from_query(ImageQuery("cats"), [Image(title="a")])
        self.assertEqual(results.search_string, "cats")
        self.assertEqual(results.search_results, (Image(title="a"),))

    def test_query_keeps_text(self):
        self.assertEqual(ImageQuery(" cats ").query, " cats ")

    def test_query_blank(self):
        for value in ("", "   ", "\n\t"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    ImageQuery(value)

    def test_query_not_a_string(self):
        with self.assertRaises(ValueError):
            ImageQuery(5)  # type: ignore[arg-type]
