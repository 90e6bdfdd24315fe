import logging
import sys
import unittest
from pathlib import Path

import requests

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from imagesearch.errors import DecodingError  # noqa: E402
from imagesearch.models.tags_types import decode_tags  # noqa: E402
from imagesearch.payload import load_json  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


def _response(content: bytes) -> requests.Response:
    response = requests.Response()
    response.status_code = 200
    response.url = "https://api.flickr.com/services/rest/"
    response._content = content
    return response


class PayloadTests(unittest.TestCase):
    def test_mapping_copied(self):
        source = {"stat": "ok"}
        result = load_json(source)
        self.assertEqual(result, source)
        self.assertIsNot(result, source)

    def test_text_and_bytes(self):
        self.assertEqual(load_json('{"a": 1}'), {"a": 1})
        self.assertEqual(load_json(b'{"a": 1}'), {"a": 1})
        self.assertEqual(load_json(bytearray(b'{"a": 1}')), {"a": 1})

    def test_empty_text(self):
        with self.assertRaises(DecodingError):
            load_json("  ")

    def test_invalid_json(self):
        with self.assertRaises(DecodingError):
            load_json("{not json")

    def test_top_level_not_object(self):
        with self.assertRaises(DecodingError):
            load_json("[]")

    def test_unsupported_type(self):
        with self.assertRaises(DecodingError):
            load_json(42)

    def test_response(self):
        self.assertEqual(load_json(_response(b'{"stat": "ok"}')), {"stat": "ok"})

    def test_response_empty(self):
        with self.assertRaises(DecodingError):
            load_json(_response(b""))

    def test_response_not_json(self):
        with self.assertLogs("imagesearch.payload", level="WARNING"):
            with self.assertRaises(DecodingError):
                load_json(_response(b"<html>rate limited</html>"))

    def test_decoder_accepts_response(self):
        body = b'{"period":"week","count":1,"hottags":{"tag":[{"_content":"sky"}]},"stat":"ok"}'
        tags = decode_tags(_response(body))
        self.assertEqual(tags.tags[0].name, "sky")
