"""Demo that decodes saved Flickr payloads with :mod:`imagesearch`.

Run from the project root::

    python examples/demo_decode.py [hot_tags.json] [search.json]

Without arguments the bundled sample payloads are used.
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from imagesearch import (
    ImageQuery,
    ImageSearchResults,
    decode_photos,
    decode_tags,
    flickr_image_url,
)

logging.basicConfig(level=logging.INFO)

SAMPLE_HOT_TAGS = (
    '{"period":"day","count":2,"hottags":{"tag":[{"_content":"digital"},{"_content":"shine"}]},"stat":"ok"}'
)
SAMPLE_SEARCH = (
    '{"photos":{"page":1,"pages":1,"perpage":1,"total":1,"photo":[{"id":"53624890009","owner":"105731165@N07",'
    '"secret":"5cd918efcd","server":"65535","farm":66,"title":"Andrea  Modelo  Model","ispublic":1,'
    '"isfriend":0,"isfamily":0}]},"stat":"ok"}'
)


def _read(path: str | None, default: str) -> str:
    if path is None:
        return default
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main() -> None:
    hot_tags_path = sys.argv[1] if len(sys.argv) > 1 else None
    search_path = sys.argv[2] if len(sys.argv) > 2 else None

    tags = decode_tags(_read(hot_tags_path, SAMPLE_HOT_TAGS), validation="warn")
    print(f"Hot tags for period {tags.period!r}: {[tag.name for tag in tags.tags]}")

    if not tags.tags:
        print("No hot tags to search for.")
        return

    query = ImageQuery(tags.tags[0].name)
    images = decode_photos(_read(search_path, SAMPLE_SEARCH))
    results = ImageSearchResults.from_query(query, images)
    print(f"\nSearch {results.id} for {results.search_string!r} returned {len(results.search_results)} images")

    for idx, image in enumerate(results.search_results, start=1):
        print(f"\nImage {idx}:")
        pprint({
            "title": image.title,
            "thumbnail": flickr_image_url(image, "thumbnail"),
            "big": flickr_image_url(image, "big"),
        })


if __name__ == "__main__":
    main()
