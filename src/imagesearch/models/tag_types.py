"""Types and decoding for a single Flickr tag.

Flickr nests the tag text under the ``_content`` key; the model exposes it
as ``name``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict
from typing_extensions import ReadOnly

from ..payload import Payload, load_json
from ._common_types import _require_object, _require_str

CONTENT_KEY = "_content"


class TagResponse(TypedDict):
    """Readonly tag dict as sent by Flickr."""
    _content: ReadOnly[str]


@dataclass(frozen=True)
class Tag:
    """A tag, e.g. ``Tag(name="sunset")``."""
    name: str


def _decode_tag(value: object, path: str) -> Tag:
    payload = _require_object(value, path)
    return Tag(name=_require_str(payload, CONTENT_KEY, path))


def decode_tag(payload: Payload, *, path: str = "tag") -> Tag:
    """Decode a Flickr tag object.

    Parameters
    ----------
    payload
        Tag object, JSON text, or response. Keys other than ``_content``
        (such as ``thm_data``) are ignored.
    path
        Location reported in errors.

    Returns
    -------
    Tag
        The decoded tag.

    Raises
    ------
    MissingFieldError
        If ``_content`` is absent.
    TypeMismatchError
        If ``_content`` is not a string.
    """
    return _decode_tag(load_json(payload), path)


def encode_tag(tag: Tag) -> TagResponse:
    """Return the wire form of ``tag``."""
    return {"_content": tag.name}


__all__ = ["Tag", "TagResponse", "decode_tag", "encode_tag"]
