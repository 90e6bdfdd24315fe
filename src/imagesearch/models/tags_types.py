"""Types and decoding for the ``flickr.tags.getHotList`` response."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, TypedDict
from typing_extensions import ReadOnly

from ..errors import DecodingError
from ..payload import Payload, load_json
from ._common_types import (
    ValidationMode,
    _check_validation,
    _index,
    _join,
    _require_int,
    _require_list,
    _require_mapping,
    _require_str,
)
from .tag_types import Tag, TagResponse, _decode_tag, encode_tag

_logger = logging.getLogger(__name__)


class HotTagsResponse(TypedDict):
    """Readonly ``hottags`` envelope."""
    tag: ReadOnly[list[TagResponse]]


class TagsResponse(TypedDict):
    """Readonly hot tags response as sent by Flickr."""
    period: ReadOnly[str]
    count: ReadOnly[int]
    hottags: ReadOnly[HotTagsResponse]
    stat: ReadOnly[str]


@dataclass(frozen=True)
class HotTags:
    """Ordered hot tags. Any iterable is stored as a tuple."""
    tag: tuple[Tag, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", tuple(self.tag))


@dataclass(frozen=True)
class Tags:
    """Hot tags response."""
    period: str
    count: int
    hottags: HotTags
    stat: str

    @property
    def tags(self) -> tuple[Tag, ...]:
        return self.hottags.tag


def _decode_hottags(value: Iterable[object], path: str) -> HotTags:
    return HotTags(tag=tuple(_decode_tag(item, _index(path, index)) for index, item in enumerate(value)))


def decode_tags(
    payload: Payload,
    *,
    validation: ValidationMode = "off",
) -> Tags:
    """Decode a hot tags response.

    Parameters
    ----------
    payload
        Response object, JSON text, or ``requests.Response``.
    validation
        How to treat a ``count`` that differs from the number of tags:
        ``"off"`` accepts it, ``"warn"`` logs a warning, and ``"strict"``
        raises.

    Returns
    -------
    Tags
        The decoded response. Tag order follows the payload.

    Raises
    ------
    MissingFieldError
        If a required key is absent, at any depth.
    TypeMismatchError
        If a required key holds the wrong type, at any depth.
    DecodingError
        On a count mismatch with ``validation="strict"``.
    """
    validation = _check_validation(validation)
    data = load_json(payload)

    period = _require_str(data, "period", "")
    count = _require_int(data, "count", "")
    hottags_data = _require_mapping(data, "hottags", "")
    tag_list = _require_list(hottags_data, "tag", "hottags")
    hottags = _decode_hottags(tag_list, _join("hottags", "tag"))
    stat = _require_str(data, "stat", "")

    if validation != "off" and count != len(hottags.tag):
        if validation == "strict":
            raise DecodingError(f"count is {count} but {len(hottags.tag)} tags were sent", path="count")
        _logger.warning("Hot tags count %s does not match %s decoded tags", count, len(hottags.tag))

    return Tags(period=period, count=count, hottags=hottags, stat=stat)


def encode_tags(tags: Tags) -> TagsResponse:
    """Return the wire form of ``tags``."""
    return {
        "period": tags.period,
        "count": tags.count,
        "hottags": {"tag": [encode_tag(tag) for tag in tags.hottags.tag]},
        "stat": tags.stat,
    }


__all__ = ["HotTags", "HotTagsResponse", "Tags", "TagsResponse", "decode_tags", "encode_tags"]
