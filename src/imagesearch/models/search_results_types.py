"""Search query and search result values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable
from uuid import uuid4

from .image_types import Image


@dataclass(frozen=True)
class ImageQuery:
    """A user query with at least one non-whitespace character."""
    query: str

    def __post_init__(self) -> None:
        if not isinstance(self.query, str) or not self.query.strip():
            raise ValueError(f"Invalid query: {self.query!r}")


@dataclass(frozen=True)
class ImageSearchResults:
    """Images found for one search, in ranking order.

    Nothing is validated: an empty ``search_string`` and an empty
    ``search_results`` are both valid. ``id`` identifies the search and is
    ignored when comparing results.
    """
    search_string: str
    search_results: tuple[Image, ...] = field(default_factory=tuple)
    id: str = field(default_factory=lambda: uuid4().hex, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_results", tuple(self.search_results))

    @classmethod
    def from_query(cls, query: ImageQuery, images: Iterable[Image]) -> ImageSearchResults:
        return cls(search_string=query.query, search_results=tuple(images))


__all__ = ["ImageQuery", "ImageSearchResults"]
