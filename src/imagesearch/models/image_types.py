"""Types, decoding and URL helpers for Flickr photos."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Literal, Optional, TypedDict, get_args
from typing_extensions import ReadOnly

from ..errors import ApiStatusError, DecodingError
from ..payload import Payload, load_json
from ._common_types import (
    ValidationMode,
    _check_validation,
    _index,
    _join,
    _require_int,
    _require_list,
    _require_mapping,
    _require_object,
    _require_str,
)

_logger = logging.getLogger(__name__)

FLICKR_STATIC_HOST = os.environ.get("FLICKR_STATIC_HOST", "staticflickr.com")

# --- Image Sizes --- #
ImageSize = Literal["thumbnail", "big"]
IMAGE_SIZES: tuple[ImageSize, ...] = get_args(ImageSize)
IMAGE_SIZE_SUFFIXES: dict[ImageSize, str] = {"thumbnail": "m", "big": "b"}


def _normalize_image_size(size: ImageSize | object) -> ImageSize:
    """Return ``size`` when it names a known image size, else raise ``ValueError``."""
    if size not in IMAGE_SIZES:
        raise ValueError(f"Invalid image size: {size!r}")
    return size  # type: ignore[return-value]


class PhotoResponse(TypedDict, total=False):
    """Readonly photo dict from ``flickr.photos.search``."""
    id: ReadOnly[str]
    owner: ReadOnly[str]
    secret: ReadOnly[str]
    server: ReadOnly[str]
    farm: ReadOnly[int]
    title: ReadOnly[str]
    ispublic: ReadOnly[int]
    isfriend: ReadOnly[int]
    isfamily: ReadOnly[int]


@dataclass(frozen=True)
class FlickrImageParameters:
    image_id: str
    farm: int
    server: str
    secret: str


@dataclass(frozen=True)
class Image:
    """A search hit. Image bytes are filled in by copying with :func:`with_image_data`."""
    title: str
    flickr: Optional[FlickrImageParameters] = None
    thumbnail: Optional[bytes] = None
    big_image: Optional[bytes] = None


def _decode_photo(value: object, path: str) -> Image:
    payload = _require_object(value, path)
    flickr = FlickrImageParameters(
        image_id=_require_str(payload, "id", path),
        farm=_require_int(payload, "farm", path),
        server=_require_str(payload, "server", path),
        secret=_require_str(payload, "secret", path),
    )
    return Image(title=_require_str(payload, "title", path), flickr=flickr)


def decode_photo(payload: PhotoResponse | Payload, *, path: str = "photo") -> Image:
    """Decode one Flickr photo object into an :class:`Image`.

    Raises
    ------
    MissingFieldError
        If ``id``, ``farm``, ``server``, ``secret`` or ``title`` is absent.
    TypeMismatchError
        If one of them holds the wrong type.
    """
    return _decode_photo(load_json(payload), path)


def decode_photos(
    payload: Payload,
    *,
    validation: ValidationMode = "warn",
) -> list[Image]:
    """Decode a ``flickr.photos.search`` response.

    Parameters
    ----------
    payload
        Response object, JSON text, or ``requests.Response``.
    validation
        Handling of malformed photos: ``"off"`` skips them, ``"warn"`` skips
        them with a warning, and ``"strict"`` raises.

    Returns
    -------
    list[Image]
        Decoded images in response order.

    Raises
    ------
    ApiStatusError
        If Flickr reported a failure.
    MissingFieldError, TypeMismatchError
        If the envelope is malformed, or a photo is malformed in strict mode.
    """
    validation = _check_validation(validation)
    data = load_json(payload)

    stat = _require_str(data, "stat", "")
    if stat != "ok":
        code = data.get("code")
        message = data.get("message")
        raise ApiStatusError(
            stat,
            code=code if isinstance(code, int) else None,
            message=message if isinstance(message, str) else None,
        )

    photos = _require_mapping(data, "photos", "")
    photo_list = _require_list(photos, "photo", "photos")
    list_path = _join("photos", "photo")

    images: list[Image] = []
    for index, item in enumerate(photo_list):
        try:
            images.append(_decode_photo(item, _index(list_path, index)))
        except DecodingError as exc:
            if validation == "strict":
                raise
            if validation == "warn":
                _logger.warning("Skipping malformed photo: %s", exc)
    return images


def flickr_image_url(image: Image, size: ImageSize) -> str | None:
    """Return the static Flickr URL for ``image`` at ``size``.

    Returns ``None`` for images without Flickr parameters.
    """
    size = _normalize_image_size(size)
    params = image.flickr
    if params is None:
        return None
    suffix = IMAGE_SIZE_SUFFIXES[size]
    return (
        f"https://farm{params.farm}.{FLICKR_STATIC_HOST}/"
        f"{params.server}/{params.image_id}_{params.secret}_{suffix}.jpg"
    )


def with_image_data(image: Image, data: bytes | None, size: ImageSize) -> Image:
    """Return a copy of ``image`` holding ``data`` in the slot for ``size``."""
    if _normalize_image_size(size) == "thumbnail":
        return replace(image, thumbnail=data)
    return replace(image, big_image=data)


__all__ = [
    "FLICKR_STATIC_HOST",
    "FlickrImageParameters",
    "IMAGE_SIZES",
    "Image",
    "ImageSize",
    "PhotoResponse",
    "decode_photo",
    "decode_photos",
    "flickr_image_url",
    "with_image_data",
]
