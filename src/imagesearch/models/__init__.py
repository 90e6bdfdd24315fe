"""Model module exports."""

from ._common_types import ValidationMode
from .image_types import (
    IMAGE_SIZES,
    FlickrImageParameters,
    Image,
    ImageSize,
    PhotoResponse,
    decode_photo,
    decode_photos,
    flickr_image_url,
    with_image_data,
)
from .search_results_types import ImageQuery, ImageSearchResults
from .tag_types import Tag, TagResponse, decode_tag, encode_tag
from .tags_types import HotTags, HotTagsResponse, Tags, TagsResponse, decode_tags, encode_tags

__all__ = [
    "FlickrImageParameters",
    "HotTags",
    "HotTagsResponse",
    "IMAGE_SIZES",
    "Image",
    "ImageQuery",
    "ImageSearchResults",
    "ImageSize",
    "PhotoResponse",
    "Tag",
    "TagResponse",
    "Tags",
    "TagsResponse",
    "ValidationMode",
    "decode_photo",
    "decode_photos",
    "decode_tag",
    "decode_tags",
    "encode_tag",
    "encode_tags",
    "flickr_image_url",
    "with_image_data",
]
