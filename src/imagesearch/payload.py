"""Turn raw Flickr responses into JSON objects ready for decoding."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import requests

from .errors import DecodingError

_logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | str | bytes | bytearray | requests.Response


def load_json(payload: Payload) -> dict[str, Any]:
    """Return the JSON object carried by ``payload``.

    Parameters
    ----------
    payload
        One of:
        - an already parsed mapping (copied into a plain dict)
        - JSON text as ``str``, ``bytes`` or ``bytearray``
        - a ``requests.Response`` whose body holds the JSON

    Returns
    -------
    dict
        The top-level JSON object.

    Raises
    ------
    DecodingError
        If the body is empty, is not valid JSON, or is not a JSON object.
    """
    if isinstance(payload, Mapping):
        return dict(payload)

    if isinstance(payload, requests.Response):
        if not payload.content:
            raise DecodingError("response body is empty")
        try:
            parsed = payload.json()
        except ValueError as exc:  # requests raises a ValueError subclass
            _logger.warning("Response from %s was not JSON", payload.url)
            raise DecodingError(f"response body is not JSON: {exc}") from exc
    elif isinstance(payload, (str, bytes, bytearray)):
        if not payload.strip():
            raise DecodingError("payload is empty")
        try:
            parsed = json.loads(payload)
        except ValueError as exc:
            raise DecodingError(f"payload is not JSON: {exc}") from exc
    else:
        raise DecodingError(f"unsupported payload type {type(payload).__name__}")

    if not isinstance(parsed, dict):
        raise DecodingError(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed


__all__ = ["Payload", "load_json"]
