"""Shared types and required-field readers for the model decoders.

This module contains:
- Validation mode type (shared across all decoders)
- Readers that pull one required key out of a JSON object and check its type
"""

from __future__ import annotations

from typing import Any, Literal, Mapping, get_args

from ..errors import MissingFieldError, TypeMismatchError

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]
VALIDATION_MODES: tuple[ValidationMode, ...] = get_args(ValidationMode)


def _check_validation(validation: object) -> ValidationMode:
    if validation not in VALIDATION_MODES:
        raise ValueError(f"Invalid validation mode: {validation!r}")
    return validation  # type: ignore[return-value]


# --- Path Helpers --- #
def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _index(path: str, index: int) -> str:
    return f"{path}[{index}]"


# --- Required Field Readers --- #
def _require_object(value: object, path: str) -> Mapping[str, Any]:
    """Return ``value`` when it is a JSON object, else raise ``TypeMismatchError``."""
    if not isinstance(value, Mapping):
        raise TypeMismatchError(path, expected="object", actual=value)
    return value


def _require(payload: Mapping[str, Any], key: str, path: str) -> object:
    if key not in payload:
        raise MissingFieldError(_join(path, key))
    return payload[key]


def _require_str(payload: Mapping[str, Any], key: str, path: str) -> str:
    value = _require(payload, key, path)
    if not isinstance(value, str):
        raise TypeMismatchError(_join(path, key), expected="string", actual=value)
    return value


def _require_int(payload: Mapping[str, Any], key: str, path: str) -> int:
    """Read an integer key. JSON booleans are rejected even though ``bool`` subclasses ``int``."""
    value = _require(payload, key, path)
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeMismatchError(_join(path, key), expected="integer", actual=value)
    return value


def _require_list(payload: Mapping[str, Any], key: str, path: str) -> list[Any]:
    value = _require(payload, key, path)
    if not isinstance(value, list):
        raise TypeMismatchError(_join(path, key), expected="array", actual=value)
    return value


def _require_mapping(payload: Mapping[str, Any], key: str, path: str) -> Mapping[str, Any]:
    value = _require(payload, key, path)
    return _require_object(value, _join(path, key))
