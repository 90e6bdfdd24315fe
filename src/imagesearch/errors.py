"""Exceptions raised while decoding Flickr payloads."""

from __future__ import annotations

from typing import Any, Optional


def _restore(cls: type[BaseException], args: tuple[Any, ...]) -> BaseException:
    """Rebuild an exception from its message args, skipping ``__init__``."""
    return cls.__new__(cls, *args)


class DecodingError(ValueError):
    """A payload does not match the expected wire shape.

    Parameters
    ----------
    message
        Human readable description of the failure.
    path
        Dotted location of the failing field, e.g. ``hottags.tag[1]._content``.
    """

    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path

    def __reduce__(self):
        # args hold the formatted message, not the constructor arguments
        return (_restore, (type(self), self.args), self.__dict__)


class MissingFieldError(DecodingError):
    """A required key is absent."""

    def __init__(self, path: str) -> None:
        super().__init__("missing required field", path=path)


class TypeMismatchError(DecodingError):
    """A key is present but holds the wrong JSON type."""

    def __init__(self, path: str, *, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(f"expected {expected}, got {self.actual}", path=path)


class ApiStatusError(Exception):
    """Flickr answered with ``stat`` other than ``"ok"``."""

    def __init__(self, stat: str, *, code: Optional[int] = None, message: Optional[str] = None) -> None:
        self.stat = stat
        self.code = code
        self.message = message
        detail = f"Flickr returned stat={stat!r}"
        if code is not None:
            detail += f" (code {code})"
        if message:
            detail += f": {message}"
        super().__init__(detail)

    def __reduce__(self):
        return (_restore, (type(self), self.args), self.__dict__)


__all__ = ["ApiStatusError", "DecodingError", "MissingFieldError", "TypeMismatchError"]
