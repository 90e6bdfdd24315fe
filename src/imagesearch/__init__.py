"""Public package surface for the imagesearch data models."""

from .errors import ApiStatusError, DecodingError, MissingFieldError, TypeMismatchError
from .models import *
from .models import __all__ as _models_all
from .payload import load_json

__all__ = [
    "ApiStatusError",
    "DecodingError",
    "MissingFieldError",
    "TypeMismatchError",
    "load_json",
    *_models_all,
]
