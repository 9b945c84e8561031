"""This package contains authentication code and modules."""

from authentication.errors import (
    AuthHeaderError,
    MalformedAuthHeaderError,
    NoAuthHeaderError,
)
from authentication.utils import Token, extract_api_key

__all__ = [
    "AuthHeaderError",
    "MalformedAuthHeaderError",
    "NoAuthHeaderError",
    "Token",
    "extract_api_key",
]
