"""Authentication utility functions."""

from collections.abc import Mapping
from typing import Optional

from starlette.datastructures import Headers

from authentication.errors import MalformedAuthHeaderError, NoAuthHeaderError
from models.config import APIKeyHeaderConfiguration

Token = str

DEFAULT_API_KEY_HEADER_CONFIGURATION = APIKeyHeaderConfiguration()


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Return the first value of the named header, matched case-insensitively."""
    if isinstance(headers, Headers):
        return headers.get(name)
    # plain mappings are searched as-is, values may hold any unicode text
    name = name.lower()
    for header_name, value in headers.items():
        if header_name.lower() == name:
            return value
    return None


def extract_api_key(
    headers: Mapping[str, str],
    config: Optional[APIKeyHeaderConfiguration] = None,
) -> Token:
    """Extract the API key from an `Authorization: ApiKey <key>` header.

    The header value is split on single spaces. The first part must equal
    the scheme exactly (the comparison is case-sensitive) and the second part
    is returned verbatim, so anything after a space inside the key is
    dropped and a doubled separator yields an empty key.

    Args:
        headers: Request headers, starlette `Headers` or any other mapping.
            The header name is matched case-insensitively.
        config: Header name and scheme to use, defaults to `Authorization`
            and `ApiKey`.

    Returns:
        The extracted API key.

    Raises:
        NoAuthHeaderError: If the header is missing or empty.
        MalformedAuthHeaderError: If the header does not start with the
            scheme followed by a space.
    """
    if config is None:
        config = DEFAULT_API_KEY_HEADER_CONFIGURATION
    authorization_header = _get_header(headers, config.header_name)
    if not authorization_header:
        raise NoAuthHeaderError()

    scheme_and_key = authorization_header.split(" ")
    if len(scheme_and_key) < 2 or scheme_and_key[0] != config.scheme:
        raise MalformedAuthHeaderError()

    return scheme_and_key[1]
