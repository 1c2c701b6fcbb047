"""API key extraction from request headers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from fastapi import Request

from app.models.auth_models import AuthorizationHeader, HeaderKind

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "authorization"
API_KEY_SCHEME = "ApiKey"

HeaderValue = str | None | Sequence[str]


class AuthorizationHeaderError(TypeError):
    """Raised when the authorization header has an unusable shape."""


class MultipleAuthorizationHeadersError(AuthorizationHeaderError):
    """Raised when the authorization header carries a list of values."""


def read_authorization_header(headers: Mapping[str, HeaderValue]) -> AuthorizationHeader:
    """Classify the ``authorization`` entry as absent, single or multiple."""
    value = headers.get(AUTHORIZATION_HEADER)
    if value is None:
        return AuthorizationHeader(kind=HeaderKind.ABSENT)
    if isinstance(value, str):
        return AuthorizationHeader(kind=HeaderKind.SINGLE, values=[value])
    if isinstance(value, (list, tuple)):
        return AuthorizationHeader(kind=HeaderKind.MULTIPLE, values=list(value))
    raise AuthorizationHeaderError(
        f"authorization header must be a string, got {type(value).__name__}"
    )


def get_api_key(headers: Mapping[str, HeaderValue]) -> str | None:
    """Extract the API key from an ``Authorization: ApiKey <key>`` header.

    The value is split on single spaces with empty parts kept, so
    ``"ApiKey "`` and ``"ApiKey   key"`` both yield ``""``. A bare
    ``"ApiKey"`` yields None. The scheme match is case-sensitive.

    Raises MultipleAuthorizationHeadersError when the header holds a list
    of values, including an empty one.
    """
    header = read_authorization_header(headers)
    if header.kind is HeaderKind.ABSENT:
        return None
    if header.kind is HeaderKind.MULTIPLE:
        logger.warning("Rejecting multi-valued authorization header (%d values)", len(header.values))
        raise MultipleAuthorizationHeadersError(
            f"expected a single authorization header, got {len(header.values)} values"
        )

    parts = header.values[0].split(" ")
    if parts[0] != API_KEY_SCHEME:
        logger.debug("Authorization header is not an %s credential", API_KEY_SCHEME)
        return None
    if len(parts) < 2:
        return None
    return parts[1]


def extract_api_key(request: Request) -> str | None:
    """Extract API key from Authorization: ApiKey header."""
    values = request.headers.getlist(AUTHORIZATION_HEADER)
    headers: dict[str, HeaderValue] = {}
    if len(values) == 1:
        headers[AUTHORIZATION_HEADER] = values[0]
    elif values:
        headers[AUTHORIZATION_HEADER] = values
    return get_api_key(headers)
