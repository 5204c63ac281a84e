from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...cli.settings import DEFAULT_COOKIE_NAME

logger = logging.getLogger(__name__)

# auto_error=False: a missing header is decided by find_token, which may
# still fall back to the cookie.
bearer_scheme = HTTPBearer(auto_error=False)

AUTH_SCHEME = "bearer"


class TokenSource(str, Enum):
    CREDENTIALS = "credentials"
    AUTHORIZATION_HEADER = "authorization_header"
    COOKIE = "cookie"


@dataclass(frozen=True, slots=True)
class RequestToken:
    value: str
    source: TokenSource


def parse_authorization(header: Optional[str]) -> Optional[str]:
    """
    Token from an `Authorization: <scheme> <token>` value.

    The scheme is matched case-insensitively; anything that is not a
    non-empty bearer token yields None.
    """
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != AUTH_SCHEME:
        return None
    token = token.strip()
    # A compact token never contains whitespace.
    if not token or any(ch.isspace() for ch in token):
        return None
    return token


def find_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> Optional[RequestToken]:
    """
    Locate the compact token carried by `request`, or None.

    Sources in order: credentials parsed by `bearer_scheme`, the raw
    Authorization header, then the `cookie_name` cookie.
    """
    if credentials is not None and credentials.scheme.lower() == AUTH_SCHEME:
        value = (credentials.credentials or "").strip()
        if value:
            return RequestToken(value, TokenSource.CREDENTIALS)

    value = parse_authorization(request.headers.get("Authorization"))
    if value:
        return RequestToken(value, TokenSource.AUTHORIZATION_HEADER)

    value = (request.cookies.get(cookie_name) or "").strip()
    if value:
        return RequestToken(value, TokenSource.COOKIE)

    return None


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    cookie_name: str = DEFAULT_COOKIE_NAME,
) -> str:
    """Like `find_token`, but a request without a token is a 401."""
    found = find_token(request, credentials, cookie_name)
    if found is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.debug("Token taken from %s", found.source.value)
    return found.value
