from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPAuthorizationCredentials

from .security import bearer_scheme, extract_token_from_request, find_token
from ...cli.settings import DEFAULT_COOKIE_NAME
from ...domain.exceptions import (
    DecodeError,
    InvalidArgumentError,
    InvalidKeyError,
    TokenExpiredError,
    UnsupportedAlgorithmError,
)
from ...domain.ports import TokenDecoder

logger = logging.getLogger(__name__)

Claims = Mapping[str, Any]


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI dependencies that turn a request's token into verified claims.

    Works with any TokenDecoder (a TokenCodec in practice). Error mapping:
      - expired token             -> 401 "Token expired"
      - any other rejected token  -> 401 with the reason
      - unusable key material     -> 500 (server misconfiguration)
    """

    decoder: TokenDecoder
    cookie_name: str = DEFAULT_COOKIE_NAME

    def _decode(self, token: str) -> Claims:
        try:
            return self.decoder.decode(token)
        except TokenExpiredError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token expired",
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc
        except (DecodeError, UnsupportedAlgorithmError) as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=str(exc),
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc
        except (InvalidKeyError, InvalidArgumentError) as exc:
            logger.error("Token verification is misconfigured: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Token verification unavailable",
            ) from exc

    # ------------------------------------------------------------------ #
    # Base dependencies
    # ------------------------------------------------------------------ #

    async def get_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Claims:
        """Dependency: require a valid token."""
        token = extract_token_from_request(request, credentials, self.cookie_name)
        return self._decode(token)

    async def get_optional_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Claims | None:
        """Dependency: claims when a valid token is present, else None."""
        found = find_token(request, credentials, self.cookie_name)
        if found is None:
            return None

        try:
            return self.decoder.decode(found.value)
        except (DecodeError, UnsupportedAlgorithmError):
            return None

    # ------------------------------------------------------------------ #
    # Claim requirement factory
    # ------------------------------------------------------------------ #

    def require_claim(self, name: str, *allowed: Any) -> Callable:
        """
        Dependency factory: the claim must be present and, when `allowed`
        values are given, equal one of them (or, for list claims, contain one).
        """

        async def dependency(
                claims: Claims = Depends(self.get_claims),
        ) -> Claims:
            if name not in claims:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Missing required claim: {name}",
                )
            if allowed and not _claim_matches(claims[name], allowed):
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Claim {name} must be one of: {list(allowed)}",
                )
            return claims

        return dependency


def _claim_matches(value: Any, allowed: tuple[Any, ...]) -> bool:
    if isinstance(value, list):
        return any(v in allowed for v in value)
    return value in allowed
