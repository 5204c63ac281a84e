from __future__ import annotations

from .deps import FastAPITokenAuth
from .security import (
    RequestToken,
    TokenSource,
    bearer_scheme,
    extract_token_from_request,
    find_token,
)
from ...cli.env import settings_from_env
from ...cli.settings import CodecSettings


def create_fastapi_auth(settings: CodecSettings | None = None) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Builds a TokenCodec from `settings` (or from the environment)
    - Wraps it in FastAPITokenAuth, exposing dependencies like:

        token_auth.get_claims
        token_auth.get_optional_claims
        token_auth.require_claim("role", "admin")
    """
    settings = settings or settings_from_env()
    return FastAPITokenAuth(
        decoder=settings.build_codec(),
        cookie_name=settings.cookie_name,
    )


"""

from fastapi import Depends, FastAPI
from pkg_jwt.integrations.fastapi import create_fastapi_auth

token_auth = create_fastapi_auth()
app = FastAPI()

@app.get("/me")
async def me(claims=Depends(token_auth.get_claims)):
    return {"sub": claims["sub"]}

@app.get("/admin")
async def admin(claims=Depends(token_auth.require_claim("role", "admin"))):
    ...

"""

__all__ = [
    "FastAPITokenAuth",
    "bearer_scheme",
    "extract_token_from_request",
    "find_token",
    "RequestToken",
    "TokenSource",
    "create_fastapi_auth",
]
