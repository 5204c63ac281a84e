from __future__ import annotations

import os
from typing import Optional

from .settings import CodecSettings, DEFAULT_COOKIE_NAME
from ..domain.constants import DEFAULT_ALGORITHM


def _read_key(value_var: str, file_var: str) -> Optional[str]:
    """Inline value wins over a file path; empty values count as unset."""
    value = os.getenv(value_var)
    if value:
        return value

    path = os.getenv(file_var)
    if not path:
        return None
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def algorithm_from_env() -> str:
    return (os.getenv("JWT_ALGORITHM") or DEFAULT_ALGORITHM).strip().upper()


def settings_from_env() -> CodecSettings:
    signing_key = _read_key("JWT_SIGNING_KEY", "JWT_SIGNING_KEY_FILE")
    verifying_key = _read_key("JWT_VERIFYING_KEY", "JWT_VERIFYING_KEY_FILE")

    if not signing_key and not verifying_key:
        raise RuntimeError(
            "Missing JWT key settings: JWT_SIGNING_KEY (or JWT_SIGNING_KEY_FILE), "
            "JWT_VERIFYING_KEY (or JWT_VERIFYING_KEY_FILE)"
        )

    return CodecSettings(
        algorithm=algorithm_from_env(),
        signing_key=signing_key,
        verifying_key=verifying_key,
        cookie_name=os.getenv("JWT_COOKIE_NAME") or DEFAULT_COOKIE_NAME,
    )
