"""
pkg_jwt.cli

Configuration and command-line tooling:

- CodecSettings: algorithm + key material, builds a TokenCodec.
- settings_from_env: reads JWT_ALGORITHM, JWT_SIGNING_KEY[_FILE],
  JWT_VERIFYING_KEY[_FILE] and JWT_COOKIE_NAME.
- main: the `pkg-jwt` entry point (encode / decode / inspect / algorithms).
"""

from __future__ import annotations

from .commands import main
from .env import algorithm_from_env, settings_from_env
from .settings import CodecSettings, DEFAULT_COOKIE_NAME

__all__ = [
    "CodecSettings",
    "DEFAULT_COOKIE_NAME",
    "algorithm_from_env",
    "settings_from_env",
    "main",
]
