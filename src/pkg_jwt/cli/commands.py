# src/pkg_jwt/cli/commands.py

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import Any, Optional, Sequence

from ..adapters.crypto.registry import supported_algorithms
from ..api import decode_complete, encode
from ..domain.constants import DEFAULT_ALGORITHM
from ..domain.exceptions import JWTError
from .env import algorithm_from_env, settings_from_env

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-jwt",
        description="Encode, verify and inspect JSON Web Tokens",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug details to stderr.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="Sign a JSON claims object.")
    p_encode.add_argument(
        "claims",
        help="Claims as a JSON object, or '-' to read it from stdin.",
    )
    p_encode.add_argument(
        "--alg",
        "-a",
        help=f"Signing algorithm (default: JWT_ALGORITHM or {DEFAULT_ALGORITHM}).",
    )
    p_encode.add_argument(
        "--expires-in",
        type=int,
        help="Set `exp` to now + this many seconds.",
    )
    _add_key_arguments(p_encode)

    p_decode = sub.add_parser("decode", help="Verify a token and print its claims.")
    p_decode.add_argument("token")
    p_decode.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip signature and time checks (inspection only).",
    )
    _add_key_arguments(p_decode)

    p_inspect = sub.add_parser("inspect", help="Print header and claims without verifying.")
    p_inspect.add_argument("token")

    sub.add_parser("algorithms", help="List supported algorithms.")

    return parser.parse_args(args=argv)


def _add_key_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--key",
        "-k",
        help="Secret or PEM key (defaults from env JWT_SIGNING_KEY / JWT_VERIFYING_KEY).",
    )
    group.add_argument(
        "--key-file",
        "-K",
        help="Read the secret or key from this file.",
    )


def _explicit_key(args: argparse.Namespace) -> Optional[str]:
    if args.key:
        return args.key
    if args.key_file:
        with open(args.key_file, "r", encoding="utf-8") as fh:
            return fh.read()
    return None


def _read_claims(raw: str) -> Any:
    text = sys.stdin.read() if raw == "-" else raw
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Claims are not valid JSON: {exc}") from exc


def _run_encode(args: argparse.Namespace) -> dict[str, Any]:
    claims = _read_claims(args.claims)
    key = _explicit_key(args)
    if key is None:
        key = settings_from_env().signing_key
    alg = args.alg or algorithm_from_env()

    if args.expires_in is not None and isinstance(claims, dict):
        claims["exp"] = int(time.time()) + args.expires_in

    return {"token": encode(claims, key, alg)}


def _run_decode(args: argparse.Namespace) -> dict[str, Any]:
    if args.no_verify:
        decoded = decode_complete(args.token, verify=False)
        return {"verified": False, "header": decoded.header, "claims": decoded.payload}

    key = _explicit_key(args)
    if key is None:
        key = settings_from_env().effective_verifying_key

    decoded = decode_complete(args.token, key, verify=True)
    return {"verified": True, "header": decoded.header, "claims": decoded.payload}


def _run(args: argparse.Namespace) -> dict[str, Any]:
    if args.command == "encode":
        return _run_encode(args)
    if args.command == "decode":
        return _run_decode(args)
    if args.command == "inspect":
        decoded = decode_complete(args.token, verify=False)
        return {"header": decoded.header, "claims": decoded.payload}
    return {"algorithms": supported_algorithms()}


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        summary = _run(args)
    except (JWTError, ValueError, RuntimeError, OSError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        json.dump({"ok": False, "error": str(exc), "type": type(exc).__name__}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise SystemExit(1) from exc

    json.dump({"ok": True, **summary}, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
