"""Command line access to the serialization helpers.

    safe-serial check 's:5:"hello";'
    safe-serial decode 'a:2:{i:0;s:1:"a";i:1;i:3;}'
    echo '["a", "b", 3]' | safe-serial encode

The positional argument is read from stdin when omitted.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import phpserialize

from safe_serial.classifier import classify
from safe_serial.codec import safe_encode, try_decode
from safe_serial.exceptions import EncodeError, SettingsLoadError
from safe_serial.schemas import ClassificationMode, CodecError, DecodeStatus
from safe_serial.settings import load_settings

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="safe-serial",
        description="Detect, decode and safely encode PHP serialized text",
    )
    p.add_argument("--settings", type=Path, default=None, help="YAML settings file")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("check", help="Report whether text is serialized data")
    c.add_argument("text", nargs="?", help="Candidate text (reads stdin if omitted)")
    c.add_argument("--lenient", action="store_true", help="Tolerate trailing data after a terminator")

    d = sub.add_parser("decode", help="Unserialize text and print it as JSON")
    d.add_argument("text", nargs="?", help="Serialized text (reads stdin if omitted)")

    e = sub.add_parser("encode", help="Encode a JSON value for text storage")
    e.add_argument("value", nargs="?", help="JSON value (reads stdin if omitted)")

    return p


def to_jsonable(value: Any) -> Any:
    """Render decoded values as JSON-compatible data; objects keep their class name."""
    if isinstance(value, phpserialize.phpobject):
        fields = {str(k): to_jsonable(v) for k, v in value.__php_vars__.items()}
        return {"__class__": value.__name__, **fields}
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_jsonable(v) for v in value]
    return value


def _print_error(error: CodecError) -> None:
    print(f"Error [{error.code.value}]: {error.message}", file=sys.stderr)


def _read_arg(value: Optional[str]) -> str:
    return value if value is not None else sys.stdin.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except SettingsLoadError as exc:
        _print_error(exc.to_error())
        return 2

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "check":
        mode = ClassificationMode.LENIENT if args.lenient else ClassificationMode.STRICT
        found = classify(_read_arg(args.text), mode)
        print("true" if found else "false")
        return 0 if found else 1

    if args.cmd == "decode":
        result = try_decode(_read_arg(args.text), charset=settings.charset)
        if result.status is DecodeStatus.FAILED:
            _print_error(result.error)
            return 2
        print(json.dumps(to_jsonable(result.value), ensure_ascii=False))
        return 0

    if args.cmd == "encode":
        raw = _read_arg(args.value)
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            print(f"Error: invalid JSON: {exc}", file=sys.stderr)
            return 2
        try:
            print(safe_encode(value, charset=settings.charset))
        except EncodeError as exc:
            _print_error(exc.to_error())
            return 2
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
