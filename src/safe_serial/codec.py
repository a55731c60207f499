"""Guarded serialize/unserialize helpers.

Values are stored as plain text. Decoding only happens when the text is
strictly recognised as serialized data, and encoding wraps scalars whose text
already looks serialized in one extra layer so the two cannot be confused
after a round trip.

Callers decode at most as many times as they encoded: a double-wrapped
scalar comes back from one ``safe_decode`` as its (still serialized-looking)
original text.
"""

from __future__ import annotations

import dataclasses
import logging
from io import BytesIO
from typing import Any, List, Tuple

import phpserialize
from pydantic import BaseModel

from safe_serial.classifier import TRIM_CHARS, classify, trim
from safe_serial.exceptions import DecodeError, EncodeError
from safe_serial.schemas import (
    ClassificationMode,
    DecodeFailure,
    DecodeResult,
    DecodeStatus,
)

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"

SCALAR_TYPES = (bool, int, float, str)
SEQUENCE_TYPES = (list, tuple)

# Prefix of the offending text kept in error details.
ERROR_EXCERPT_CHARS = 200

# Lone surrogates survive a round trip instead of failing to encode.
UNICODE_ERRORS = "surrogatepass"

# Raised by the structural codec on oversized prefixes or deep nesting too.
DECODE_ERRORS = (ValueError, TypeError, LookupError, OverflowError, RecursionError, MemoryError)
ENCODE_ERRORS = (ValueError, TypeError, LookupError, RecursionError)


def _array_hook(items: List[Tuple[Any, Any]]) -> Any:
    """Arrays keyed 0..n-1 become lists, everything else a dict."""
    if [key for key, _ in items] == list(range(len(items))):
        return [value for _, value in items]
    return dict(items)


def _object_hook(obj: Any) -> phpserialize.phpobject:
    if isinstance(obj, BaseModel):
        return phpserialize.phpobject(type(obj).__name__, obj.model_dump())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return phpserialize.phpobject(type(obj).__name__, dataclasses.asdict(obj))
    raise TypeError(f"can't serialize {type(obj).__name__!r}")


def is_compound(value: Any) -> bool:
    """Sequences, mappings and records are always structurally encoded."""
    if isinstance(value, SEQUENCE_TYPES + (dict, phpserialize.phpobject, BaseModel)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, SCALAR_TYPES)


def scalar_text(value: Any) -> str:
    """Text form of a scalar, using PHP's string casts for None and booleans."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def unserialize(text: str, charset: str = DEFAULT_CHARSET) -> Any:
    """Rebuild a value from serialized text.

    String lengths are byte counts in ``charset``. Arrays keyed ``0..n-1``
    come back as lists, other arrays as dicts, objects as
    ``phpserialize.phpobject``.

    Raises:
        DecodeError: The text is malformed, truncated, or has data after the
            first complete value.
    """
    try:
        stream = BytesIO(text.encode(charset, UNICODE_ERRORS))
        value = phpserialize.load(
            stream,
            charset=charset,
            errors=UNICODE_ERRORS,
            decode_strings=True,
            object_hook=phpserialize.phpobject,
            array_hook=_array_hook,
        )
    except DECODE_ERRORS as exc:
        raise DecodeError(text, str(exc)) from exc

    remainder = stream.read()
    if remainder.strip(TRIM_CHARS.encode("ascii")):
        raise DecodeError(text, f"{len(remainder)} bytes of trailing data")
    return value


def serialize(value: Any, charset: str = DEFAULT_CHARSET) -> str:
    """Serialize ``value`` unconditionally and return the text.

    Raises:
        EncodeError: ``value`` (or something nested in it) has no serialized form.
    """
    try:
        payload = phpserialize.dumps(
            value, charset=charset, errors=UNICODE_ERRORS, object_hook=_object_hook
        )
        return payload.decode(charset, UNICODE_ERRORS)
    except ENCODE_ERRORS as exc:
        raise EncodeError(type(value).__name__, str(exc)) from exc


def try_decode(text: Any, charset: str = DEFAULT_CHARSET) -> DecodeResult:
    """Decode ``text`` if it is strictly recognised as serialized data.

    Args:
        text: Candidate value. Non-strings and blank strings pass through.
        charset: Encoding used for string byte lengths.

    Returns:
        DecodeResult with status DECODED and the rebuilt value, PASSTHROUGH
        and the untouched input, or FAILED and a CodecError.
    """
    if not isinstance(text, str) or not trim(text):
        return DecodeResult(status=DecodeStatus.PASSTHROUGH, value=text)

    data = trim(text)
    if not classify(data, ClassificationMode.STRICT):
        return DecodeResult(status=DecodeStatus.PASSTHROUGH, value=text)

    try:
        value = unserialize(data, charset)
    except DecodeError as exc:
        logger.warning("Failed to unserialize value: %s", exc.message)
        error = exc.to_error({"text": data[:ERROR_EXCERPT_CHARS]})
        return DecodeResult(status=DecodeStatus.FAILED, error=error)

    return DecodeResult(status=DecodeStatus.DECODED, value=value)


def safe_decode(text: Any, charset: str = DEFAULT_CHARSET) -> Any:
    """Unserialize ``text`` only if it was serialized.

    Returns the decoded value, the input unchanged when it is not serialized
    text, or a falsy ``DecodeFailure`` when decoding failed.

    Examples:
        >>> safe_decode('a:1:{i:0;s:1:"x";}')
        ['x']
        >>> safe_decode("not serialized")
        'not serialized'
    """
    result = try_decode(text, charset)
    if result.status is DecodeStatus.FAILED:
        return DecodeFailure(text=text, error=result.error)
    return result.value


def safe_encode(value: Any, charset: str = DEFAULT_CHARSET) -> Any:
    """Serialize ``value`` if needed for storage as text.

    Compound values are always serialized. Scalars are returned as text,
    except when that text already looks serialized; then it is serialized
    once more. Values of any other type are returned unchanged.
    """
    if is_compound(value):
        return serialize(value, charset)

    if not is_scalar(value):
        logger.debug("Leaving unsupported %s value unchanged", type(value).__name__)
        return value

    text = scalar_text(value)
    if classify(text, ClassificationMode.LENIENT):
        return serialize(text, charset)
    return text


__all__ = [
    "DEFAULT_CHARSET",
    "is_compound",
    "is_scalar",
    "scalar_text",
    "unserialize",
    "serialize",
    "try_decode",
    "safe_decode",
    "safe_encode",
]
