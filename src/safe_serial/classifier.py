"""Heuristic detection of PHP ``serialize()`` text.

The check looks at the leading type token, the length/count prefix and the
terminator only. It never walks nested arrays or objects, so exotic but valid
nested content can be rejected; callers that decode accepted text must still
tolerate a failing structural decode.
"""

from __future__ import annotations

import re
from typing import Any, Union

from safe_serial.schemas import ClassificationMode

# Characters removed by PHP's trim(); str.strip() would also eat unicode spaces.
TRIM_CHARS = " \t\n\r\0\x0b"

LITERAL_VALUES = frozenset({"N;", "b:0;", "b:1;"})

_PREFIX_RE = {
    token: re.compile(rf"^{token}:[0-9]+:", re.DOTALL) for token in ("s", "a", "O")
}
_NUMBER_RE = {
    (token, mode): re.compile(
        rf"^{token}:[0-9.E+-]+;" + (r"\Z" if mode is ClassificationMode.STRICT else "")
    )
    for token in ("i", "d")
    for mode in ClassificationMode
}

# Terminators found before these offsets sit inside the type/length prefix.
MIN_SEMICOLON_OFFSET = 3
MIN_BRACE_OFFSET = 4


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def _has_terminator(data: str, mode: ClassificationMode) -> bool:
    if mode is ClassificationMode.STRICT:
        return data[-1] in (";", "}")

    semicolon = data.find(";")
    brace = data.find("}")
    if semicolon == -1 and brace == -1:
        return False
    if semicolon != -1 and semicolon < MIN_SEMICOLON_OFFSET:
        return False
    if brace != -1 and brace < MIN_BRACE_OFFSET:
        return False
    return True


def classify(text: Any, mode: Union[ClassificationMode, bool, str] = ClassificationMode.STRICT) -> bool:
    """Return True when ``text`` looks like serialized data under ``mode``.

    Args:
        text: Candidate value. Anything that is not a ``str`` is rejected.
        mode: STRICT demands a final ``;`` or ``}``; LENIENT accepts a
            terminator anywhere past the prefix.

    Returns:
        True if the string is plausible serialized text, False otherwise.

    Examples:
        >>> classify('s:5:"hello";')
        True
        >>> classify("i:42;junk", ClassificationMode.LENIENT)
        True
        >>> classify("i:42;junk", ClassificationMode.STRICT)
        False
    """
    if not isinstance(text, str):
        return False

    mode = ClassificationMode.coerce(mode)
    data = trim(text)
    if not data:
        return False

    if data in LITERAL_VALUES:
        return True

    if len(data) < 4 or data[1] != ":":
        return False

    if not _has_terminator(data, mode):
        return False

    token = data[0]
    if token == "s":
        if mode is ClassificationMode.STRICT:
            if data[-2] != '"':
                return False
        elif '"' not in data:
            return False
        # strings share the length-prefix check with arrays and objects
        return bool(_PREFIX_RE[token].match(data))
    if token in ("a", "O"):
        return bool(_PREFIX_RE[token].match(data))
    if token in ("i", "d"):
        return bool(_NUMBER_RE[(token, mode)].match(data))

    return False


def is_grammar_text(text: Any, strict: Union[bool, ClassificationMode] = True) -> bool:
    """Check whether ``text`` is serialized data; strict about the ending by default."""
    return classify(text, strict)


__all__ = ["TRIM_CHARS", "LITERAL_VALUES", "trim", "classify", "is_grammar_text"]
