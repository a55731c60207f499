"""Multi-byte safe HTML entity transcoding."""

from __future__ import annotations

import html
import re
from html.entities import codepoint2name
from typing import Any, Iterator, Optional

import phpserialize

from safe_serial.settings import clamp_chunk_limit, settings_from_env

_MULTIBYTE_RE = re.compile("[\u0080-\U0010ffff]")


def _hex_entity(match: re.Match) -> str:
    return f"&#x{ord(match.group(0)):x};"


def _chunks(text: str, size: int) -> Iterator[str]:
    for start in range(0, len(text), size):
        yield text[start:start + size]


def encode_named_entities(text: str) -> str:
    """Replace every character that has an HTML 4 entity name, plus ``'``."""
    out = []
    for ch in text:
        if ch == "'":
            out.append("&#039;")
        elif ord(ch) in codepoint2name:
            out.append(f"&{codepoint2name[ord(ch)]};")
        else:
            out.append(ch)
    return "".join(out)


def _transcode(value: Any, entity: bool, limit: int) -> Any:
    if isinstance(value, dict):
        return {key: _transcode(item, entity, limit) for key, item in value.items()}
    if isinstance(value, list):
        return [_transcode(item, entity, limit) for item in value]
    if isinstance(value, tuple):
        return tuple(_transcode(item, entity, limit) for item in value)
    if isinstance(value, phpserialize.phpobject):
        return phpserialize.phpobject(value.__name__, _transcode(value.__php_vars__, entity, limit))
    if not isinstance(value, str):
        return value

    if entity:
        value = encode_named_entities(html.unescape(value))
    return "".join(_MULTIBYTE_RE.sub(_hex_entity, chunk) for chunk in _chunks(value, limit))


def multibyte_entities(value: Any, entity: bool = False, chunk_limit: Optional[int] = None) -> Any:
    """Turn every non-ASCII character into a ``&#x...;`` entity.

    Lists, tuples, dicts and decoded objects (``phpserialize.phpobject``)
    are transcoded element by element into new containers; other
    non-string values are returned unchanged.

    Args:
        value: String or container to transcode.
        entity: Decode existing entities first, then re-encode with named
            entities (``&amp;``, ``&eacute;``) before the hex pass.
        chunk_limit: Characters handled per regex pass. Defaults to the
            ``SAFE_SERIAL_CHUNK_LIMIT`` setting.

    Examples:
        >>> multibyte_entities("caf\u00e9")
        'caf&#xe9;'
        >>> multibyte_entities("caf\u00e9 & co", entity=True)
        'caf&eacute; &amp; co'
    """
    if chunk_limit is None:
        limit = settings_from_env().chunk_limit
    else:
        limit = clamp_chunk_limit(chunk_limit)
    return _transcode(value, entity, limit)


__all__ = ["encode_named_entities", "multibyte_entities"]
