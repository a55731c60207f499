"""Classification modes and decode results."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union

from pydantic import ConfigDict, Field

from .base import SchemaBase
from .errors import CodecError


class ClassificationMode(str, Enum):
    """Rule set used when deciding whether a string is serialized text.

    STRICT requires the text to end on a terminator (``;`` or ``}``).
    LENIENT only requires a terminator somewhere past the type/length prefix
    and tolerates trailing garbage.
    """

    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def coerce(cls, value: Union["ClassificationMode", bool, str]) -> "ClassificationMode":
        """Accept a mode, a ``strict`` flag, or a mode name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.STRICT if value else cls.LENIENT
        return cls(str(value).lower())


class DecodeStatus(str, Enum):
    DECODED = "decoded"
    PASSTHROUGH = "passthrough"
    FAILED = "failed"


class DecodeResult(SchemaBase):
    """Outcome of a guarded decode.

    ``value`` holds the decoded value for DECODED, the untouched input for
    PASSTHROUGH and None for FAILED, in which case ``error`` is set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: DecodeStatus
    value: Any = Field(default=None)
    error: Optional[CodecError] = Field(default=None)

    @property
    def ok(self) -> bool:
        return self.status is not DecodeStatus.FAILED


class DecodeFailure(SchemaBase):
    """Sentinel returned by ``safe_decode`` when text could not be rebuilt.

    Always falsy so callers can write ``if not value``, but distinguishable
    from a decoded ``False`` with ``isinstance``.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    error: CodecError

    def __bool__(self) -> bool:
        return False
