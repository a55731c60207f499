"""Codec error records."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field

from .base import SchemaBase, Severity


class ErrorCode(str, Enum):
    DECODE_FAILURE = "decode_failure"
    ENCODE_FAILURE = "encode_failure"
    SETTINGS = "settings"


class ErrorSource(str, Enum):
    DECODER = "decoder"
    ENCODER = "encoder"
    SETTINGS = "settings"


class CodecError(SchemaBase):
    code: ErrorCode
    message: str
    source: ErrorSource
    severity: Severity = Field(default=Severity.ERROR)
    details: Dict[str, Any] = Field(default_factory=dict)


def make_error(
    code: ErrorCode,
    source: ErrorSource,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> CodecError:
    return CodecError(
        code=code,
        message=message,
        source=source,
        severity=Severity.ERROR,
        details=dict(details or {}),
    )
