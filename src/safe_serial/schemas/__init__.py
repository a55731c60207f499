"""Schema exports."""

from .base import SchemaBase, Severity
from .codec import ClassificationMode, DecodeFailure, DecodeResult, DecodeStatus
from .errors import CodecError, ErrorCode, ErrorSource, make_error

__all__ = [
    "SchemaBase",
    "Severity",
    "ClassificationMode",
    "DecodeFailure",
    "DecodeResult",
    "DecodeStatus",
    "CodecError",
    "ErrorCode",
    "ErrorSource",
    "make_error",
]
