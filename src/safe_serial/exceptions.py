"""
Exception classes for safe-serial.

Decode problems never escape the public decode helpers; DecodeError is
raised by the structural step and converted into a failure result there.
Each exception can be turned into a ``CodecError`` record with ``to_error``.
"""

from typing import Any, Dict, Optional

from safe_serial.schemas.errors import CodecError, ErrorCode, ErrorSource, make_error


class SanitizerError(Exception):
    """Base exception for all safe-serial errors."""

    code: ErrorCode
    source: ErrorSource
    message: str

    def to_error(self, details: Optional[Dict[str, Any]] = None) -> CodecError:
        return make_error(self.code, self.source, self.message, details)


class DecodeError(SanitizerError):
    """Serialized text could not be rebuilt into a value."""

    code = ErrorCode.DECODE_FAILURE
    source = ErrorSource.DECODER

    def __init__(self, text: str, message: str):
        self.text = text
        self.message = message
        super().__init__(f"Cannot unserialize value: {message}")


class EncodeError(SanitizerError):
    """A compound value holds something the serializer cannot represent."""

    code = ErrorCode.ENCODE_FAILURE
    source = ErrorSource.ENCODER

    def __init__(self, value_type: str, message: str):
        self.value_type = value_type
        self.message = message
        super().__init__(f"Cannot serialize {value_type}: {message}")

    def to_error(self, details: Optional[Dict[str, Any]] = None) -> CodecError:
        return super().to_error({"value_type": self.value_type, **(details or {})})


class SettingsLoadError(SanitizerError):
    """Error loading a settings file."""

    code = ErrorCode.SETTINGS
    source = ErrorSource.SETTINGS

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        self.message = message
        super().__init__(f"Error loading {file_name}: {message}")

    def to_error(self, details: Optional[Dict[str, Any]] = None) -> CodecError:
        return super().to_error({"file_name": self.file_name, **(details or {})})
