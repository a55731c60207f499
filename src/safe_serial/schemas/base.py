"""Common schema utilities and base classes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SchemaBase(BaseModel):
    """Base model with common config for safe-serial schemas.

    String fields are kept byte-for-byte, so unlike most config models no
    whitespace stripping is applied here.
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
