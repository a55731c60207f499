"""String utilities shipped alongside the serialization helpers."""

from .entities import (
    encode_named_entities,
    multibyte_entities,
)

from .paths import (
    fix_directory_separator,
    is_absolute_path,
    normalize_path,
)

__all__ = [
    # Entity transcoding
    "encode_named_entities",
    "multibyte_entities",
    # Path normalization
    "fix_directory_separator",
    "is_absolute_path",
    "normalize_path",
]
