"""safe-serial package root.

Detects PHP ``serialize()`` text and wraps unserialize/serialize so that
values stored in text columns round-trip without ambiguity. Path and entity
helpers live in ``safe_serial.utils``.
"""

__version__ = "0.1.0"

from safe_serial.classifier import classify, is_grammar_text  # noqa: F401
from safe_serial.codec import safe_decode, safe_encode, try_decode  # noqa: F401
from safe_serial.exceptions import (  # noqa: F401
    DecodeError,
    EncodeError,
    SanitizerError,
    SettingsLoadError,
)
from safe_serial.schemas import *  # noqa: F401,F403
from safe_serial.schemas import __all__ as SCHEMA_EXPORTS

__all__ = [
    "__version__",
    "classify",
    "is_grammar_text",
    "safe_decode",
    "safe_encode",
    "try_decode",
    "SanitizerError",
    "DecodeError",
    "EncodeError",
    "SettingsLoadError",
] + SCHEMA_EXPORTS
