"""Input Validation — type and character-set checks run before any conversion.

Invariants:
    - None → NullOrUndefinedInputError, non-str → NotAStringError (checked in that order)
    - Kebab path checks the TRIMMED string against letters/whitespace/-/./en dash/em dash
    - Camel/dot path checks the UNTRIMMED string, whole-string match against
      letters/whitespace/-/_ with at least one character
    - The two character sets are kept separate: merging them changes accepted input

Design Decisions:
    - Explicit isinstance check at the boundary instead of duck typing: a bytes or int
      input fails loudly instead of being coerced
    - Validators return the validated str so callers never touch the raw value again
"""

import re
from typing import Any

from wordcase.core.errors import (
    InvalidCharactersError,
    NotAStringError,
    NullOrUndefinedInputError,
)

_KEBAB_FORBIDDEN = re.compile(r"[^a-zA-Z\s\-.–—]")
_WORD_SEPARATED = re.compile(r"[a-zA-Z\s\-_]+")

KEBAB_ALLOWED = "alphabetical characters, spaces, hyphens, dots, and dashes"
WORDS_ALLOWED = "alphabetical characters, spaces, hyphens, or underscores"


def require_string(value: Any) -> str:
    """Type gate shared by every conversion path."""
    if value is None:
        raise NullOrUndefinedInputError()
    if not isinstance(value, str):
        raise NotAStringError(type(value).__name__)
    return value


def validate_kebab_input(value: Any) -> str:
    """Return the trimmed input if it may be converted to kebab-case."""
    trimmed = require_string(value).strip()
    if _KEBAB_FORBIDDEN.search(trimmed):
        raise InvalidCharactersError(KEBAB_ALLOWED)
    return trimmed


def validate_word_input(value: Any) -> str:
    """Return the untouched input if it may be converted to camelCase or dot.case."""
    text = require_string(value)
    if not _WORD_SEPARATED.fullmatch(text):
        raise InvalidCharactersError(WORDS_ALLOWED)
    return text
