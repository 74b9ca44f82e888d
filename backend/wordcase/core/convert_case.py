"""Case Conversion — tokenizer and the kebab, camel and dot emitters.

Invariants:
    - Every function is PURE: no IO, no shared state, linear in input length
    - split_words never yields an empty token; order follows the source string
    - Kebab steps run in a fixed order: punctuation → hyphen, camel boundary,
      collapse separators, lower-case
    - Empty token list → "" (camel/dot never fail after validation passes)

Design Decisions:
    - Kebab works on the whole string, not on tokens: it must see "helloWorld"
      before lower-casing erases the boundary
    - convert_case dispatches through a table keyed by CasingPolicy so adding a
      style is one entry, not another if-branch
"""

import re
from typing import Any, Callable

from wordcase.core.domain_types import CasingPolicy
from wordcase.core.errors import UnsupportedCasingError
from wordcase.core.validate_input import validate_kebab_input, validate_word_input

_DASH_PUNCTUATION = re.compile(r"[.–—]")
_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEPARATORS = re.compile(r"[\s\-]+")
_WORD_SEPARATORS = re.compile(r"[\s\-_]+")


def split_words(text: str) -> list[str]:
    """Tokenizer: trim, split on runs of whitespace/-/_, drop empty segments."""
    return [word for word in _WORD_SEPARATORS.split(text.strip()) if word]


def to_kebab_case(value: Any) -> str:
    """Convert a phrase to kebab-case.

    >>> to_kebab_case("HelloWorld")
    'hello-world'
    >>> to_kebab_case("  Hello World  ")
    'hello-world'
    >>> to_kebab_case("hello.world")
    'hello-world'
    """
    text = validate_kebab_input(value)
    text = _DASH_PUNCTUATION.sub("-", text)
    text = _CAMEL_BOUNDARY.sub(r"\1-\2", text)
    text = _KEBAB_SEPARATORS.sub("-", text)
    return text.lower()


def to_camel_case(value: Any) -> str:
    """Convert a phrase to camelCase.

    >>> to_camel_case("my_name")
    'myName'
    """
    words = split_words(validate_word_input(value))
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(
        word[0].upper() + word[1:].lower() for word in tail
    )


def to_dot_case(value: Any) -> str:
    """Convert a phrase to dot.case.

    >>> to_dot_case("My_Name")
    'my.name'
    """
    words = split_words(validate_word_input(value))
    return ".".join(word.lower() for word in words)


_EMITTERS: dict[CasingPolicy, Callable[[Any], str]] = {
    CasingPolicy.KEBAB: to_kebab_case,
    CasingPolicy.CAMEL: to_camel_case,
    CasingPolicy.DOT: to_dot_case,
}


def resolve_policy(style: CasingPolicy | str) -> CasingPolicy:
    """Map a style name onto CasingPolicy or raise UnsupportedCasingError."""
    try:
        return CasingPolicy(style)
    except ValueError:
        raise UnsupportedCasingError(str(style)) from None


def convert_case(value: Any, style: CasingPolicy | str) -> str:
    """Convert value with the emitter registered for style."""
    return _EMITTERS[resolve_policy(style)](value)
