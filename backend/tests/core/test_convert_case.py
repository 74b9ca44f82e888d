"""Case conversion tests — pure tests for the tokenizer and the three emitters.

Tests cover:
    - Documented examples for kebab, camel and dot
    - Kebab punctuation folding, camel-boundary insertion, separator collapsing
    - Camel/dot tokenization of mixed separators and empty-after-trim input
    - Character-set asymmetry between the kebab and camel/dot paths
    - Re-applying an emitter to its own output
    - convert_case dispatch by CasingPolicy and by style name
"""

import pytest

from wordcase.core.convert_case import (
    convert_case,
    resolve_policy,
    split_words,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
)
from wordcase.core.domain_types import CasingPolicy
from wordcase.core.errors import (
    InvalidCharactersError,
    NotAStringError,
    NullOrUndefinedInputError,
    UnsupportedCasingError,
)


# ─── split_words ─────────────────────────────────────────────────

def test_split_words_handles_mixed_separators():
    assert split_words("  my-name_is  Bob ") == ["my", "name", "is", "Bob"]


def test_split_words_keeps_order_and_case():
    assert split_words("Zeta alpha") == ["Zeta", "alpha"]


def test_split_words_drops_empty_segments():
    assert split_words("--a__b--") == ["a", "b"]


def test_split_words_on_separators_only_is_empty():
    assert split_words(" -_ ") == []
    assert split_words("") == []


# ─── to_kebab_case ───────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("HelloWorld", "hello-world"),
    ("  Hello World  ", "hello-world"),
    ("hello.world", "hello-world"),
    ("hello-World", "hello-world"),
])
def test_kebab_documented_examples(raw, expected):
    assert to_kebab_case(raw) == expected


def test_kebab_folds_en_and_em_dashes():
    assert to_kebab_case("hello–world") == "hello-world"
    assert to_kebab_case("hello — world") == "hello-world"


def test_kebab_splits_every_camel_boundary():
    assert to_kebab_case("helloWorldFooBar") == "hello-world-foo-bar"


def test_kebab_does_not_split_uppercase_runs():
    assert to_kebab_case("XMLHttp") == "xmlhttp"


def test_kebab_collapses_mixed_separator_runs():
    assert to_kebab_case("hello . - \t world") == "hello-world"


def test_kebab_keeps_edge_hyphen_from_punctuation():
    assert to_kebab_case("-hello") == "-hello"
    assert to_kebab_case("hello.") == "hello-"


def test_kebab_empty_and_blank_input_yield_empty_string():
    assert to_kebab_case("") == ""
    assert to_kebab_case("   ") == ""


@pytest.mark.parametrize("raw", ["hello_world", "hello1", "hello!", "héllo"])
def test_kebab_rejects_characters_outside_its_set(raw):
    with pytest.raises(InvalidCharactersError):
        to_kebab_case(raw)


@pytest.mark.parametrize("raw", [
    "hello world", "Hello   World", "a b", "One Two", "hello",
])
def test_kebab_output_is_lowercase_with_single_hyphens(raw):
    result = to_kebab_case(raw)
    assert result == result.lower()
    assert "--" not in result
    assert not result.startswith("-") and not result.endswith("-")
    assert set(result) <= set("abcdefghijklmnopqrstuvwxyz-")


# ─── to_camel_case ───────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["my name", "my-name", "my_name"])
def test_camel_documented_examples(raw):
    assert to_camel_case(raw) == "myName"


def test_camel_lowercases_first_word_and_capitalizes_the_rest():
    assert to_camel_case("MY NAME IS") == "myNameIs"


def test_camel_handles_duplicate_and_edge_separators():
    assert to_camel_case("  __my--name__x  ") == "myNameX"


def test_camel_single_word():
    assert to_camel_case("Hello") == "hello"


def test_camel_blank_input_yields_empty_string():
    assert to_camel_case("   ") == ""
    assert to_camel_case("-_-") == ""


def test_camel_accepts_trailing_newline():
    assert to_camel_case("my name\n") == "myName"


@pytest.mark.parametrize("raw", ["13243", "my.name", "my name!", "", "my–name"])
def test_camel_rejects_characters_outside_its_set(raw):
    with pytest.raises(InvalidCharactersError):
        to_camel_case(raw)


# ─── to_dot_case ─────────────────────────────────────────────────

@pytest.mark.parametrize("raw, expected", [
    ("my name", "my.name"),
    ("My_Name", "my.name"),
    ("my-name", "my.name"),
    ("A  B__C", "a.b.c"),
])
def test_dot_examples(raw, expected):
    assert to_dot_case(raw) == expected


def test_dot_blank_input_yields_empty_string():
    assert to_dot_case("  ") == ""


@pytest.mark.parametrize("raw", ["13243", "my.name", ""])
def test_dot_rejects_characters_outside_its_set(raw):
    with pytest.raises(InvalidCharactersError):
        to_dot_case(raw)


# ─── Re-applying an emitter ──────────────────────────────────────

@pytest.mark.parametrize("raw", [
    "HelloWorld", "  Hello World  ", "hello.world", "a—b–c", "-edge",
])
def test_kebab_is_stable_on_its_own_output(raw):
    once = to_kebab_case(raw)
    assert to_kebab_case(once) == once


def test_dot_output_with_periods_is_not_valid_dot_input():
    with pytest.raises(InvalidCharactersError):
        to_dot_case(to_dot_case("my name"))


def test_single_word_outputs_are_stable():
    assert to_dot_case(to_dot_case("Hello")) == "hello"
    assert to_camel_case(to_camel_case("Hello")) == "hello"


def test_camel_output_is_read_back_as_one_word():
    assert to_camel_case(to_camel_case("my name")) == "myname"


# ─── Type gate ───────────────────────────────────────────────────

@pytest.mark.parametrize("convert", [to_kebab_case, to_camel_case, to_dot_case])
def test_none_input_raises_null_error(convert):
    with pytest.raises(NullOrUndefinedInputError):
        convert(None)


@pytest.mark.parametrize("convert", [to_kebab_case, to_camel_case, to_dot_case])
@pytest.mark.parametrize("value", [42, b"bytes", ["my", "name"], 3.5])
def test_non_string_input_raises_not_a_string(convert, value):
    with pytest.raises(NotAStringError):
        convert(value)


# ─── convert_case ────────────────────────────────────────────────

@pytest.mark.parametrize("style, expected", [
    (CasingPolicy.KEBAB, "my-name"),
    (CasingPolicy.CAMEL, "myName"),
    (CasingPolicy.DOT, "my.name"),
    ("kebab", "my-name"),
    ("camel", "myName"),
    ("dot", "my.name"),
])
def test_convert_case_dispatches_by_style(style, expected):
    assert convert_case("my name", style) == expected


@pytest.mark.parametrize("style", ["snake", "KEBAB", ""])
def test_convert_case_rejects_unknown_style(style):
    with pytest.raises(UnsupportedCasingError) as exc_info:
        convert_case("my name", style)
    assert exc_info.value.style == style


def test_resolve_policy_returns_enum_member():
    assert resolve_policy("dot") is CasingPolicy.DOT
    assert resolve_policy(CasingPolicy.CAMEL) is CasingPolicy.CAMEL
