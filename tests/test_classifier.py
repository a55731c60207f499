"""Tests for serialized-text detection."""

import pytest

from safe_serial.classifier import classify, is_grammar_text, trim
from safe_serial.schemas import ClassificationMode

STRICT = ClassificationMode.STRICT
LENIENT = ClassificationMode.LENIENT


class TestBlankAndNonString:
    """Non-strings and blank strings are never serialized text."""

    @pytest.mark.parametrize("text", ["", " ", "\t\n", "\r\n\x0b", "\0", "   \0  "])
    @pytest.mark.parametrize("mode", [STRICT, LENIENT])
    def test_blank(self, text, mode):
        assert classify(text, mode) is False

    @pytest.mark.parametrize("value", [None, 42, 1.5, True, b"i:1;", ["i:1;"], {"a": 1}])
    def test_non_string(self, value):
        assert is_grammar_text(value) is False
        assert is_grammar_text(value, strict=False) is False


class TestLiterals:
    """Null and boolean literals are accepted in both modes."""

    @pytest.mark.parametrize("text", ["N;", "b:0;", "b:1;", "  N;\n"])
    @pytest.mark.parametrize("strict", [True, False])
    def test_literal(self, text, strict):
        assert is_grammar_text(text, strict) is True

    def test_other_boolean_digit_is_not_literal(self):
        assert is_grammar_text("b:2;") is False

    def test_short_and_missing_colon(self):
        assert is_grammar_text("i:;") is False
        assert is_grammar_text("i;42;") is False
        assert is_grammar_text("N") is False


class TestStrict:
    """Strict mode requires the text to end on a terminator."""

    @pytest.mark.parametrize(
        "text",
        [
            "i:42;",
            "i:-7;",
            "d:0.5;",
            "d:1.0E+25;",
            "d:-1.5E-3;",
            's:5:"hello";',
            's:0:"";',
            'a:2:{i:0;s:1:"a";i:1;i:3;}',
            "a:0:{}",
            'O:8:"stdClass":1:{s:1:"a";i:1;}',
        ],
    )
    def test_accepts(self, text):
        assert is_grammar_text(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "i:42",
            's:5:"hello"',
            "i:42;junk",
            "i:4x2;",
            "x:42;",
            "s:5:hello;",
            "a:x:{}",
            "O:stdClass:{}",
            "not serialized",
        ],
    )
    def test_rejects(self, text):
        assert is_grammar_text(text) is False

    def test_whitespace_is_trimmed_first(self):
        assert is_grammar_text('  s:5:"hello";\n') is True

    def test_nested_content_is_not_walked(self):
        # Declared count does not match; detection still accepts it.
        assert is_grammar_text('a:5:{i:0;s:1:"x";}') is True


class TestLenient:
    """Lenient mode accepts a terminator anywhere past the prefix."""

    def test_trailing_garbage_after_integer(self):
        assert is_grammar_text("i:42;trailing", strict=False) is True
        assert is_grammar_text("i:42;trailing", strict=True) is False

    def test_terminator_still_required(self):
        assert is_grammar_text("i:42", strict=False) is False

    def test_string_needs_quote_anywhere(self):
        assert is_grammar_text('s:5:"hello"; ', strict=False) is True
        assert is_grammar_text('s:5:"hello";xx', strict=False) is True
        assert is_grammar_text("s:5:hello;", strict=False) is False

    def test_semicolon_too_early(self):
        # ';' at offset 2 sits inside the prefix
        assert classify("i:;5;", LENIENT) is False

    def test_brace_too_early(self):
        assert classify("a:}0:{", LENIENT) is False

    def test_minimal_offsets_accepted(self):
        assert classify("i:1;", LENIENT) is True
        assert classify("a:0:{}", LENIENT) is True

    def test_brace_only_terminator(self):
        assert classify("a:1:{}junk", LENIENT) is True
        assert classify("a:1:{}junk", STRICT) is False


class TestModeCoercion:
    """Modes can be given as enum members, flags or names."""

    def test_bool_flag(self):
        assert ClassificationMode.coerce(True) is STRICT
        assert ClassificationMode.coerce(False) is LENIENT

    def test_name(self):
        assert ClassificationMode.coerce("Lenient") is LENIENT
        assert classify("i:42;x", "lenient") is True

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            ClassificationMode.coerce("loose")


def test_trim_keeps_unicode_spaces():
    assert trim("\u00a0i:1;\u00a0") == "\u00a0i:1;\u00a0"
    assert trim(" \0i:1;\x0b") == "i:1;"


def test_classification_is_repeatable():
    text = 's:3:"abc";'
    results = {classify(text, STRICT) for _ in range(5)}
    assert results == {True}
