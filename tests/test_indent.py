"""Tests for the indentation utilities."""

import pytest

from csharp_codegen.errors import ValidationError
from csharp_codegen.indent import indent
from csharp_codegen.indent_prefix import indent_prefix


def test_indent_prefix_levels() -> None:
    """Verify the prefix is the token repeated per level."""
    assert indent_prefix(0) == ""
    assert indent_prefix(1) == "    "
    assert indent_prefix(3, "-") == "---"


def test_indent_prefix_negative_level() -> None:
    """Verify that a negative level is rejected."""
    with pytest.raises(ValidationError):
        indent_prefix(-1)


def test_indent_basic() -> None:
    """Verify every line gets one level of indentation."""
    assert indent("a\nb") == "    a\n    b"
    assert indent("a\nb", 2, "\t") == "\t\ta\n\t\tb"


def test_indent_keeps_blank_lines_empty() -> None:
    """Verify embedded blank lines do not receive trailing whitespace."""
    assert indent("a\n\nb") == "    a\n\n    b"


def test_indent_empty_text() -> None:
    """Verify that indenting nothing yields nothing."""
    assert indent("", 3, "\t") == ""


def test_indent_level_zero_is_identity() -> None:
    """Verify level 0 returns the text unchanged, newlines included."""
    text = "a\r\n  b\n\nc\n"
    assert indent(text, 0, "\t") == text
    assert indent(text, 0, "    ") == text


def test_indent_normalizes_newlines() -> None:
    """Verify any line boundary is accepted and rejoined with the separator."""
    assert indent("a\r\nb\rc", 1, "  ") == "  a\n  b\n  c"
    assert indent("a\nb", 1, "  ", newline="\r\n") == "  a\r\n  b"


def test_indent_is_not_idempotent() -> None:
    """Verify that indenting twice indents twice."""
    assert indent(indent("x")) == "        x"


def test_indent_negative_level() -> None:
    """Verify that indent rejects a negative level."""
    with pytest.raises(ValidationError):
        indent("x", -2)
