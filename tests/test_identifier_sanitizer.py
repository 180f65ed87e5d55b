"""Tests for identifier sanitization."""

import pytest

from csharp_codegen.errors import SanitizationError
from csharp_codegen.identifier_sanitizer import (
    IdentifierSanitizer,
    sanitize_identifier,
)


def test_sanitize_plain_identifier() -> None:
    """Verify valid identifiers pass through unchanged."""
    assert sanitize_identifier("count") == "count"
    assert sanitize_identifier("_value2") == "_value2"


def test_sanitize_keyword() -> None:
    """Verify reserved keywords are escaped with '@'."""
    assert sanitize_identifier("class") == "@class"
    assert sanitize_identifier("namespace") == "@namespace"


def test_sanitize_already_escaped() -> None:
    """Verify escaped identifiers are accepted as given."""
    assert sanitize_identifier("@class") == "@class"


def test_sanitize_invalid_characters() -> None:
    """Verify names with illegal characters are rejected."""
    for name in ("my-name", "1st", "a b", "", "@"):
        with pytest.raises(SanitizationError):
            sanitize_identifier(name)


def test_sanitizer_extra_keywords() -> None:
    """Verify additional keywords are escaped too."""
    sanitizer = IdentifierSanitizer(extra_keywords=["record"])
    assert not sanitizer.is_valid_identifier("record")
    assert sanitizer.sanitize("record") == "@record"
    assert sanitize_identifier("record") == "record"
