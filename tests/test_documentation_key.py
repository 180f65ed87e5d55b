"""Tests for documentation keys."""

import pytest

from csharp_codegen.documentation_key import documentation_key
from csharp_codegen.errors import ValidationError
from csharp_codegen.type_descriptor import TypeDescriptor

WIDGET = TypeDescriptor("Widget", "Acme", (TypeDescriptor("T"),))


def test_type_key() -> None:
    """Verify type keys drop generic arguments."""
    assert documentation_key("type", WIDGET) == "T:Acme.Widget"
    assert documentation_key("T", "Acme.Widget") == "T:Acme.Widget"


def test_member_keys() -> None:
    """Verify method and property keys."""
    assert documentation_key("method", WIDGET, "Resize") == "M:Acme.Widget.Resize"
    assert documentation_key("property", WIDGET, "Name") == "P:Acme.Widget.Name"


def test_constructor_key() -> None:
    """Verify constructors default to the #ctor member name."""
    assert documentation_key("constructor", WIDGET) == "M:Acme.Widget.#ctor"


def test_key_validation() -> None:
    """Verify unknown kinds and missing members are rejected."""
    with pytest.raises(ValidationError):
        documentation_key("event", WIDGET, "Changed")
    with pytest.raises(ValidationError):
        documentation_key("method", WIDGET)
    with pytest.raises(ValidationError):
        documentation_key("type", WIDGET, "Resize")
