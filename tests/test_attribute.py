"""Tests for attributes."""

import pytest

from csharp_codegen.attribute import Attribute
from csharp_codegen.errors import ValidationError
from csharp_codegen.render_options import RenderOptions


def test_attribute_without_arguments() -> None:
    """Verify an attribute without arguments has no parentheses."""
    assert Attribute("Serializable").render() == "[Serializable]"


def test_attribute_suffix_is_stripped() -> None:
    """Verify the conventional suffix is not rendered."""
    assert Attribute("SerializableAttribute").render() == "[Serializable]"
    assert Attribute("Attribute").render() == "[Attribute]"


def test_attribute_custom_suffix() -> None:
    """Verify the suffix comes from the render options."""
    attribute = Attribute("SerializableAttribute")
    assert attribute.render(RenderOptions(attribute_suffix="")) == (
        "[SerializableAttribute]"
    )


def test_attribute_arguments_inline() -> None:
    """Verify arguments are joined on one line."""
    attribute = Attribute("JsonProperty", ['"id"', "Required = Required.Always"])
    assert attribute.render() == '[JsonProperty("id", Required = Required.Always)]'


def test_attribute_single_string_argument() -> None:
    """Verify a lone string is treated as one argument."""
    assert Attribute("Obsolete", '"Use Bar"').render() == '[Obsolete("Use Bar")]'


def test_attribute_arguments_multi_line() -> None:
    """Verify each argument goes on its own indented line when requested."""
    attribute = Attribute(
        "DataMember", ['Name = "x"', "Order = 1"], multi_line_arguments=True
    )
    assert attribute.render() == '[DataMember(\n    Name = "x",\n    Order = 1\n)]'


def test_attribute_multi_line_duplicate_arguments() -> None:
    """Verify repeated arguments all receive their separators."""
    attribute = Attribute("X", ["a", "a"], multi_line_arguments=True)
    assert attribute.render() == "[X(\n    a,\n    a\n)]"


def test_attribute_rejects_blank_name() -> None:
    """Verify that an attribute needs a name."""
    with pytest.raises(ValidationError):
        Attribute("  ")


def test_attribute_rejects_non_text_arguments() -> None:
    """Verify arguments must be code strings."""
    with pytest.raises(ValidationError, match="argument"):
        Attribute("Range", [1, 10])  # type: ignore[list-item]
    with pytest.raises(ValidationError):
        Attribute("Range", ["1", ""])
