"""Tests for XML documentation lookup."""

from csharp_codegen.comment import DocComment
from csharp_codegen.xml_documentation import XmlDocumentation

DOC_XML = """<?xml version="1.0"?>
<doc>
    <assembly>
        <name>Acme</name>
    </assembly>
    <members>
        <member name="T:Acme.Widget">
            <summary>
            A widget.
            </summary>
        </member>
        <member name="M:Acme.Widget.Resize(System.Int32)">
            <summary>
            Resizes the widget.
            </summary>
            <param name="size">New size.</param>
        </member>
        <member name="M:Acme.Widget.Render">
            <summary>Uses <see cref="T:Acme.Canvas"/> to draw.</summary>
        </member>
        <member name="P:Acme.Widget.Name">
        </member>
    </members>
</doc>
"""


def test_lookup_type() -> None:
    """Verify type documentation is found and dedented."""
    docs = XmlDocumentation.from_string(DOC_XML)
    assert docs.lookup("T:Acme.Widget") == "<summary>\nA widget.\n</summary>"


def test_lookup_method_with_parameters() -> None:
    """Verify a key matches a member name followed by its parameter list."""
    docs = XmlDocumentation.from_string(DOC_XML)
    assert docs.lookup("M:Acme.Widget.Resize") == (
        "<summary>\n"
        "Resizes the widget.\n"
        "</summary>\n"
        '<param name="size">New size.</param>'
    )


def test_lookup_keeps_inner_elements() -> None:
    """Verify nested XML elements are kept in the text."""
    docs = XmlDocumentation.from_string(DOC_XML)
    text = docs.lookup("M:Acme.Widget.Render")
    assert text is not None
    assert text.startswith("<summary>Uses <see ")
    assert 'cref="T:Acme.Canvas"' in text
    assert text.endswith("to draw.</summary>")


def test_lookup_not_found() -> None:
    """Verify missing or partial keys yield None."""
    docs = XmlDocumentation.from_string(DOC_XML)
    assert docs.lookup("T:Acme.Gadget") is None
    assert docs.lookup("M:Acme.Widget.Res") is None


def test_lookup_blank_documentation() -> None:
    """Verify a member without text yields None."""
    docs = XmlDocumentation.from_string(DOC_XML)
    assert docs.lookup("P:Acme.Widget.Name") is None


def test_lookup_feeds_doc_comment() -> None:
    """Verify looked up text renders as a documentation comment."""
    docs = XmlDocumentation.from_string(DOC_XML)
    doc = DocComment.from_documentation(docs.lookup("T:Acme.Widget"))
    assert doc is not None
    assert doc.render() == "/// <summary>\n/// A widget.\n/// </summary>"


def test_from_file(tmp_path) -> None:
    """Verify documentation loads from a file."""
    path = tmp_path / "Acme.xml"
    path.write_text(DOC_XML, encoding="utf-8")
    docs = XmlDocumentation.from_file(path)
    assert len(docs) == 4
    assert docs.source == str(path)


def test_lookup_escapes_member_text() -> None:
    """Verify text directly inside a member keeps its XML escaping."""
    docs = XmlDocumentation.from_string(
        '<doc><members><member name="T:A">a &lt; b<see cref="x"/> &amp; c'
        "</member></members></doc>"
    )
    assert docs.lookup("T:A") == 'a &lt; b<see cref="x" /> &amp; c'
