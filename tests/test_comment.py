"""Tests for plain and documentation comments."""

import pytest

from csharp_codegen.comment import Comment, DocComment
from csharp_codegen.errors import ValidationError
from csharp_codegen.render_options import RenderOptions


def test_comment_prefixes_lines() -> None:
    """Verify every line of a comment is prefixed."""
    assert Comment("hello\nworld").render() == "// hello\n// world"


def test_comment_skips_leading_blank_lines() -> None:
    """Verify leading blank lines are not rendered."""
    assert Comment("\n  \nhello").render() == "// hello"


def test_comment_interior_blank_line() -> None:
    """Verify blank lines inside a comment keep the bare prefix."""
    assert Comment("a\n\nb").render() == "// a\n//\n// b"


def test_comment_empty() -> None:
    """Verify empty and whitespace-only comments render nothing."""
    assert Comment().render() == ""
    assert Comment("   ").render() == ""


def test_doc_comment_summary() -> None:
    """Verify the summary is wrapped in a summary element."""
    doc = DocComment(summary="Adds numbers.")
    assert doc.render() == "/// <summary>\n/// Adds numbers.\n/// </summary>"


def test_doc_comment_summary_and_notes() -> None:
    """Verify raw notes follow the summary."""
    doc = DocComment(summary="S", raw_notes="<returns>x</returns>")
    assert doc.render() == (
        "/// <summary>\n/// S\n/// </summary>\n/// <returns>x</returns>"
    )


def test_doc_comment_notes_only() -> None:
    """Verify raw notes render without a summary element."""
    assert DocComment(raw_notes="<remarks>r</remarks>").render() == (
        "/// <remarks>r</remarks>"
    )


def test_doc_comment_absent_parts() -> None:
    """Verify a comment without content renders as empty text."""
    assert DocComment().render() == ""
    assert str(DocComment()) == ""


def test_doc_comment_rejects_empty_fields() -> None:
    """Verify explicitly empty fields are rejected."""
    with pytest.raises(ValidationError):
        DocComment(summary="")
    with pytest.raises(ValidationError):
        DocComment(raw_notes="  ")


def test_doc_comment_with_leading_notes() -> None:
    """Verify lines are placed before the existing notes."""
    doc = DocComment(summary="S", raw_notes="<returns>r</returns>")
    updated = doc.with_leading_notes(['<param name="a">A</param>'])
    assert updated.raw_notes == '<param name="a">A</param>\n<returns>r</returns>'
    assert updated.summary == "S"
    assert doc.raw_notes == "<returns>r</returns>"
    assert doc.with_leading_notes([]) is doc


def test_doc_comment_from_documentation() -> None:
    """Verify looked up XML becomes raw notes."""
    assert DocComment.from_documentation(None) is None
    assert DocComment.from_documentation("  ") is None
    doc = DocComment.from_documentation("<summary>\nA widget.\n</summary>")
    assert doc is not None
    assert doc.render() == "/// <summary>\n/// A widget.\n/// </summary>"


def test_doc_comment_custom_prefix() -> None:
    """Verify the prefix and newline come from the render options."""
    options = RenderOptions(doc_comment_prefix="///", newline="\r\n")
    assert DocComment(summary="S").render(options) == (
        "///<summary>\r\n///S\r\n///</summary>"
    )


def test_comment_rejects_non_text() -> None:
    """Verify comment text must be a string."""
    with pytest.raises(ValidationError, match="text"):
        Comment(5)  # type: ignore[arg-type]
    assert Comment(None).render() == ""  # type: ignore[arg-type]
