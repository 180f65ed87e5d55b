"""Plain and documentation comments."""

from collections.abc import Iterable
from dataclasses import dataclass

from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.validation import optional_text, plain_text


def render_comment_text(text: str, prefix: str, newline: str = "\n") -> str:
    """Prefix each line of a comment, skipping leading blank lines.

    Blank lines in the middle of the text get the bare prefix so that the
    comment block stays contiguous.
    """
    if not text.strip():
        return ""

    lines = text.rstrip().splitlines()
    start = 0
    while not lines[start].strip():
        start += 1

    bare_prefix = prefix.rstrip()
    return newline.join(
        prefix + line if line.strip() else bare_prefix for line in lines[start:]
    )


@dataclass(frozen=True)
class Comment:
    """A '//' comment, e.g. a file header."""

    text: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", plain_text(self.text, "text", "Comment"))

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the comment, one prefixed line per line of text."""
        return render_comment_text(self.text, options.comment_prefix, options.newline)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class DocComment:
    """A '///' XML documentation comment.

    ``summary`` goes inside a ``<summary>`` element. ``raw_notes`` is any
    other XML (``<param>``, ``<returns>``, ``<remarks>`` ...) and is emitted
    as is after the summary.
    """

    summary: str | None = None
    raw_notes: str | None = None

    def __post_init__(self) -> None:
        optional_text(self.summary, "summary", "Documentation comment")
        optional_text(self.raw_notes, "raw notes", "Documentation comment")

    @classmethod
    def from_documentation(cls, text: str | None) -> "DocComment | None":
        """Wrap XML looked up from a documentation file, if any was found."""
        if text is None or not text.strip():
            return None
        return cls(raw_notes=text)

    @property
    def text(self) -> str:
        """The comment's XML before line prefixes are added."""
        parts = []
        if self.summary is not None:
            parts += ["<summary>", self.summary, "</summary>"]
        if self.raw_notes is not None:
            parts.append(self.raw_notes)
        return "\n".join(parts)

    def with_leading_notes(self, lines: Iterable[str]) -> "DocComment":
        """Return a copy with the given lines placed before the raw notes."""
        notes = [line for line in lines if line]
        if not notes:
            return self
        if self.raw_notes is not None:
            notes.append(self.raw_notes)
        return DocComment(summary=self.summary, raw_notes="\n".join(notes))

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the comment with the documentation prefix on every line."""
        return render_comment_text(
            self.text, options.doc_comment_prefix, options.newline
        )

    def __str__(self) -> str:
        return self.render()
