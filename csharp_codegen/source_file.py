"""C# source files."""

from collections.abc import Iterable
from dataclasses import dataclass

from csharp_codegen.class_type import ClassType
from csharp_codegen.comment import Comment, DocComment
from csharp_codegen.indent import indent
from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.validation import (
    elements_of,
    optional_element,
    require_text,
    unique_texts,
)


@dataclass(frozen=True)
class SourceFile:
    """A file holding one namespace, its usings and its classes."""

    namespace: str
    usings: Iterable[str] = ()
    classes: Iterable[ClassType] = ()
    header: Comment | DocComment | None = None

    def __post_init__(self) -> None:
        require_text(self.namespace, "namespace", "File")
        object.__setattr__(self, "usings", unique_texts(self.usings, "using", "File"))
        object.__setattr__(
            self, "classes", elements_of(self.classes, ClassType, "classes", "File")
        )
        optional_element(self.header, (Comment, DocComment), "header", "File")

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the file contents, without a trailing newline."""
        nl = options.newline
        parts = []
        if self.header is not None:
            header = self.header.render(options)
            if header:
                parts += [header, ""]

        parts += [f"namespace {self.namespace}", "{"]

        sections = []
        if self.usings:
            sections.append(nl.join(f"using {u};" for u in self.usings))
        if self.classes:
            sections.append((nl * 2).join(c.render(options) for c in self.classes))
        if sections:
            body = (nl * 2).join(sections)
            parts.append(indent(body, 1, options.indent_token, nl))

        parts.append("}")
        return nl.join(parts)

    def __str__(self) -> str:
        return self.render()
