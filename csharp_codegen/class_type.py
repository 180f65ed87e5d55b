"""C# classes."""

from collections.abc import Iterable
from dataclasses import dataclass

from csharp_codegen.access_modifier import AccessModifier
from csharp_codegen.attribute import Attribute
from csharp_codegen.comment import DocComment
from csharp_codegen.errors import ValidationError
from csharp_codegen.indent import indent
from csharp_codegen.method import Method
from csharp_codegen.property import Property
from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.validation import (
    elements_of,
    optional_element,
    optional_text,
    require_text,
    unique_texts,
)


@dataclass(frozen=True)
class ClassType:
    """A class with its properties, constructors and methods.

    Interfaces are deduplicated; their first occurrence decides the order in
    which they are listed after the base type.
    """

    name: str
    access: AccessModifier = AccessModifier.PUBLIC
    is_static: bool = False
    base_type: str | None = None
    interfaces: Iterable[str] = ()
    attributes: Iterable[Attribute] = ()
    properties: Iterable[Property] = ()
    constructors: Iterable[Method] = ()
    methods: Iterable[Method] = ()
    doc_comment: DocComment | None = None

    def __post_init__(self) -> None:
        require_text(self.name, "name", "Class")
        object.__setattr__(self, "access", AccessModifier.parse(self.access))
        optional_text(self.base_type, "base type", "Class")
        object.__setattr__(
            self, "interfaces", unique_texts(self.interfaces, "interface", "Class")
        )
        object.__setattr__(
            self,
            "attributes",
            elements_of(self.attributes, Attribute, "attributes", "Class"),
        )
        object.__setattr__(
            self,
            "properties",
            elements_of(self.properties, Property, "properties", "Class"),
        )
        constructors = elements_of(self.constructors, Method, "constructors", "Class")
        methods = elements_of(self.methods, Method, "methods", "Class")
        for constructor in constructors:
            if not constructor.is_constructor:
                raise ValidationError(
                    f"Class {self.name!r} constructor {constructor.name!r} "
                    "is a plain method"
                )
        for method in methods:
            if method.is_constructor:
                raise ValidationError(
                    f"Class {self.name!r} method {method.name!r} is a constructor"
                )
        object.__setattr__(self, "constructors", constructors)
        object.__setattr__(self, "methods", methods)
        optional_element(self.doc_comment, DocComment, "doc comment", "Class")

    def parents(self) -> tuple[str, ...]:
        """Return the base type followed by the interfaces."""
        if self.base_type is None:
            return self.interfaces
        return tuple(dict.fromkeys((self.base_type, *self.interfaces)))

    def declaration(self) -> str:
        """Return the line declaring the class and its parents."""
        words = [self.access.value]
        if self.is_static:
            words.append("static")
        words += ["class", self.name]
        line = " ".join(words)
        parents = self.parents()
        if parents:
            line += f" : {', '.join(parents)}"
        return line

    def render_body(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the members, without braces or indentation."""
        blank_line_separator = options.newline * 2
        sections = []
        if self.properties:
            sections.append(
                blank_line_separator.join(p.render(options) for p in self.properties)
            )
        members = (*self.constructors, *self.methods)
        if members:
            sections.append(
                blank_line_separator.join(m.render(options) for m in members)
            )
        return blank_line_separator.join(sections)

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render documentation, attributes, declaration and body."""
        parts = []
        if self.doc_comment is not None:
            doc = self.doc_comment.render(options)
            if doc:
                parts.append(doc)
        parts.extend(attribute.render(options) for attribute in self.attributes)
        parts.append(self.declaration())
        parts.append("{")
        body = self.render_body(options)
        if body:
            parts.append(indent(body, 1, options.indent_token, options.newline))
        parts.append("}")
        return options.newline.join(parts)

    def __str__(self) -> str:
        return self.render()
