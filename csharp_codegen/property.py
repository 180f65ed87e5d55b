"""C# properties."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from csharp_codegen.access_modifier import AccessModifier
from csharp_codegen.attribute import Attribute
from csharp_codegen.comment import DocComment
from csharp_codegen.errors import ValidationError
from csharp_codegen.identifier_sanitizer import sanitize_identifier
from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.type_descriptor import TypeRef, type_text
from csharp_codegen.validation import (
    elements_of,
    optional_element,
    optional_text,
    require_text,
)


@dataclass(frozen=True)
class Property:
    """An auto-implemented property."""

    name: str
    type: TypeRef
    access: AccessModifier = AccessModifier.PUBLIC
    is_static: bool = False
    is_override: bool = False
    has_getter: bool = True
    has_setter: bool = True
    default_value: str | None = None
    attributes: Iterable[Attribute] = ()
    doc_comment: DocComment | None = None
    sanitizer: Callable[[str], str] = field(
        default=sanitize_identifier, repr=False, compare=False
    )
    identifier: str = field(init=False, repr=False)
    type_name: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        require_text(self.name, "name", "Property")
        object.__setattr__(self, "type_name", type_text(self.type, "type", "Property"))
        object.__setattr__(self, "access", AccessModifier.parse(self.access))
        if not self.has_getter and not self.has_setter:
            raise ValidationError(
                f"Property {self.name!r} needs a getter, a setter, or both"
            )
        optional_text(self.default_value, "default value", "Property")
        object.__setattr__(
            self,
            "attributes",
            elements_of(self.attributes, Attribute, "attributes", "Property"),
        )
        optional_element(self.doc_comment, DocComment, "doc comment", "Property")
        object.__setattr__(self, "identifier", self.sanitizer(self.name))

    def declaration(self) -> str:
        """Return the single line declaring the property."""
        modifiers = [self.access.value]
        if self.is_static:
            modifiers.append("static")
        if self.is_override:
            modifiers.append("override")

        accessors = []
        if self.has_getter:
            accessors.append("get;")
        if self.has_setter:
            accessors.append("set;")

        line = (
            f"{' '.join(modifiers)} {self.type_name} {self.identifier} "
            f"{{ {' '.join(accessors)} }}"
        )
        if self.default_value is not None:
            line += f" = {self.default_value};"
        return line

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render documentation, attributes and the declaration."""
        parts = []
        if self.doc_comment is not None:
            doc = self.doc_comment.render(options)
            if doc:
                parts.append(doc)
        parts.extend(attribute.render(options) for attribute in self.attributes)
        parts.append(self.declaration())
        return options.newline.join(parts)

    def __str__(self) -> str:
        return self.render()
