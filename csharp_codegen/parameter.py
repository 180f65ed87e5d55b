"""C# method parameters."""

from collections.abc import Callable
from dataclasses import dataclass, field

from csharp_codegen.identifier_sanitizer import sanitize_identifier
from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.type_descriptor import TypeRef, type_text
from csharp_codegen.validation import optional_text, require_text


@dataclass(frozen=True)
class Parameter:
    """A method parameter; ``description`` feeds the method's ``<param>`` docs."""

    name: str
    type: TypeRef
    description: str | None = None
    sanitizer: Callable[[str], str] = field(
        default=sanitize_identifier, repr=False, compare=False
    )
    identifier: str = field(init=False, repr=False)
    type_name: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        require_text(self.name, "name", "Parameter")
        object.__setattr__(self, "type_name", type_text(self.type, "type", "Parameter"))
        optional_text(self.description, "description", "Parameter")
        object.__setattr__(self, "identifier", self.sanitizer(self.name))

    def doc_line(self) -> str | None:
        """Return the ``<param>`` line for this parameter, if it is described."""
        if not self.description:
            return None
        return f'<param name="{self.name}">{self.description}</param>'

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the parameter as ``Type name``."""
        return f"{self.type_name} {self.identifier}"

    def __str__(self) -> str:
        return self.render()
