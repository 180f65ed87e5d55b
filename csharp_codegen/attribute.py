"""C# attributes."""

from collections.abc import Iterable
from dataclasses import dataclass

from csharp_codegen.indent import indent
from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.validation import require_text


@dataclass(frozen=True)
class Attribute:
    """An attribute such as ``[JsonProperty("id")]``.

    Arguments are strings exactly as they should appear in code. Set
    ``multi_line_arguments`` to put every argument on its own line.
    """

    name: str
    arguments: Iterable[str] = ()
    multi_line_arguments: bool = False

    def __post_init__(self) -> None:
        require_text(self.name, "name", "Attribute")
        arguments = self.arguments
        if isinstance(arguments, str):
            arguments = (arguments,)
        arguments = tuple(arguments or ())
        for argument in arguments:
            require_text(argument, "argument", "Attribute")
        object.__setattr__(self, "arguments", arguments)

    def display_name(self, suffix: str = "Attribute") -> str:
        """Return the name without the conventional suffix."""
        if suffix and self.name.endswith(suffix) and len(self.name) > len(suffix):
            return self.name[: -len(suffix)]
        return self.name

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the attribute on one line, or one argument per line."""
        name = self.display_name(options.attribute_suffix)
        if not self.arguments:
            return f"[{name}]"

        if not self.multi_line_arguments:
            return f"[{name}({', '.join(self.arguments)})]"

        last = len(self.arguments) - 1
        lines = [
            arg if i == last else f"{arg}," for i, arg in enumerate(self.arguments)
        ]
        body = indent(
            options.newline.join(lines), 1, options.indent_token, options.newline
        )
        return f"[{name}({options.newline}{body}{options.newline})]"

    def __str__(self) -> str:
        return self.render()
