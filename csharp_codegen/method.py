"""C# methods and constructors."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from csharp_codegen.access_modifier import AccessModifier
from csharp_codegen.comment import DocComment
from csharp_codegen.errors import ValidationError
from csharp_codegen.indent import indent
from csharp_codegen.indent_prefix import indent_prefix
from csharp_codegen.parameter import Parameter
from csharp_codegen.render_options import DEFAULT_RENDER_OPTIONS, RenderOptions
from csharp_codegen.type_descriptor import TypeRef, type_text
from csharp_codegen.validation import (
    elements_of,
    optional_element,
    plain_text,
    require_text,
)


@dataclass(frozen=True)
class ConstructorExtras:
    """What a constructor has on top of a method.

    ``base_arguments`` are passed to the base class constructor as they should
    appear in code; they are not sanitized. None leaves the base call out.
    """

    base_arguments: Iterable[str] | None = None

    def __post_init__(self) -> None:
        if self.base_arguments is None:
            return
        arguments = self.base_arguments
        if isinstance(arguments, str):
            arguments = (arguments,)
        arguments = tuple(arguments)
        for argument in arguments:
            require_text(argument, "base argument", "Constructor")
        object.__setattr__(self, "base_arguments", arguments)

    def render_base_call(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the ``: base(...)`` clause that follows the signature."""
        if self.base_arguments is None:
            return ""
        if len(self.base_arguments) == 0:
            return " : base()"
        if len(self.base_arguments) == 1:
            return f" : base({self.base_arguments[0]})"

        nl = options.newline
        argument_prefix = indent_prefix(2, options.indent_token)
        last = len(self.base_arguments) - 1
        arguments = [
            f"{nl}{argument_prefix}{arg}{'' if i == last else ','}"
            for i, arg in enumerate(self.base_arguments)
        ]
        clause_prefix = indent_prefix(1, options.indent_token)
        return f"{nl}{clause_prefix}: base({''.join(arguments)})"


@dataclass(frozen=True)
class Method:
    """A method, or a constructor when ``constructor`` is set.

    A None ``return_type`` is left out of the signature, which is how
    constructors are written. Parameters with a description are documented
    automatically in ``documentation``.
    """

    name: str
    access: AccessModifier = AccessModifier.PUBLIC
    return_type: TypeRef | None = None
    parameters: Iterable[Parameter] = ()
    body: str = ""
    is_static: bool = False
    is_override: bool = False
    is_async: bool = False
    doc_comment: DocComment | None = None
    constructor: ConstructorExtras | None = None
    return_type_name: str | None = field(init=False, repr=False)
    documentation: DocComment | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        owner = "Constructor" if self.constructor is not None else "Method"
        require_text(self.name, "name", owner)
        object.__setattr__(self, "access", AccessModifier.parse(self.access))
        object.__setattr__(
            self,
            "parameters",
            elements_of(self.parameters, Parameter, "parameters", owner),
        )
        object.__setattr__(self, "body", plain_text(self.body, "body", owner))
        optional_element(self.doc_comment, DocComment, "doc comment", owner)
        optional_element(self.constructor, ConstructorExtras, "constructor", owner)

        return_type_name = None
        if self.return_type is not None:
            return_type_name = type_text(self.return_type, "return type", owner)
        object.__setattr__(self, "return_type_name", return_type_name)

        if self.constructor is not None:
            if return_type_name is not None:
                raise ValidationError("Constructor cannot have a return type")
            if self.is_static or self.is_override or self.is_async:
                raise ValidationError(
                    "Constructor cannot be marked static, override or async"
                )

        object.__setattr__(self, "documentation", self._document_parameters())

    @classmethod
    def for_constructor(
        cls,
        class_name: str,
        body: str = "",
        access: AccessModifier = AccessModifier.PUBLIC,
        parameters: Iterable[Parameter] = (),
        base_arguments: Iterable[str] | None = None,
        doc_comment: DocComment | None = None,
    ) -> "Method":
        """Build a constructor for the named class."""
        return cls(
            name=class_name,
            access=access,
            parameters=parameters,
            body=body,
            doc_comment=doc_comment,
            constructor=ConstructorExtras(base_arguments),
        )

    @property
    def is_constructor(self) -> bool:
        """True when this method is a constructor."""
        return self.constructor is not None

    def _document_parameters(self) -> DocComment | None:
        lines = [line for line in (p.doc_line() for p in self.parameters) if line]
        if not lines:
            return self.doc_comment
        base = self.doc_comment if self.doc_comment is not None else DocComment()
        return base.with_leading_notes(lines)

    def render_parameters(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the parameter list without its parentheses."""
        rendered = [p.render(options) for p in self.parameters]
        inline = ", ".join(rendered)
        wrap_over = options.wrap_parameters_over
        if len(rendered) < 2 or (wrap_over > 0 and len(inline) <= wrap_over):
            return inline

        nl = options.newline
        lines = [f"{p}," for p in rendered[:-1]] + [rendered[-1]]
        return nl + indent(nl.join(lines), 1, options.indent_token, nl)

    def signature(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render the signature, including any base constructor call."""
        words = [self.access.value]
        if self.is_static:
            words.append("static")
        if self.is_override:
            words.append("override")
        if self.is_async:
            words.append("async")
        if self.return_type_name is not None:
            words.append(self.return_type_name)
        words.append(f"{self.name}({self.render_parameters(options)})")

        result = " ".join(words)
        if self.constructor is not None:
            result += self.constructor.render_base_call(options)
        return result

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Render documentation, signature and body."""
        parts = []
        if self.documentation is not None:
            doc = self.documentation.render(options)
            if doc:
                parts.append(doc)
        parts.append(self.signature(options))
        parts.append("{")
        if self.body.strip():
            parts.append(indent(self.body, 1, options.indent_token, options.newline))
        parts.append("}")
        return options.newline.join(parts)

    def __str__(self) -> str:
        return self.render()
