"""Pre-resolved description of a C# type.

Callers that discover types by introspection resolve them into these values
before building code elements, so rendering never inspects live types.
"""

from dataclasses import dataclass

from csharp_codegen.errors import ValidationError
from csharp_codegen.validation import optional_element, optional_text, require_text

VOID = "void"


@dataclass(frozen=True)
class TypeDescriptor:
    """A type name with its namespace, generic arguments and array rank."""

    name: str
    namespace: str | None = None
    generic_arguments: tuple["TypeDescriptor", ...] = ()
    array_rank: int = 0
    declaring_type: "TypeDescriptor | None" = None

    def __post_init__(self) -> None:
        require_text(self.name, "name", "Type descriptor")
        optional_text(self.namespace, "namespace", "Type descriptor")
        if not isinstance(self.array_rank, int) or isinstance(self.array_rank, bool):
            raise ValidationError(
                "Type descriptor array rank must be an integer, "
                f"got {self.array_rank!r}"
            )
        if self.array_rank < 0:
            raise ValidationError("Type descriptor array rank cannot be negative")
        object.__setattr__(self, "generic_arguments", tuple(self.generic_arguments))
        for argument in self.generic_arguments:
            if not isinstance(argument, TypeDescriptor):
                raise ValidationError(
                    "Type descriptor generic arguments must be TypeDescriptor objects"
                )
        optional_element(
            self.declaring_type, TypeDescriptor, "declaring type", "Type descriptor"
        )

    def csharp_name(
        self, *, identifier_only: bool = False, include_namespace: bool = True
    ) -> str:
        """Convert the descriptor into a name that compiles in C# code.

        With ``identifier_only`` the generic arguments and array brackets are
        omitted, which is the form used in documentation keys. Nested types
        are always qualified by their declaring type.
        """
        if self.name == VOID and self.array_rank == 0:
            return VOID

        type_name = self.name
        if self.generic_arguments and not identifier_only:
            arguments = ", ".join(arg.csharp_name() for arg in self.generic_arguments)
            type_name = f"{type_name}<{arguments}>"

        if self.declaring_type is not None:
            outer = self.declaring_type.csharp_name(
                identifier_only=identifier_only, include_namespace=include_namespace
            )
            type_name = f"{outer}.{type_name}"
        elif include_namespace and self.namespace:
            type_name = f"{self.namespace}.{type_name}"

        if not identifier_only:
            type_name += "[]" * self.array_rank

        return type_name


TypeRef = str | TypeDescriptor


def type_text(value: object, field_name: str, owner: str) -> str:
    """Return the C# text for a type given as a string or a descriptor."""
    if isinstance(value, TypeDescriptor):
        return value.csharp_name()
    return require_text(value, field_name, owner)
