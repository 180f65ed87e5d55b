"""C# access modifiers."""

from enum import Enum

from csharp_codegen.errors import ValidationError


class AccessModifier(str, Enum):
    """Access level of a type or member, valued by its C# keyword text."""

    PUBLIC = "public"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PRIVATE = "private"
    PROTECTED_INTERNAL = "protected internal"
    PRIVATE_PROTECTED = "private protected"

    @classmethod
    def parse(cls, text: "str | AccessModifier") -> "AccessModifier":
        """Parse an access modifier from its C# text, ignoring case."""
        if isinstance(text, AccessModifier):
            return text
        normalized = " ".join(str(text).lower().split())
        for member in cls:
            if member.value == normalized:
                return member
        raise ValidationError(f"Unknown access modifier: {text!r}")

    def __str__(self) -> str:
        return self.value
