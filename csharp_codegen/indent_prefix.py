"""Utility for computing an indentation prefix."""

from csharp_codegen.errors import ValidationError

DEFAULT_INDENT_TOKEN = "    "


def indent_prefix(level: int = 1, token: str = DEFAULT_INDENT_TOKEN) -> str:
    """Return the prefix which indents a line by the given level."""
    if level < 0:
        raise ValidationError(
            f"Indent level must be greater than or equal to 0, got {level}"
        )
    return token * level
