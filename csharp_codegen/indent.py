"""Utility for indenting a block of text."""

from csharp_codegen.indent_prefix import DEFAULT_INDENT_TOKEN, indent_prefix


def indent(
    text: str,
    level: int = 1,
    token: str = DEFAULT_INDENT_TOKEN,
    newline: str = "\n",
) -> str:
    """Indent every non-empty line of a text block.

    Lines are split on any line boundary, so the newline style of the input does
    not matter. Empty lines are kept empty instead of receiving a prefix made
    only of whitespace.
    """
    prefix = indent_prefix(level, token)
    if not prefix:
        return text
    return newline.join(
        prefix + line if line else line for line in text.splitlines()
    )
