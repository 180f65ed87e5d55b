"""Logic for removing the shared indentation of documentation text.

Compilers write XML documentation with the indentation the comment had in the
source file, so every line of a member's text usually starts with the same
run of whitespace. That run is detected column by column and stripped.
"""


def dedent_doc_text(text: str) -> str:
    """Strip leading blank lines and the whitespace prefix common to all lines."""
    lines = [line.rstrip() for line in text.rstrip().splitlines()]

    start = 0
    while start < len(lines) and not lines[start]:
        start += 1
    lines = lines[start:]

    width = shared_whitespace_prefix(lines)
    if width > 0:
        lines = [line[width:] for line in lines]

    return "\n".join(lines)


def shared_whitespace_prefix(lines: list[str]) -> int:
    """Return the width of the whitespace prefix shared by all lines.

    Lines that are too short to reach a column do not take part in the
    comparison at that column. The first character seen at a column is the
    one every other line has to match.
    """
    column = 0
    while True:
        expected: str | None = None
        for line in lines:
            if len(line) <= column:
                continue
            char = line[column]
            if expected is None:
                expected = char
            if char != expected or not char.isspace():
                return column
        if expected is None:
            # No line reaches this column.
            return column
        column += 1
