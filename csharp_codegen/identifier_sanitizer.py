"""Logic for escaping identifiers that collide with C# keywords."""

from collections.abc import Iterable

from csharp_codegen.errors import SanitizationError

CSHARP_KEYWORDS = frozenset(
    {
        "abstract",
        "as",
        "base",
        "bool",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "checked",
        "class",
        "const",
        "continue",
        "decimal",
        "default",
        "delegate",
        "do",
        "double",
        "else",
        "enum",
        "event",
        "explicit",
        "extern",
        "false",
        "finally",
        "fixed",
        "float",
        "for",
        "foreach",
        "goto",
        "if",
        "implicit",
        "in",
        "int",
        "interface",
        "internal",
        "is",
        "lock",
        "long",
        "namespace",
        "new",
        "null",
        "object",
        "operator",
        "out",
        "override",
        "params",
        "private",
        "protected",
        "public",
        "readonly",
        "ref",
        "return",
        "sbyte",
        "sealed",
        "short",
        "sizeof",
        "stackalloc",
        "static",
        "string",
        "struct",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "uint",
        "ulong",
        "unchecked",
        "unsafe",
        "ushort",
        "using",
        "virtual",
        "void",
        "volatile",
        "while",
    }
)

VERBATIM_PREFIX = "@"


class IdentifierSanitizer:
    """Makes names safe to use as C# identifiers."""

    def __init__(self, extra_keywords: Iterable[str] | None = None) -> None:
        """Initialize the sanitizer with optional keywords beyond the C# set."""
        self.keywords = CSHARP_KEYWORDS | frozenset(extra_keywords or ())

    def is_valid_identifier(self, name: str) -> bool:
        """Check that a name is a well-formed identifier and not a keyword."""
        return name.isidentifier() and name not in self.keywords

    def sanitize(self, name: str) -> str:
        """Return the name, escaped with '@' if it is a reserved keyword."""
        if self.is_valid_identifier(name):
            return name

        # Only keywords become valid by escaping; anything else has bad characters.
        if name in self.keywords and name.isidentifier():
            return f"{VERBATIM_PREFIX}{name}"
        if name.startswith(VERBATIM_PREFIX) and name[1:].isidentifier():
            return name

        raise SanitizationError(f"Invalid characters found in identifier {name!r}")


DEFAULT_SANITIZER = IdentifierSanitizer()
sanitize_identifier = DEFAULT_SANITIZER.sanitize
