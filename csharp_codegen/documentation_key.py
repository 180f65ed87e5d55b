"""Logic for building member keys of XML documentation files."""

from csharp_codegen.errors import ValidationError
from csharp_codegen.type_descriptor import TypeDescriptor
from csharp_codegen.validation import require_text

KIND_PREFIXES = {
    "t": "T",
    "type": "T",
    "m": "M",
    "method": "M",
    "constructor": "M",
    "p": "P",
    "property": "P",
}

CONSTRUCTOR_MEMBER_NAME = "#ctor"


def documentation_key(
    kind: str,
    type_: TypeDescriptor | str,
    member: str | None = None,
) -> str:
    """Build a key such as ``T:Ns.Type`` or ``M:Ns.Type.Member``.

    Types are named without generic arguments, the way compilers write them
    in documentation files.
    """
    prefix = KIND_PREFIXES.get(str(kind).lower())
    if prefix is None:
        raise ValidationError(f"Unknown documentation member kind: {kind!r}")

    if isinstance(type_, TypeDescriptor):
        type_name = type_.csharp_name(identifier_only=True)
    else:
        type_name = require_text(type_, "type", "Documentation key")

    if prefix == "T":
        if member is not None:
            raise ValidationError("Type documentation keys do not take a member")
        return f"T:{type_name}"

    if member is None and str(kind).lower() == "constructor":
        member = CONSTRUCTOR_MEMBER_NAME
    member = require_text(member, "member", "Documentation key")
    return f"{prefix}:{type_name}.{member}"
