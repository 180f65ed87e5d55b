"""Construction-time checks shared by the code elements."""

from collections.abc import Iterable
from typing import Any

from csharp_codegen.errors import ValidationError


def require_text(value: object, field_name: str, owner: str) -> str:
    """Return value if it is a non-blank string, otherwise raise."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{owner} {field_name} cannot be empty or whitespace")
    return value


def optional_text(value: object, field_name: str, owner: str) -> str | None:
    """Accept None, but reject a string that is present yet blank.

    None means the field was omitted; an empty string means it was given
    without content, which is never what the caller wants.
    """
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{owner} {field_name} cannot be empty. Use None to omit it."
        )
    return value


def plain_text(value: object, field_name: str, owner: str) -> str:
    """Return value as a string that may be blank; None becomes ""."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(
            f"{owner} {field_name} must be a string, got {type(value).__name__}"
        )
    return value


def unique_texts(
    values: Iterable[str] | None,
    field_name: str,
    owner: str,
) -> tuple[str, ...]:
    """Validate and deduplicate strings, keeping first occurrence order."""
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    seen = [require_text(v, field_name, owner) for v in values]
    return tuple(dict.fromkeys(seen))


def elements_of(
    values: Iterable[Any] | None,
    element_type: type,
    field_name: str,
    owner: str,
) -> tuple[Any, ...]:
    """Return values as a tuple after checking each item's type."""
    if values is None:
        return ()
    items = tuple(values)
    for item in items:
        if not isinstance(item, element_type):
            raise ValidationError(
                f"{owner} {field_name} must contain {element_type.__name__} "
                f"objects, got {type(item).__name__}"
            )
    return items


def optional_element(
    value: Any,
    element_type: type | tuple[type, ...],
    field_name: str,
    owner: str,
) -> Any:
    """Accept None or an instance of element_type."""
    if value is not None and not isinstance(value, element_type):
        types = element_type if isinstance(element_type, tuple) else (element_type,)
        expected = " or ".join(t.__name__ for t in types)
        raise ValidationError(
            f"{owner} {field_name} must be a {expected}, got {type(value).__name__}"
        )
    return value
