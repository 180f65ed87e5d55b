"""Logic for building a code element tree from a YAML model file.

A model file describes one C# file::

    namespace: Acme.Models
    usings: [System]
    classes:
      - name: Person
        doc: A person.
        properties:
          - {name: Name, type: string}
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from csharp_codegen.attribute import Attribute
from csharp_codegen.class_type import ClassType
from csharp_codegen.comment import Comment, DocComment
from csharp_codegen.errors import ValidationError
from csharp_codegen.identifier_sanitizer import IdentifierSanitizer
from csharp_codegen.load_config import load_config
from csharp_codegen.method import Method
from csharp_codegen.parameter import Parameter
from csharp_codegen.property import Property
from csharp_codegen.source_file import SourceFile
from csharp_codegen.type_descriptor import TypeDescriptor

logger = logging.getLogger(__name__)

Sanitizer = Callable[[str], str]


def _check_keys(data: Any, allowed: set[str], owner: str) -> dict[str, Any]:
    """Ensure data is a mapping that only uses known keys."""
    if not isinstance(data, dict):
        raise ValidationError(f"{owner} must be a mapping, got {type(data).__name__}")
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValidationError(f"Unknown keys for {owner}: {', '.join(unknown)}")
    return data


def _list_of(data: dict[str, Any], key: str, owner: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{owner} {key} must be a list")
    return value


def build_type(value: Any) -> str | TypeDescriptor:
    """Build a type from a name or a ``{name, namespace, ...}`` mapping."""
    if not isinstance(value, dict):
        return value
    data = _check_keys(
        value,
        {"name", "namespace", "generic_arguments", "array_rank"},
        "type",
    )
    return TypeDescriptor(
        name=data.get("name"),
        namespace=data.get("namespace"),
        generic_arguments=tuple(
            build_type_descriptor(arg)
            for arg in _list_of(data, "generic_arguments", "type")
        ),
        array_rank=data.get("array_rank", 0),
    )


def build_type_descriptor(value: Any) -> TypeDescriptor:
    """Build a descriptor, treating a bare string as an unqualified name."""
    built = build_type(value)
    if isinstance(built, TypeDescriptor):
        return built
    return TypeDescriptor(name=built)


def build_doc_comment(value: Any) -> DocComment | None:
    """Build a doc comment from a summary string or a mapping."""
    if value is None:
        return None
    if isinstance(value, str):
        return DocComment(summary=value.rstrip())
    data = _check_keys(value, {"summary", "notes"}, "doc")
    summary = data.get("summary")
    notes = data.get("notes")
    return DocComment(
        summary=summary.rstrip() if isinstance(summary, str) else summary,
        raw_notes=notes.rstrip() if isinstance(notes, str) else notes,
    )


def build_attribute(value: Any) -> Attribute:
    """Build an attribute from a name or a mapping."""
    if isinstance(value, str):
        return Attribute(value)
    data = _check_keys(value, {"name", "arguments", "multi_line"}, "attribute")
    return Attribute(
        name=data.get("name"),
        arguments=[str(arg) for arg in _list_of(data, "arguments", "attribute")],
        multi_line_arguments=bool(data.get("multi_line", False)),
    )


def build_parameter(value: Any, sanitizer: Sanitizer) -> Parameter:
    """Build a method parameter."""
    data = _check_keys(value, {"name", "type", "description"}, "parameter")
    return Parameter(
        name=data.get("name"),
        type=build_type(data.get("type")),
        description=data.get("description"),
        sanitizer=sanitizer,
    )


def build_property(value: Any, sanitizer: Sanitizer) -> Property:
    """Build a property."""
    data = _check_keys(
        value,
        {
            "name",
            "type",
            "access",
            "static",
            "override",
            "getter",
            "setter",
            "default",
            "attributes",
            "doc",
        },
        "property",
    )
    default = data.get("default")
    if isinstance(default, bool):
        default = "true" if default else "false"
    return Property(
        name=data.get("name"),
        type=build_type(data.get("type")),
        access=data.get("access", "public"),
        is_static=bool(data.get("static", False)),
        is_override=bool(data.get("override", False)),
        has_getter=bool(data.get("getter", True)),
        has_setter=bool(data.get("setter", True)),
        default_value=None if default is None else str(default),
        attributes=[
            build_attribute(a) for a in _list_of(data, "attributes", "property")
        ],
        doc_comment=build_doc_comment(data.get("doc")),
        sanitizer=sanitizer,
    )


def _build_parameters(
    data: dict[str, Any], owner: str, sanitizer: Sanitizer
) -> list[Parameter]:
    return [build_parameter(p, sanitizer) for p in _list_of(data, "parameters", owner)]


def build_constructor(value: Any, class_name: str, sanitizer: Sanitizer) -> Method:
    """Build a constructor of the named class."""
    data = _check_keys(
        value,
        {"access", "parameters", "base_arguments", "body", "doc"},
        "constructor",
    )
    base_arguments = data.get("base_arguments")
    if base_arguments is not None:
        if not isinstance(base_arguments, list):
            raise ValidationError("constructor base_arguments must be a list")
        base_arguments = [str(arg) for arg in base_arguments]
    return Method.for_constructor(
        class_name,
        body=data.get("body") or "",
        access=data.get("access", "public"),
        parameters=_build_parameters(data, "constructor", sanitizer),
        base_arguments=base_arguments,
        doc_comment=build_doc_comment(data.get("doc")),
    )


def build_method(value: Any, sanitizer: Sanitizer) -> Method:
    """Build a method."""
    data = _check_keys(
        value,
        {
            "name",
            "access",
            "returns",
            "static",
            "override",
            "async",
            "parameters",
            "body",
            "doc",
        },
        "method",
    )
    returns = data.get("returns")
    return Method(
        name=data.get("name"),
        access=data.get("access", "public"),
        return_type=None if returns is None else build_type(returns),
        parameters=_build_parameters(data, "method", sanitizer),
        body=data.get("body") or "",
        is_static=bool(data.get("static", False)),
        is_override=bool(data.get("override", False)),
        is_async=bool(data.get("async", False)),
        doc_comment=build_doc_comment(data.get("doc")),
    )


def build_class(value: Any, sanitizer: Sanitizer) -> ClassType:
    """Build a class and its members."""
    data = _check_keys(
        value,
        {
            "name",
            "access",
            "static",
            "base",
            "interfaces",
            "attributes",
            "properties",
            "constructors",
            "methods",
            "doc",
        },
        "class",
    )
    name = data.get("name")
    return ClassType(
        name=name,
        access=data.get("access", "public"),
        is_static=bool(data.get("static", False)),
        base_type=data.get("base"),
        interfaces=_list_of(data, "interfaces", "class"),
        attributes=[build_attribute(a) for a in _list_of(data, "attributes", "class")],
        properties=[
            build_property(p, sanitizer) for p in _list_of(data, "properties", "class")
        ],
        constructors=[
            build_constructor(c, name, sanitizer)
            for c in _list_of(data, "constructors", "class")
        ],
        methods=[
            build_method(m, sanitizer) for m in _list_of(data, "methods", "class")
        ],
        doc_comment=build_doc_comment(data.get("doc")),
    )


def build_header(value: Any) -> Comment | DocComment | None:
    """Build a file header: a plain comment from a string, else a doc comment."""
    if value is None:
        return None
    if isinstance(value, str):
        return Comment(value.rstrip())
    return build_doc_comment(value)


def build_source_file(
    data: Any,
    config: dict[str, Any] | None = None,
) -> SourceFile:
    """Build a source file from a parsed model mapping."""
    if config is None:
        config = load_config(None)
    data = _check_keys(data, {"namespace", "usings", "header", "classes"}, "file")

    sanitizer_config = config.get("sanitizer") or {}
    sanitizer = IdentifierSanitizer(sanitizer_config.get("extra_keywords")).sanitize

    usings = _list_of(data, "usings", "file") + list(config.get("usings") or [])
    return SourceFile(
        namespace=data.get("namespace"),
        usings=usings,
        classes=[build_class(c, sanitizer) for c in _list_of(data, "classes", "file")],
        header=build_header(data.get("header")),
    )


def load_file_model(
    path: str | Path,
    config: dict[str, Any] | None = None,
) -> SourceFile:
    """Load a YAML model file and build its source file."""
    p = Path(path)
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    source_file = build_source_file(data, config)
    logger.info("Loaded model %s with %d classes", p, len(source_file.classes))
    return source_file
