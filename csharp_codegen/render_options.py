"""Options controlling how code elements are rendered."""

from dataclasses import dataclass
from typing import Any

from csharp_codegen.indent_prefix import DEFAULT_INDENT_TOKEN


@dataclass(frozen=True)
class RenderOptions:
    """Layout settings shared by every element in a rendered tree."""

    indent_token: str = DEFAULT_INDENT_TOKEN
    newline: str = "\n"
    attribute_suffix: str = "Attribute"
    comment_prefix: str = "// "
    doc_comment_prefix: str = "/// "
    # 0 wraps every parameter list with more than one parameter.
    wrap_parameters_over: int = 0

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "RenderOptions":
        """Build render options from the ``render`` section of a config."""
        section = config.get("render") or {}
        defaults = cls()
        return cls(
            indent_token=str(section.get("indent_token", defaults.indent_token)),
            newline=str(section.get("newline", defaults.newline)),
            attribute_suffix=str(
                section.get("attribute_suffix", defaults.attribute_suffix)
            ),
            comment_prefix=str(section.get("comment_prefix", defaults.comment_prefix)),
            doc_comment_prefix=str(
                section.get("doc_comment_prefix", defaults.doc_comment_prefix)
            ),
            wrap_parameters_over=int(
                section.get("wrap_parameters_over", defaults.wrap_parameters_over)
            ),
        )


DEFAULT_RENDER_OPTIONS = RenderOptions()
