"""Lookup of member documentation in compiler-generated XML files."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.sax.saxutils import escape

from csharp_codegen.dedent_doc_text import dedent_doc_text

logger = logging.getLogger(__name__)

# Characters that may follow a key in a member name: a parameter list or a
# generic arity marker.
KEY_CONTINUATIONS = ("(", "`")


def inner_xml(element: ET.Element) -> str:
    """Serialize the content of an element, without the element's own tags."""
    parts = [escape(element.text or "")]
    # tostring() escapes each child and includes its tail text.
    parts.extend(ET.tostring(child, encoding="unicode") for child in element)
    return "".join(parts)


class XmlDocumentation:
    """The ``<member>`` entries of one XML documentation file."""

    def __init__(self, root: ET.Element, source: str = "<string>") -> None:
        """Index the members below root."""
        self.source = source
        self.members: dict[str, ET.Element] = {}
        for member in root.iter("member"):
            name = member.get("name")
            if name and name not in self.members:
                self.members[name] = member

    @classmethod
    def from_string(cls, xml_text: str, source: str = "<string>") -> "XmlDocumentation":
        """Parse documentation XML held in memory."""
        return cls(ET.fromstring(xml_text), source)

    @classmethod
    def from_file(cls, path: str | Path) -> "XmlDocumentation":
        """Parse a documentation file; raises on unreadable or malformed XML."""
        p = Path(path)
        root = ET.parse(p).getroot()
        documentation = cls(root, str(p))
        logger.debug("Loaded %d documented members from %s", len(documentation), p)
        return documentation

    def __len__(self) -> int:
        return len(self.members)

    def find(self, key: str) -> ET.Element | None:
        """Find the member for a key, allowing a parameter list or arity suffix."""
        member = self.members.get(key)
        if member is not None:
            return member
        for name, candidate in self.members.items():
            if name.startswith(key) and name[len(key) :].startswith(KEY_CONTINUATIONS):
                return candidate
        return None

    def lookup(self, key: str) -> str | None:
        """Return the dedented documentation XML for a key, or None."""
        member = self.find(key)
        if member is None:
            logger.debug("No documentation for %s in %s", key, self.source)
            return None
        text = inner_xml(member)
        if not text.strip():
            return None
        return dedent_doc_text(text)
