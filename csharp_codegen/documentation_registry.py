"""Registry owning the documentation files loaded during a run."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from types import TracebackType

from csharp_codegen.xml_documentation import XmlDocumentation

logger = logging.getLogger(__name__)


def documentation_path_for(assembly_path: str | Path) -> Path:
    """Return the path where the compiler writes an assembly's XML docs."""
    return Path(assembly_path).with_suffix(".xml")


class DocumentationRegistry:
    """Loads each documentation file once and keeps it until cleared.

    Failed loads are remembered too, so a missing file is only probed once.
    """

    def __init__(self) -> None:
        self._sources: dict[Path, XmlDocumentation | None] = {}

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return Path(path).resolve() in self._sources

    def __enter__(self) -> "DocumentationRegistry":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear()

    def get(self, path: str | Path) -> XmlDocumentation | None:
        """Return the documentation at path, loading it on first use."""
        key = Path(path).resolve()
        if key in self._sources:
            return self._sources[key]

        documentation: XmlDocumentation | None = None
        if not key.is_file():
            logger.info("Documentation file %s not found", key)
        else:
            try:
                documentation = XmlDocumentation.from_file(key)
            except (ET.ParseError, OSError):
                logger.exception("Error loading documentation file %s", key)

        self._sources[key] = documentation
        return documentation

    def get_for_assembly(self, assembly_path: str | Path) -> XmlDocumentation | None:
        """Return the documentation that sits next to an assembly."""
        return self.get(documentation_path_for(assembly_path))

    def lookup(self, path: str | Path, key: str) -> str | None:
        """Look a key up in the documentation at path; None if unavailable."""
        documentation = self.get(path)
        if documentation is None:
            return None
        return documentation.lookup(key)

    def clear(self) -> None:
        """Forget every loaded file."""
        self._sources.clear()
