"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from csharp_codegen.deep_merge import deep_merge
from csharp_codegen.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "render": {
        "indent_token": "    ",
        "newline": "\n",
        "attribute_suffix": "Attribute",
        "comment_prefix": "// ",
        "doc_comment_prefix": "/// ",
        "wrap_parameters_over": 0,
    },
    "sanitizer": {
        "extra_keywords": [],
    },
    "usings": [],
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                raise ValidationError(f"Config file {p} must contain a mapping")
            config = deep_merge(config, user_config)
            logger.debug("Loaded config from %s", p)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config
