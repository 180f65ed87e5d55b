"""Command line entry point rendering YAML model files to C# source."""

import argparse
import logging
from pathlib import Path

import yaml

from csharp_codegen.errors import CodeModelError
from csharp_codegen.load_config import load_config
from csharp_codegen.load_file_model import load_file_model
from csharp_codegen.render_options import RenderOptions

logger = logging.getLogger(__name__)


def render_model(args: argparse.Namespace) -> int:
    """Render the model named by args and write or print the result."""
    config = load_config(args.config)
    options = RenderOptions.from_config(config)

    source_file = load_file_model(args.model, config)
    text = source_file.render(options) + options.newline

    if args.out is None:
        print(text, end="")
        return 0

    out_file = args.out.resolve()
    out_file.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps the configured line separator as is.
    with open(out_file, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    print(f"Wrote {len(source_file.classes)} classes to: {out_file}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and render a model file."""
    ap = argparse.ArgumentParser(
        description="Render a YAML description of a C# file into source code.",
    )
    ap.add_argument(
        "model",
        type=Path,
        help="YAML model file describing the namespace, usings and classes",
    )
    ap.add_argument(
        "-o",
        "--out",
        type=Path,
        default=None,
        help="Output .cs file (default: print to stdout)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress details",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return render_model(args)
    except (CodeModelError, OSError, yaml.YAMLError) as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error rendering {args.model}: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
