"""Main orchestration script rendering every model file in a directory."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Render all YAML models under a directory into C# files."""
    parser = argparse.ArgumentParser(
        description="Render every YAML model in a directory into C# source files."
    )
    parser.add_argument(
        "model_dir",
        nargs="?",
        default="models",
        help="Directory containing *.yml model files (default: models)",
    )
    parser.add_argument(
        "out_dir",
        nargs="?",
        default="generated",
        help="Directory receiving the .cs files (default: generated)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before rendering",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with rendering.\n")

    model_dir = Path(args.model_dir)
    out_dir = Path(args.out_dir)
    models = sorted(model_dir.glob("*.yml"))
    if not models:
        print(f"No .yml model files found under: {model_dir}")
        sys.exit(1)

    for model in models:
        cmd = [
            sys.executable,
            "-m",
            "csharp_codegen.render_file_model",
            str(model),
            "--out",
            str(out_dir / f"{model.stem}.cs"),
        ]
        if args.config:
            cmd.extend(["--config", args.config])
        run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Rendered {len(models)} files into {out_dir}")


if __name__ == "__main__":
    main()
