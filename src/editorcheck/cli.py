"""editorcheck CLI: validate editor element JSON."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _read_input(source: str) -> str:
    """Read raw text from a file path, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main():
    """Main CLI entry point for editorcheck commands."""
    try:
        editorcheck_version = get_version("editorcheck")
    except PackageNotFoundError:
        editorcheck_version = "dev"

    from .config import get_settings
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="editorcheck",
        description="editorcheck: batch validation of editor element configuration JSON"
    )
    parser.add_argument("--version", action="version", version=f"editorcheck {editorcheck_version}")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level for diagnostics on stderr (default from EDITORCHECK_LOG_LEVEL)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate the editor element inside a JSON document"
    )
    validate_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Path to JSON file, or '-' for stdin (default)"
    )
    validate_parser.add_argument(
        "--marker-key",
        default=settings.marker_key,
        help="Key marking the element document (default: %(default)s)"
    )
    validate_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the full validation result as JSON"
    )
    validate_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all output; report through the exit code only."
    )

    args = parser.parse_args()

    from .logging_config import configure
    configure(level=args.log_level, fmt=settings.log_format)

    if args.command == "validate":
        from .api import format_result, validate_text
        from .kernel.errors import EditorCheckError

        try:
            text = _read_input(args.input)
            result = validate_text(text, marker_key=args.marker_key)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(EXIT_ERROR)
        except EditorCheckError as e:
            print(f"Error: [{e.code.value}] {e.message}", file=sys.stderr)
            sys.exit(EXIT_ERROR)

        if not args.quiet:
            if args.as_json:
                print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
            else:
                print(format_result(result))
        if not result.ok:
            sys.exit(EXIT_INVALID)
    else:
        parser.print_help()
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
