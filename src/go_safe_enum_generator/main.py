"""Main entry point for the Go safe enum generator."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from .application.generators import generate_enum_file
from .domain.errors import EnumGenerationError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="go-safe-enum-generator",
        description="Generate type-safe Go enums from '// ENUM Name (a, b, c)' comments",
        epilog="""
Examples:
  # Print the generated code for a file
  go-safe-enum-generator -f auth.go

  # Write to a file, including YAML (un)marshaling
  go-safe-enum-generator -f auth.go -o auth_enums.go --yaml

  # From go generate
  //go:generate go-safe-enum-generator -f $GOFILE -o ${GOFILE%.go}_enums.go

  # Using .env file for configuration
  echo 'ENUM_INPUT_FILE=auth.go' > .env
  go-safe-enum-generator -o auth_enums.go
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Input file to process (optional if ENUM_INPUT_FILE is set)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (defaults to stdout)",
    )
    parser.add_argument(
        "-y",
        "--yaml",
        action="store_true",
        help="Generate YAML marshaler/unmarshaler",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        metavar="DIR",
        help="Also write a debug log file into DIR",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Main entry point for ENUM-comment-to-Go generation."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            input_file=args.file,
            output_file=args.output,
            emit_yaml=args.yaml,
            verbose=args.verbose,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Input file: {config.input_file}")
    logger.debug(f"Output file: {config.output_file or '<stdout>'}")
    logger.debug(f"YAML methods: {config.emit_yaml}")

    try:
        content = generate_enum_file(
            config.input_file, config.output_file, emit_yaml=config.emit_yaml
        )
    except EnumGenerationError as e:
        logger.error(f"[FAILED] {config.input_file}: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error during generation: {e}")
        if config.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    logger.debug(f"Generated {len(content.splitlines())} lines")
    sys.exit(0)


if __name__ == "__main__":
    main()
