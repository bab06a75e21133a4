"""
Multihash CLI - Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m multihash_cli encode <digest_hex> [--algorithm NAME] [--json]
    python -m multihash_cli decode <multihash_hex> [--json]
    python -m multihash_cli algorithms [--json]
    python -m multihash_cli config --init

Environment Variables:
    MULTIHASH_DEFAULT_ALGORITHM   Algorithm used by encode (default: sha2-256)
    MULTIHASH_LOG_LEVEL           Log level (default: WARNING)
    MULTIHASH_LOG_FILE            Optional log file
    MULTIHASH_OUTPUT_FORMAT       human or json (default: human)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from multihash_cli import __version__
from multihash_cli.commands import algorithms, decode, encode
from multihash_cli.commands.output import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from multihash_cli.config import get_default_config_template, load_config


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="multihash",
        description="Encode, decode and inspect self-describing multihash values.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./multihash.json or ~/.config/multihash/config.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- encode command ---
    encode_parser = subparsers.add_parser(
        "encode",
        help="Wrap a hex digest into a multihash",
        description="Prefix a pre-computed digest with its algorithm tag and length.",
    )
    encode_parser.add_argument(
        "digest",
        type=str,
        help="Digest bytes as hex",
    )
    encode_parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help="Algorithm name, e.g. sha2-256 (default: from config)",
    )
    encode_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    encode_parser.set_defaults(func=encode.encode_cmd)

    # --- decode command ---
    decode_parser = subparsers.add_parser(
        "decode",
        help="Parse a hex multihash",
        description="Validate a hex multihash and show its algorithm, size and digest.",
    )
    decode_parser.add_argument(
        "multihash",
        type=str,
        help="Multihash as hex",
    )
    decode_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    decode_parser.set_defaults(func=decode.decode_cmd)

    # --- algorithms command ---
    algorithms_parser = subparsers.add_parser(
        "algorithms",
        help="List supported algorithms",
        description="Show every registered algorithm with its tag and digest length.",
    )
    algorithms_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="JSON output",
    )
    algorithms_parser.set_defaults(func=algorithms.algorithms_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="multihash.json",
        help="Path for config file (default: multihash.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (MULTIHASH_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        config = args.cli_config
        config_dict = {
            "default_algorithm": config.default_algorithm,
            "log_level": config.log_level,
            "log_file": config.log_file,
            "default_output_format": config.default_output_format,
        }
        print(json.dumps(config_dict, indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: multihash config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=input rejected)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        if args.log_level == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
