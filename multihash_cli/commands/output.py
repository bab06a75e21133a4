"""
Shared output helpers for CLI commands.
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from typing import Any

from multihash import MultihashException


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INPUT_REJECTED = 2


def wants_json(args: Namespace) -> bool:
    """True if --json was passed or the config asks for JSON output."""
    if getattr(args, "json", False):
        return True
    config = getattr(args, "cli_config", None)
    return config is not None and config.default_output_format == "json"


def print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


def report_rejection(args: Namespace, error: MultihashException) -> int:
    """Print a rejected-input error and return the matching exit code."""
    if wants_json(args):
        print(error.to_error_model().model_dump_json(indent=2))
    else:
        print(f"Error [{error.code}]: {error.message}", file=sys.stderr)
    return EXIT_INPUT_REJECTED
