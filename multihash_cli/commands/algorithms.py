"""
Multihash CLI - Algorithms Command

List the algorithm registry.

Usage:
    multihash algorithms [--json]
"""

from __future__ import annotations

from argparse import Namespace

from multihash import supported_algorithms

from .output import EXIT_SUCCESS, print_json, wants_json


def algorithms_cmd(args: Namespace) -> int:
    """Handle algorithms command."""
    algorithms = supported_algorithms()

    if wants_json(args):
        print_json([
            {"name": a.value, "tag": a.tag, "length": a.length}
            for a in algorithms
        ])
        return EXIT_SUCCESS

    for a in algorithms:
        print(f"0x{a.tag:02x}  {a.value:<10} {a.length} bytes")
    return EXIT_SUCCESS
