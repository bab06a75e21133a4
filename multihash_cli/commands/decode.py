"""
Multihash CLI - Decode Command

Parse a hex multihash and show its parts.

Usage:
    multihash decode <multihash_hex> [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from multihash import Multihash, MultihashException

from .output import EXIT_SUCCESS, print_json, report_rejection, wants_json


logger = logging.getLogger(__name__)


def decode_cmd(args: Namespace) -> int:
    """Handle decode command."""
    try:
        mh = Multihash.from_hex(args.multihash)
    except MultihashException as e:
        return report_rejection(args, e)

    logger.info("Decoded %s multihash", mh.algorithm.value)

    if wants_json(args):
        print_json(mh.to_dict())
        return EXIT_SUCCESS

    print(f"algorithm: {mh.algorithm.value}")
    print(f"tag:       0x{mh.algorithm.tag:02x}")
    print(f"size:      {mh.size}")
    print(f"digest:    {mh.digest.hex()}")
    return EXIT_SUCCESS
