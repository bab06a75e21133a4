"""
Multihash CLI - Encode Command

Wrap a pre-computed digest (given as hex) into a multihash.

Usage:
    multihash encode <digest_hex> [--algorithm NAME] [--json]
"""

from __future__ import annotations

import logging
from argparse import Namespace

from multihash import Multihash, MultihashException, from_hex, lookup_name

from .output import EXIT_SUCCESS, print_json, report_rejection, wants_json


logger = logging.getLogger(__name__)


def encode_cmd(args: Namespace) -> int:
    """Handle encode command."""
    name = args.algorithm or args.cli_config.default_algorithm

    try:
        algorithm = lookup_name(name)
        digest = from_hex(args.digest)
        mh = Multihash.from_digest(algorithm, digest)
    except MultihashException as e:
        return report_rejection(args, e)

    logger.info("Encoded %d-byte %s digest", len(mh.digest), algorithm.value)

    if wants_json(args):
        print_json(mh.to_dict())
    else:
        print(mh.to_hex())
    return EXIT_SUCCESS
