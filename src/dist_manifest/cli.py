#!/usr/bin/env python3
"""
Command-line front end for inspecting distribution manifests.

Lists the files in a MANIFEST, optionally filtered through MANIFEST.SKIP,
and checks individual paths against the skip masks.
"""

import logging
import re
import sys

from .errors import ManifestError
from .manifest import Manifest


def build_parser():
    """Build the argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="dist-manifest",
        description="Parse and examine a distribution MANIFEST file",
    )
    parser.add_argument(
        "manifest",
        nargs="?",
        default=Manifest.MANIFEST_FILENAME,
        help="MANIFEST file to load (default: ./MANIFEST)",
    )
    parser.add_argument(
        "-s",
        "--skip",
        help="MANIFEST.SKIP file with regular expressions of paths to skip",
    )
    parser.add_argument(
        "-c",
        "--check",
        nargs="+",
        metavar="PATH",
        help="Report whether each PATH is skipped",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Print the number of files in the manifest",
    )
    parser.add_argument(
        "--unskipped",
        action="store_true",
        help="Only list files not matched by the skip list",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary of the loaded files",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for manifest inspection."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        manifest = Manifest(args.manifest, args.skip)
    except ManifestError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.summary:
            print(manifest.get_summary())
        elif args.check:
            for path in args.check:
                status = "skip" if manifest.skipped(path) else "keep"
                print(f"{status} {path}")
        elif args.count:
            print(manifest.file_count)
        else:
            names = manifest.unskipped_files() if args.unskipped else manifest.files
            for name in names:
                print(name)
    except re.error as e:
        print(f"Error: invalid skip mask {e.pattern!r}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
