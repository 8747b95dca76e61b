#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Main CLI entry point for GetHash, the high-speed sparse media hasher.
"""

import argparse
import logging
import sys

from .config import VERSION
from .commands.hash import HashCommand
from .jsonio import enable_json_logging


def setup_logging(verbose: bool):
    """Configure logging for the CLI tool.

    Logs go to stderr; stdout is reserved for the report.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )
    logging.debug("Verbose logging enabled (DEBUG level).")


def _split_extensions(value: str):
    return [part for part in value.split(",") if part.strip()]


def create_parser():
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gethash",
        description="GetHash - High-Speed Media Hasher. Fingerprints large files by "
                    "sampling 16KB from the head, middle and tail.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Save hash results of 2 video files to 'results.log'
  %(prog)s -l results.log video1.mp4 video2.mkv

  # Process all mp4s in silent mode, showing only a progress bar
  %(prog)s -s -l scan.txt *.mp4

  # Walk a library and print '<hash>  <path>' lines
  %(prog)s -r -c /mnt/media
        """
    )

    parser.add_argument("paths", nargs="*", metavar="path",
                        help="Files to hash (directories too, with --recursive)")
    parser.add_argument("-i", "--ignore", action="store_true",
                        help="Ignore video file extension. Process files regardless of extension")
    parser.add_argument("-r", "--recursive", action="store_true",
                        help="Walk directory arguments recursively (symlinks are not followed)")
    parser.add_argument("-l", "--log", metavar="FILE",
                        help="Save results to a file")
    parser.add_argument("-s", "--silent", action="store_true",
                        help="Silent mode. Only show progress bar (requires -l)")
    parser.add_argument("-c", "--compact", action="store_true",
                        help="One '<hash>  <path>' line per file")
    parser.add_argument("--ext", type=_split_extensions, metavar="EXT[,EXT...]",
                        help="Replace the recognized extension list (e.g. --ext mp4,mkv)")
    parser.add_argument("--json", action="store_true",
                        help="Output results as JSON instead of human-readable text")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose (DEBUG) output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.paths:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: at least one path is required", file=sys.stderr)
        return 1

    if args.silent and not args.log:
        print("Error: Silent mode requires a log file (-l).", file=sys.stderr)
        return 1

    if args.json:
        enable_json_logging()
    else:
        setup_logging(args.verbose)

    logging.debug("Parsed arguments: %s", args)

    try:
        command = HashCommand(recursive=args.recursive, accept_all=args.ignore,
                              extensions=args.ext)
        return command.execute(
            paths=args.paths,
            log_path=args.log,
            silent=args.silent,
            compact=args.compact,
            as_json=args.json,
        )

    except KeyboardInterrupt:
        if args.json:
            from .jsonio import error
            return error("hash", "Operation interrupted by user", code=130)
        logging.warning("Operation interrupted by user.")
        return 130
    except Exception as e:
        if args.json:
            from .jsonio import error
            debug_info = {"exception_type": type(e).__name__} if args.verbose else None
            return error("hash", str(e), debug=debug_info, code=1)
        logging.error("Error occurred: %s", e, exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
