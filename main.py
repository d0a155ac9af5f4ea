#!/usr/bin/env python3
"""Bot Detector - Entry point"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from botdetector import VERSION, BotDetector, print_report, write_report
from botdetector.patterns import DEFAULT_LOG_FILE, DEFAULT_OUTPUT_FILE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bot Detector - Flag bot-like requests in an access log",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?", default=DEFAULT_LOG_FILE,
                        help=f"Log file to scan (default: {DEFAULT_LOG_FILE})")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_FILE,
                        help=f"Report file (default: {DEFAULT_OUTPUT_FILE})")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Do not print the summary panel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"BotDetector v{VERSION}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)]
    )

    detector = BotDetector(console=None if args.quiet else console)

    try:
        report = detector.analyze_file(args.logfile)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {e}")
        return 1

    try:
        write_report(report, args.output)
    except OSError as e:
        console.print(f"[red]Error:[/] could not write {args.output}: {e}")
        return 1

    console.print(f"Output written to {args.output}")
    if not args.quiet:
        print_report(report.summary, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
