"""Command-line entry point: read instructions, print chart movements.

Usage:
    top7 < votes.txt
    top7 votes.txt --format json
    top7 votes.txt --max-song-id 500
"""

import argparse
import json
import sys
from pathlib import Path

from top7.contest import Contest
from top7.models import ContestRules, Report
from top7.run import LineError, run_contest


def build_parser() -> argparse.ArgumentParser:
    defaults = ContestRules()
    parser = argparse.ArgumentParser(
        prog="top7",
        description="Score a top-7 song chart contest from a stream of instructions")
    parser.add_argument("input", nargs="?", default="-",
                        help="Path to the instruction file (default: stdin)")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    parser.add_argument("--max-song-id", type=int, default=defaults.max_roster_bound,
                        help=f"Highest allowed roster bound (default: {defaults.max_roster_bound})")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_song_id < 1:
        parser.error("--max-song-id must be positive")

    rules = ContestRules(max_roster_bound=args.max_song_id)

    def print_report(report: Report) -> None:
        for line in report.lines(rules.new_marker):
            print(line)

    def print_error(error: LineError) -> None:
        print(error.message, file=sys.stderr)

    on_report = print_report if args.format == "text" else None

    if args.input == "-":
        # Split on "\n" only; undecodable bytes are replaced
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace", newline="\n")
        run = run_contest(sys.stdin, Contest(rules), on_report, print_error)
    else:
        try:
            f = Path(args.input).open(encoding="utf-8", errors="replace", newline="\n")
        except OSError as e:
            parser.error(f"cannot read {args.input}: {e.strerror}")
        with f:
            run = run_contest(f, Contest(rules), on_report, print_error)

    if args.format == "json":
        print(json.dumps(run.to_dict(), indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
