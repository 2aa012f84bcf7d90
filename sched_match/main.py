#!/usr/bin/env python3
# Path: sched_match/main.py
"""
Schedule Matching (sched_match) - Main Entry Point

Matches human-typed schedule lines against a meeting catalog and
validates each meeting's host against the named instructor.

Data Flow:
    INPUT:   meetings.json, users.json, queries.json
    PROCESS: Candidate retrieval, penalty scoring, decisions
    OUTPUT:  match_report.json plus a console summary

Usage:
    python -m sched_match --meetings meetings.json --queries schedule.json
    python -m sched_match --meetings m.json --users u.json --queries q.json
    python -m sched_match ... --rules strict.yaml --ignore-level-mismatch
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from sched_match.config_loader import ConfigLoader
from sched_match.constants import (
    EXIT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    MENU_HEADER,
    STATUS_FAIL,
    STATUS_OK,
)
from sched_match.core.logger import get_input_logger, setup_ipo_logging
from sched_match.exceptions import SchedMatchError
from sched_match.loaders import CatalogReader
from sched_match.output import ReportGenerator
from sched_match.process.matcher import MatchingService, RulesLoader
from sched_match.process.matcher.text import EditDistanceCache


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print("  SCHED_MATCH - Schedule to Meeting Matching")
    print(MENU_HEADER)
    print()


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='sched_match',
        description='sched_match - Schedule to Meeting Matching',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m sched_match --meetings meetings.json --queries schedule.json
  python -m sched_match --meetings m.json --users u.json --queries q.json --output out.json
        """
    )

    parser.add_argument(
        '--meetings', '-m',
        type=Path,
        required=True,
        help='Meeting catalog (JSON)'
    )

    parser.add_argument(
        '--queries', '-q',
        type=Path,
        required=True,
        help='Schedule queries (JSON)'
    )

    parser.add_argument(
        '--users', '-u',
        type=Path,
        help='User catalog (JSON). Without it, hosts are not validated'
    )

    parser.add_argument(
        '--rules', '-r',
        type=Path,
        help='Rule bundle (YAML). Defaults to SCHED_MATCH_RULES_PATH or the packaged bundle'
    )

    parser.add_argument(
        '--ignore-level-mismatch',
        action='store_true',
        help='Relax level, structural and numeric checks for every query'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Report file (default: SCHED_MATCH_OUTPUT_DIR/match_report.json)'
    )

    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress banner and console summary'
    )

    return parser


def run(args: argparse.Namespace, config: ConfigLoader, logger) -> int:
    """
    Load inputs, match every query and write the report.

    Args:
        args: Parsed command line arguments
        config: Configuration loader
        logger: Logger instance

    Returns:
        Exit code
    """
    rules = RulesLoader(args.rules or config.get('rules_path')).load()

    reader = CatalogReader()
    meetings = reader.read_meetings(args.meetings)
    users = reader.read_users(args.users) if args.users else []
    queries = reader.read_queries(args.queries, args.ignore_level_mismatch)

    logger.info(
        f"Matching {len(queries)} queries against {len(meetings)} meetings "
        f"({len(users)} users)"
    )

    service = MatchingService(
        meetings,
        users,
        config=rules,
        distances=EditDistanceCache(config.get('edit_cache_size', 5000)),
    )
    results = service.match_all(queries)

    generator = ReportGenerator(config)
    report = generator.generate(results)
    path = generator.write(report, args.output)

    if not args.quiet:
        print(generator.to_console(report))
        print(f"\n{STATUS_OK} Report written: {path}")

    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for sched_match.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    if not args.quiet:
        print_banner()

    try:
        config = ConfigLoader()

        setup_ipo_logging(
            log_dir=config.get('log_dir'),
            log_level=config.get('log_level', 'INFO'),
            console_output=config.get('log_console', True) and not args.quiet,
        )
        logger = get_input_logger('main')

        return run(args, config, logger)

    except SchedMatchError as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        return EXIT_ERROR

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())
