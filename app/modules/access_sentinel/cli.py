#!/usr/bin/env python3
"""
Command Line Interface for Access Sentinel
==========================================

Runs the travel feasibility analysis (and optionally the behavior analysis)
over an access log and prints the result as JSON.

Usage:
    access-sentinel --events access_log.csv
    access-sentinel --synthetic 60 --seed 42 --behavior
    access-sentinel --events access_log.csv --min-status suspicious
"""

import argparse
import sys

import orjson

from app.modules.access_sentinel import __version__
from app.modules.access_sentinel.config import AlertStreamConfig
from app.modules.access_sentinel.container import build_container
from app.modules.access_sentinel.domain.enums import TravelStatus
from app.modules.access_sentinel.domain.exceptions import AccessSentinelError
from app.modules.access_sentinel.repositories import (
    AccessEventRepositoryFactory,
    ReferenceRegistry,
)
from app.modules.access_sentinel.settings import InMemorySettingsStore, JsonFileSettingsStore
from app.modules.access_sentinel.utils import LogLevel, configure_logging

STATUS_RANK = {
    TravelStatus.SAFE: 0,
    TravelStatus.SUSPICIOUS: 1,
    TravelStatus.IMPOSSIBLE: 2,
}


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="access-sentinel",
        description="Access Sentinel - impossible journey and behavior anomaly detection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --events access_log.csv
  %(prog)s --synthetic 60 --seed 42 --behavior
  %(prog)s --events access_log.csv --min-status suspicious --settings settings.json
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    source_group = parser.add_argument_group("Data Source")
    source = source_group.add_mutually_exclusive_group()
    source.add_argument("--events", "-e", type=str, help="CSV access log to analyze")
    source.add_argument(
        "--synthetic", "-n", type=int, metavar="N",
        help="Generate N random access events (default when no --events is given: 60)",
    )
    source_group.add_argument("--seed", type=int, help="Seed for the synthetic generator")

    analysis_group = parser.add_argument_group("Analysis")
    analysis_group.add_argument(
        "--behavior", "-b", action="store_true",
        help="Include behavior patterns and their summary",
    )
    analysis_group.add_argument(
        "--min-status", choices=[status.value for status in TravelStatus],
        default=TravelStatus.SAFE.value,
        help="Only report pairs at or above this status (default: safe)",
    )
    analysis_group.add_argument(
        "--settings", "-s", type=str,
        help="JSON settings file with detection thresholds",
    )

    parser.add_argument(
        "--log-level", choices=[level.value for level in LogLevel],
        default=LogLevel.WARNING.value, help="Log level for stderr output",
    )
    return parser.parse_args(argv)


def build_report(args) -> dict:
    """Run the analysis described by the parsed arguments"""
    registry = ReferenceRegistry.default()
    if args.events:
        repository = AccessEventRepositoryFactory.create_csv_repository(args.events)
    else:
        repository = AccessEventRepositoryFactory.create_synthetic_repository(
            registry,
            count=args.synthetic if args.synthetic is not None else 60,
            seed=args.seed,
        )

    store = JsonFileSettingsStore(args.settings) if args.settings else InMemorySettingsStore()
    container = build_container(
        event_repository=repository,
        registry=registry,
        settings_store=store,
        stream_config=AlertStreamConfig(feed_enabled=False),
    )
    snapshot = container.service.refresh()

    min_rank = STATUS_RANK[TravelStatus(args.min_status)]
    analyses = [
        analysis for analysis in snapshot.analyses if STATUS_RANK[analysis.status] >= min_rank
    ]

    report = {
        "eventCount": snapshot.event_count,
        "thresholds": snapshot.settings.thresholds.model_dump(by_alias=True),
        "statistics": snapshot.statistics.to_dict(),
        "analyses": [analysis.model_dump(by_alias=True, mode="json") for analysis in analyses],
    }
    if args.behavior:
        report["behavior"] = {
            "patterns": [
                pattern.model_dump(by_alias=True, mode="json") for pattern in snapshot.patterns
            ],
            "summary": snapshot.summary.model_dump(by_alias=True, mode="json"),
        }
    return report


def main(argv=None) -> int:
    """Main CLI entry point"""
    args = parse_args(argv)
    configure_logging(LogLevel(args.log_level))

    try:
        report = build_report(args)
    except AccessSentinelError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    print(orjson.dumps(report, option=orjson.OPT_INDENT_2).decode())

    stats = report["statistics"]
    print(
        f"🔍 {report['eventCount']} events, {stats['total']} pairs: "
        f"{stats['impossible']} impossible, {stats['suspicious']} suspicious",
        file=sys.stderr,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
