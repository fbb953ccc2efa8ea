#!/usr/bin/env python3
"""
Main entry point for the MSK client-config generator.

Discovers the Amazon MSK clusters in an account and prints configuration for
kaf, kcl or kafkactl.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Optional

# Add current directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from shared.config import RunConfig
from shared.constants import BROKER_STRING_KEYS, DEFAULT_BROKER_TYPE, LOGGING_CONFIG
from shared.emitters import build_emitters, render
from shared.exceptions import MSKRCError
from shared.logging_utils import setup_logging
from shared.resolver import resolve

logger = logging.getLogger("mskrc")

EXIT_HELP = 2
EXIT_INTERRUPTED = 130

SUBCOMMANDS = {
    "kaf": "Generate kaf config",
    "kcl": "Generate kcl config",
    "kafkactl": "Generate kafkactl config",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mskrc",
        description="Generate Kafka client configuration for Amazon MSK clusters",
    )
    parser.add_argument(
        "--alias",
        action="append",
        default=[],
        metavar="CLUSTER:ALIAS",
        help="Alias for a cluster in [cluster]:[alias] format, can be specified multiple times",
    )
    parser.add_argument(
        "--cluster",
        action="append",
        default=[],
        metavar="CLUSTER",
        help="Clusters to include in output, can be specified multiple times",
    )
    parser.add_argument(
        "--region",
        help="AWS region to query (default: AWS_REGION or the profile's region)",
    )
    parser.add_argument(
        "--profile",
        help="AWS profile to use (default: AWS_PROFILE or the default credential chain)",
    )
    parser.add_argument(
        "--broker-type",
        choices=list(BROKER_STRING_KEYS),
        default=DEFAULT_BROKER_TYPE,
        help=f"Bootstrap broker string to use (default: {DEFAULT_BROKER_TYPE})",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOGGING_CONFIG["level"],
        help=f"Log level for messages on stderr (default: {LOGGING_CONFIG['level']})",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while looking up brokers",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="{" + ",".join(SUBCOMMANDS) + "}")
    for name, help_text in SUBCOMMANDS.items():
        subparsers.add_parser(name, help=help_text, description=help_text)

    return parser


def default_directory(config: RunConfig):
    from msk_discovery import MSKDirectory

    return MSKDirectory(config)


def run(
    config: RunConfig,
    fmt: str,
    out: BinaryIO,
    directory_factory: Callable = default_directory,
) -> None:
    """
    Discover, resolve and emit configuration for one client tool.

    Every document is serialized before the first byte is written to ``out``.
    """
    directory = directory_factory(config)
    raw_clusters = directory.list_clusters()

    clusters = resolve(raw_clusters, config.aliases, config.clusters)
    logger.info("Emitting %s config for %d of %d clusters", fmt, len(clusters), len(raw_clusters))

    documents = render(build_emitters(fmt, clusters))
    for document in documents:
        out.write(document)
        out.write(b"\n")
    out.flush()


def main(
    argv: Optional[list] = None,
    out: Optional[BinaryIO] = None,
    directory_factory: Callable = default_directory,
) -> int:
    """Main function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_usage(sys.stderr)
        return EXIT_HELP

    try:
        config = RunConfig.from_args(args)
        setup_logging(config.log_level)
        run(config, args.command, out or sys.stdout.buffer, directory_factory)
    except MSKRCError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"unable to generate {args.command} config: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    return 0


if __name__ == "__main__":
    sys.exit(main())
