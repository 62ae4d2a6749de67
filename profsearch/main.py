"""Command-line entry point for the teacher search service."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from profsearch.catalog import Catalog, CatalogError, load_catalog
from profsearch.config.environment import EnvironmentConfig
from profsearch.config.exceptions import ConfigurationError
from profsearch.config.loader import load_config
from profsearch.config.models import AppConfig
from profsearch.domain.models import SearchableRecord
from profsearch.logging import get_logger
from profsearch.logging.config import configure_logging
from profsearch.logging.context import log_context
from profsearch.matching import (
    RecordFilter,
    SuggestionResolver,
    levenshtein_distance,
    quick_search,
)
from profsearch.normalization import (
    apply_common_corrections,
    expand_abbreviations,
    normalize_text,
)

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Log level priority: CLI > Environment > Config file.

    Args:
        config_path: Optional path to configuration file
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig)

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def resolve_catalog_path(
    cli_path: Optional[Path], app_config: AppConfig, env_config: EnvironmentConfig
) -> Path:
    """
    Pick the catalog file: CLI > PROFSEARCH_CATALOG > config file.

    Raises:
        CatalogError: If no catalog location is configured anywhere
    """
    path = cli_path or env_config.catalog_path or app_config.catalog_path
    if path is None:
        raise CatalogError(
            "No catalog file configured",
            suggestions=[
                "Pass --catalog PATH",
                "Set PROFSEARCH_CATALOG",
                "Set catalog_path in profsearch.yaml",
            ],
        )
    return path


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="profsearch",
        description="Typo- and accent-tolerant search over a teacher catalog snapshot",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: profsearch.yaml if present)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Catalog snapshot file (YAML or JSON)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Filter teachers by name, university or department")
    search.add_argument("query", help="Search text")
    search.add_argument(
        "--expand",
        action="store_true",
        help="Expand abbreviations and apply spelling corrections to the query first",
    )

    suggest = subparsers.add_parser("suggest", help="Suggest matching options")
    suggest.add_argument("query", help="Text typed so far")
    suggest.add_argument(
        "--option",
        dest="options",
        action="append",
        default=None,
        help="Candidate option (repeatable); defaults to the catalog's universities",
    )
    suggest.add_argument("--explain", action="store_true", help="Show which tiers matched")

    quick = subparsers.add_parser("quick", help="Search-as-you-type over teacher names")
    quick.add_argument("query", help="Text typed so far")
    quick.add_argument("--university", default=None, help="Restrict to one university")
    quick.add_argument("--limit", type=int, default=None, help="Maximum number of results")

    normalize = subparsers.add_parser("normalize", help="Print the normalized form of text")
    normalize.add_argument("text")

    distance = subparsers.add_parser("distance", help="Edit distance between normalized texts")
    distance.add_argument("first")
    distance.add_argument("second")

    return parser


def format_record(record: SearchableRecord) -> str:
    """Format a record as one output line."""
    return " | ".join(
        [record.name or "-", record.university or "-", record.department or "-"]
    )


def expand_query(query: str, app_config: AppConfig) -> str:
    """Expand an abbreviation, then correct a common misspelling."""
    expanded = expand_abbreviations(query, app_config.matching.abbreviation_table())
    return apply_common_corrections(expanded, app_config.matching.correction_table())


def run_search(args: argparse.Namespace, app_config: AppConfig, catalog: Catalog) -> None:
    query = expand_query(args.query, app_config) if args.expand else args.query
    result = RecordFilter(max_distance=app_config.matching.max_distance).filter(
        catalog.teachers, query
    )

    if result.is_empty:
        print("No teachers found")
        return

    print(f"{len(result.records)} match(es) [{result.tier.value}]")
    for record in result.records:
        print(format_record(record))


def run_suggest(
    args: argparse.Namespace, app_config: AppConfig, catalog: Optional[Catalog]
) -> None:
    options: List[str] = args.options if args.options else catalog.university_names()
    result = SuggestionResolver(max_distance=app_config.matching.max_distance).resolve(
        args.query, options
    )

    for suggestion in result.suggestions:
        print(suggestion)

    if args.explain:
        for tier, hits in result.tier_hits.items():
            print(f"# {tier.value}: {', '.join(hits) if hits else '-'}")


def run_quick(args: argparse.Namespace, app_config: AppConfig, catalog: Catalog) -> None:
    limit = args.limit if args.limit is not None else app_config.matching.max_suggestions
    records = quick_search(
        catalog.teachers,
        args.query,
        university=args.university,
        max_results=max(limit, 0),
        abbreviations=app_config.matching.abbreviation_table(),
    )
    for record in records:
        print(format_record(record))


def needs_catalog(args: argparse.Namespace) -> bool:
    """Whether the selected command reads the catalog snapshot."""
    if args.command in ("search", "quick"):
        return True
    return args.command == "suggest" and not args.options


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the teacher search CLI.

    Returns:
        Exit code (0 for success, 1 for configuration or catalog errors).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )

        with log_context(command=args.command):
            if args.command == "normalize":
                print(normalize_text(args.text))
                return 0

            if args.command == "distance":
                print(levenshtein_distance(normalize_text(args.first), normalize_text(args.second)))
                return 0

            catalog = None
            if needs_catalog(args):
                catalog = load_catalog(resolve_catalog_path(args.catalog, app_config, env_config))

            with log_context(query=args.query):
                if args.command == "search":
                    run_search(args, app_config, catalog)
                elif args.command == "suggest":
                    run_suggest(args, app_config, catalog)
                elif args.command == "quick":
                    run_quick(args, app_config, catalog)

        return 0

    except CatalogError as e:
        print(f"Catalog Error: {e}", file=sys.stderr)
        logger.error(
            f"Catalog error: {e.message}",
            extra={"event": "catalog.error", "error_type": "CatalogError"},
        )
        return 1
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            f"Configuration error: {e.message}",
            extra={"event": "config.error", "error_type": "ConfigurationError"},
        )
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
