#!/usr/bin/env python3
"""
Command-line interface for the archetype ranker.

Usage:
    archetype-ranker classify --profiles assets/profiles/example.csv
    archetype-ranker classify --profiles p.json --archetypes a.csv --method angular_distance --top 3
    archetype-ranker archetypes --archetypes assets/archetypes.json
    archetype-ranker convert assets/archetypes.csv assets/archetypes.json
    archetype-ranker serve --port 8000
"""

from __future__ import annotations

import argparse
import logging
import sys

from .classifier import Classifier
from .core.config import Settings, get_settings
from .core.errors import ArchetypeError
from .core.types import DegenerateAnglePolicy, ModelFormat, ScoreMethod
from .loaders import convert_csv_to_json, load_entities
from .report import format_ranking

logger = logging.getLogger("archetype_ranker.cli")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _build_classifier(args: argparse.Namespace, settings: Settings) -> Classifier:
    """Load the archetype model named on the command line or in settings."""
    path = args.archetypes or settings.archetypes_path
    model_format = args.archetypes_format or (
        settings.archetypes_format if not args.archetypes else None
    )
    policy = args.degenerate_policy or settings.degenerate_angle_policy
    return Classifier.from_file(path, model_format, degenerate_policy=policy)


def cmd_classify(args: argparse.Namespace) -> int:
    """Classify every profile in a file and print one report per profile."""
    settings = get_settings()
    method = ScoreMethod(args.method) if args.method else settings.default_method

    try:
        classifier = _build_classifier(args, settings)
        profiles = load_entities(args.profiles, args.profiles_format)
    except (ArchetypeError, FileNotFoundError, ValueError) as e:
        logger.error("Failed to load models: %s", e)
        return 1

    failures = 0
    for profile in profiles:
        try:
            ranking = classifier.classify(profile, method)
        except ArchetypeError as e:
            logger.error("Skipping profile %s: %s", profile.name, e.message)
            failures += 1
            continue

        for line in format_ranking(profile.name, ranking, method, limit=args.top):
            print(line)
        print()

    if failures:
        logger.warning("%d of %d profiles could not be classified", failures, len(profiles))
        return 1
    return 0


def cmd_archetypes(args: argparse.Namespace) -> int:
    """List the loaded archetypes and their normalized facets."""
    settings = get_settings()

    try:
        classifier = _build_classifier(args, settings)
    except (ArchetypeError, FileNotFoundError, ValueError) as e:
        logger.error("Failed to load archetypes: %s", e)
        return 1

    print(f"\nArchetypes ({len(classifier)})")
    print("=" * 50)
    print(f"Facets: {', '.join(sorted(classifier.facet_names))}")
    print()
    for archetype in classifier:
        print(f"{archetype.name}:")
        for facet in sorted(archetype.facets):
            print(f"  {facet:<24} {archetype.facets[facet]: .4f}")

    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert a CSV model file into the JSON model format."""
    try:
        count = convert_csv_to_json(args.src, args.dest)
    except (ArchetypeError, FileNotFoundError) as e:
        logger.error("Conversion failed: %s", e)
        return 1

    print(f"Wrote {count} entities to {args.dest}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "archetype_ranker.api.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        log_level=settings.log_level.lower(),
    )
    return 0


def _add_model_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--archetypes", help="Archetype model file (default: from settings)")
    parser.add_argument(
        "--archetypes-format",
        choices=[f.value for f in ModelFormat],
        help="Archetype file format (default: inferred from suffix)",
    )
    parser.add_argument(
        "--degenerate-policy",
        choices=[p.value for p in DegenerateAnglePolicy],
        help="Zero-angle handling for angular distance",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archetype-ranker",
        description="Rank archetypes by similarity to profiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", help="Log level (default: from settings)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # classify command
    classify_parser = subparsers.add_parser("classify", help="Classify profiles")
    classify_parser.add_argument("--profiles", required=True, help="Profile file (CSV or JSON)")
    classify_parser.add_argument(
        "--profiles-format",
        choices=[f.value for f in ModelFormat],
        help="Profile file format (default: inferred from suffix)",
    )
    classify_parser.add_argument(
        "--method",
        choices=[m.value for m in ScoreMethod],
        help="Scoring method (default: from settings)",
    )
    classify_parser.add_argument("--top", type=int, help="Only show the top N archetypes")
    _add_model_arguments(classify_parser)

    # archetypes command
    archetypes_parser = subparsers.add_parser("archetypes", help="List archetypes")
    _add_model_arguments(archetypes_parser)

    # convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a CSV model to JSON")
    convert_parser.add_argument("src", help="Source CSV file")
    convert_parser.add_argument("dest", help="Destination JSON file")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind host (default: from settings)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: from settings)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "classify": cmd_classify,
        "archetypes": cmd_archetypes,
        "convert": cmd_convert,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
