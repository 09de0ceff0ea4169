"""Command-line interface for sitecore-nuget."""

import argparse
import logging
import sys
from pathlib import Path

from schemas.context import PackageContext
from sitecore_nuget.aggregators import MetadataCollector
from sitecore_nuget.pipeline.orchestrator import Orchestrator
from sitecore_nuget.readers import PackageError, PackageReader
from sitecore_nuget.transformers import ItemTransformer
from sitecore_nuget.transformers.paths import resolve_item_path

USAGE = "Usage: sitecore-nuget convert [PATH_TO_SITECORE_PACKAGE]"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stdout,
    )


def convert(args: argparse.Namespace) -> int:
    """Execute the convert command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.package is None:
        logger.info("Command line tool to convert a regular Sitecore package into a NuGet package")
        logger.info(USAGE)
        return 1

    package_path = args.package
    if not package_path.is_file():
        logger.error(f"The file '{package_path}' could not be found. Please provide a valid path")
        logger.info(USAGE)
        return 1

    context = PackageContext.for_source(package_path, args.output)
    if context.package_dir.exists():
        logger.error(
            f"'{context.package_dir}' package directory already exists - "
            "please remove the directory before running this tool"
        )
        return 1

    try:
        manifest = Orchestrator(context).run()

        logger.info(f"NuGet package created at '{context.package_dir}'")
        logger.info(f"  Id: {manifest.metadata.id}")
        logger.info(f"  Version: {manifest.metadata.version or '(none)'}")
        logger.info(f"  Files: {len(manifest.files)}")

        return 0

    except PackageError as e:
        logger.error(f"Failed to create NuGet package: {e}")
        return 1


def inspect(args: argparse.Namespace) -> int:
    """Execute the inspect command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    context = PackageContext.for_source(args.package)

    try:
        reader = PackageReader(context.source_path)
    except PackageError as e:
        logger.error(f"Failed to read package: {e}")
        return 1

    logger.info(f"Package: {context.package_name}")
    item_count = 0
    for key, item in ItemTransformer().load_items(reader):
        item_count += 1
        logger.info(f"  {resolve_item_path(key)}  {item.id}  ({key})")
    logger.info(f"Items: {item_count}")

    metadata = MetadataCollector().collect(reader, context.package_name)
    for key, value in metadata.model_dump().items():
        logger.info(f"  {key}: {value.strip()}")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="sitecore-nuget",
        description="Convert Sitecore packages into NuGet packages",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a Sitecore package into a NuGet package directory",
        description="Serialize the items, copy the files and write a .nuspec for a Sitecore package.",
    )
    convert_parser.add_argument(
        "package",
        type=Path,
        nargs="?",
        help="Path to the Sitecore package (zip)",
    )
    convert_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory to create the NuGet package in (default: next to the package)",
    )
    convert_parser.set_defaults(func=convert)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="List the items and metadata of a Sitecore package",
        description="Show where each item of a Sitecore package would be serialized, without writing anything.",
    )
    inspect_parser.add_argument(
        "package",
        type=Path,
        help="Path to the Sitecore package (zip)",
    )
    inspect_parser.set_defaults(func=inspect)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
