"""Command-line interface for native-xml-tools."""

import argparse
import logging
import sys
from pathlib import Path

from native_xml_tools.aggregators import DEFAULT_SIDE_DATA_PATH, SideDataAggregator
from native_xml_tools.compilers import InstructionsCompiler
from native_xml_tools.documents import load_document, open_sql_output, write_document
from native_xml_tools.transformers import DoiExtractor, NativeXmlFilter
from schemas.options import FilterOptions


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def strip(args: argparse.Namespace) -> int:
    """Execute the strip command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if not args.input or not args.output:
        args.parser.print_help()
        return 1

    if args.instructions and not args.journal:
        logger.error("Must specify --journal when --instructions is given")
        return 1

    options = FilterOptions(
        uploader=args.uploader,
        author_user_group=args.author_user_group,
        journal=args.journal,
    )
    aggregator = SideDataAggregator(args.data) if args.instructions else None

    try:
        document = load_document(args.input)
        side_data = aggregator.load() if aggregator is not None else None

        result = NativeXmlFilter(options).transform(document, side_data)
        write_document(result.document, args.output)

        if aggregator is not None and result.side_data is not None:
            InstructionsCompiler(args.journal).write(args.instructions, result.side_data)
            aggregator.save(result.side_data)

        logger.info(f"Stripped {args.input}")
        logger.info(f"  Articles: {result.articles}")
        logger.info(f"  Publications removed: {result.removed_publications}")
        logger.info(f"  Submission files removed: {result.removed_submission_files}")
        logger.info(f"  File revisions removed: {result.removed_files}")
        logger.info(f"  Output: {args.output}")

        return 0

    except Exception as e:
        logger.error(f"Failed to strip Native XML: {e}")
        return 1


def import_dois(args: argparse.Namespace) -> int:
    """Execute the import-dois command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if not args.input or not args.output:
        args.parser.print_help()
        return 1

    try:
        document = load_document(args.input)

        count = 0
        with open_sql_output(args.output) as output:
            for statement in DoiExtractor().extract(document):
                output.write(statement)
                count += 1

        logger.info(f"Extracted DOIs from {args.input}")
        logger.info(f"  Statements: {count}")
        logger.info(f"  Output: {args.output}")

        return 0

    except Exception as e:
        logger.error(f"Failed to extract DOIs: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="native-xml-tools",
        description="Prepare OJS Native XML exports for import into another journal",
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

    # -h is taken by --instructions, so help is only available as --help
    strip_parser = subparsers.add_parser(
        "strip",
        help="Remove non-public data from a Native XML file",
        description=(
            "Removes non-public data from Native XML files produced by PKP software. "
            "It processes XML data from a file or stdin and outputs the content to "
            "another file or stdout."
        ),
        add_help=False,
    )
    strip_parser.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit",
    )
    strip_parser.add_argument(
        "-i", "--input",
        type=str,
        help='Input filename, can be replaced by "-" to read from stdin',
    )
    strip_parser.add_argument(
        "-o", "--output",
        type=str,
        help='Output filename, can be replaced by "-" to write to stdout',
    )
    strip_parser.add_argument(
        "-u", "--uploader",
        type=str,
        help="Username of the uploader, if absent the current value will be kept",
    )
    strip_parser.add_argument(
        "-a", "--authorUserGroup",
        dest="author_user_group",
        type=str,
        help="The author user group, if absent the current value will be kept",
    )
    strip_parser.add_argument(
        "-h", "--instructions",
        type=Path,
        help="The path where the pre-import instructions and notes will be generated",
    )
    strip_parser.add_argument(
        "-j", "--journal",
        type=str,
        help="The path of the destination journal, it will be used to generate the database scripts",
    )
    strip_parser.add_argument(
        "-d", "--data",
        type=Path,
        default=DEFAULT_SIDE_DATA_PATH,
        help=(
            "File accumulating locales and genres across runs, used with --instructions "
            f"(default: {DEFAULT_SIDE_DATA_PATH})"
        ),
    )
    strip_parser.set_defaults(func=strip, parser=strip_parser)

    doi_parser = subparsers.add_parser(
        "import-dois",
        help="Generate a SQL script importing the DOIs of a Native XML file",
        description=(
            "Imports missing DOIs from a Native XML file into OJS. It uses the article's "
            "title as a key to match an existing entry in the database, then generates "
            "a SQL script."
        ),
    )
    doi_parser.add_argument(
        "-i", "--input",
        type=str,
        help='Input filename, can be replaced by "-" to read from stdin',
    )
    doi_parser.add_argument(
        "-o", "--output",
        type=str,
        help=(
            "The path where the SQL script will be appended, "
            'can be replaced by "-" to write to stdout'
        ),
    )
    doi_parser.set_defaults(func=import_dois, parser=doi_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
