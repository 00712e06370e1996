"""
Command-Line Interface for check-keyword.

Usage:
    check-keyword match self name
    check-keyword --file fields.txt
    check-keyword --file fields.txt --edition 2015 --json
    check-keyword --file fields.txt --changed-only --output report.txt
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from check_keyword import __version__
from check_keyword.config import Config, create_default_config
from check_keyword.exceptions import CheckKeywordError
from check_keyword.logging_config import get_logger, setup_logging
from check_keyword.main import ConversionResult, convert_names, read_names
from check_keyword.output.report import ConversionReport
from check_keyword.rust.keywords import Edition

logger = get_logger("cli")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="check-keyword",
        description=(
            "Check whether names are Rust keywords and print a safe "
            "identifier for each."
        ),
        epilog="Weak keywords are reported but not counted as keywords.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Input
    parser.add_argument(
        "names",
        nargs="*",
        help="Candidate identifiers to check",
        metavar="NAME",
    )

    parser.add_argument(
        "-f", "--file",
        type=Path,
        help="File with one candidate name per line ('#' starts a comment line)",
        metavar="FILE",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    parser.add_argument(
        "-e", "--edition",
        choices=[edition.value for edition in Edition],
        help="Rust edition to check against (default: 2018)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Write the report to FILE instead of stdout",
        metavar="FILE",
    )

    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit a JSON report (--no-json for text output)",
    )

    parser.add_argument(
        "--changed-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only list names whose safe form differs from the original",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=None,
        help="Suppress normal output",
    )

    parser.add_argument(
        "--log-level",
        help="Log level (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to FILE",
        metavar="FILE",
    )

    return parser


# Config fields set from command-line options, keyed by argparse dest
ARG_FIELDS = {
    "file": "names_file",
    "output": "output_file",
    "json": "json_output",
    "changed_only": "changed_only",
    "verbose": "verbose",
    "quiet": "quiet",
    "log_level": "log_level",
    "log_file": "log_file",
}


def args_to_config(args: argparse.Namespace) -> Config:
    """
    Convert parsed arguments to Config object.

    Options given on the command line override the config file; options
    left out keep the file's value (or the default without a file).

    Raises:
        ConfigError: If the configuration file cannot be loaded
    """
    if args.config:
        config = Config.load_from_file(args.config)
    else:
        config = create_default_config()

    if args.edition is not None:
        config.edition = Edition.from_value(args.edition)
    for dest, field_name in ARG_FIELDS.items():
        value = getattr(args, dest)
        if value is not None:
            setattr(config, field_name, value)

    return config


def collect_names(args: argparse.Namespace, config: Config) -> List[str]:
    """Gather names from the command line and the names file."""
    names = list(args.names)
    if config.names_file:
        names.extend(read_names(config.names_file))
    return names


def write_output(result: ConversionResult, config: Config) -> None:
    """Print or save the report for a conversion."""
    report = ConversionReport(result, changed_only=config.changed_only)

    if config.output_file:
        if config.json_output:
            report.save_json(config.output_file)
        else:
            report.save_text(config.output_file)
        if not config.quiet:
            print(f"Saved report to {config.output_file}")
        return

    if config.quiet:
        return

    if config.json_output:
        print(report.to_json())
    elif config.verbose:
        print(report.to_text())
    else:
        for line in report.to_lines():
            print(line)


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        config = args_to_config(parsed)
    except CheckKeywordError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    try:
        setup_logging(
            level="DEBUG" if config.verbose else config.log_level,
            log_file=config.log_file,
            verbose=config.verbose,
        )

        names = collect_names(parsed, config)
        if not names:
            parser.error("no names given (pass NAME arguments or --file)")

        result = convert_names(names, config)
        write_output(result, config)
    except CheckKeywordError as e:
        logger.debug("Check failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("File access failed", exc_info=True)
        path = e.filename if e.filename is not None else config.output_file
        print(f"Error: cannot write {path}: {e.strerror or e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
