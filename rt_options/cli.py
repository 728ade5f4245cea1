"""
Command-line interface for rt-options.

Checks options files:
- Loads one record or one record per profile
- Validates every record
- Prints the contents of each record
"""

import argparse
import logging
import sys

from rt_options.config.manager import OptionsManager
from rt_options.options import define_version


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def check_options(args: argparse.Namespace) -> int:
    """Load, validate and display an options file."""
    manager = OptionsManager()
    loaded = manager.load(args.file)

    for index, record in enumerate(loaded.options):
        if not args.quiet:
            print(f"Profile {index}:")
            record.inspect()

    n_profiles = len(loaded.options)
    if loaded.is_valid:
        print(f"{n_profiles} profile(s) valid")
        return 0

    print(f"{len(loaded.invalid_profiles)} of {n_profiles} profile(s) invalid: "
          f"{loaded.invalid_profiles}")
    return 1


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="rt-options: Check radiative transfer options files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Validate and display every profile
    rt-options options.yaml

    # Validate only
    rt-options --quiet options.json
        """,
    )

    parser.add_argument(
        "file",
        type=str,
        help="Path to JSON or YAML options file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the record contents",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=define_version(),
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return check_options(args)
    except Exception as e:
        logging.exception(f"Options check failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
