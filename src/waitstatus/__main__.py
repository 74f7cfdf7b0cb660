"""Main entry point for the waitstatus CLI."""

import sys

from .cli import cli


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the waitstatus CLI.

    Args:
        args: Command-line arguments. Defaults to sys.argv[1:]

    Returns:
        int: Exit code
    """
    try:
        cli.main(args=args, prog_name="waitstatus")
    except SystemExit as e:
        return e.code or 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
