"""CLI entry point for swim-clean-all."""

import sys


def main() -> int:
    """Main entry point for swim-clean-all CLI."""
    from swimclean.cli import run_cli

    return run_cli(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
