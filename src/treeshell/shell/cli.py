"""
Command line entry point for the treeshell console script.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from treeshell import __version__
from treeshell.shell.config import LOG_LEVELS, ShellConfig
from treeshell.shell.repl import Shell

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeshell CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeshell",
        description="Shell-like commands over an in-memory file tree.",
    )
    p.add_argument(
        "-u", "--user",
        default=None,
        help="Name of the user folder under /home (env: TREESHELL_USER).",
    )
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostics on stderr (env: TREESHELL_LOG_LEVEL).",
    )
    p.add_argument(
        "-c", "--command",
        default=None,
        help="Run a single command line and exit.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _read_line(prompt: str) -> str:
    return input(prompt)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the shell.

    Params:
        argv: Arguments without the program name; sys.argv[1:] when omitted

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        config = ShellConfig.from_env(user=args.user, log_level=args.log_level)
    except ValidationError as e:
        print(f"treeshell: invalid configuration\n{e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=config.logging_level,
        stream=sys.stderr,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    shell = Shell(config)
    if args.command is not None:
        return EXIT_OK if shell.run_line(args.command) else EXIT_USAGE

    try:
        shell.run(_read_line)
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
        return EXIT_INTERRUPTED
    print()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
