"""
Interactive read-execute loop.

The Shell owns one Context for the whole session. Each line is tokenized
and parsed in full before any of its commands run, so a syntax error
anywhere on a line means nothing on that line executes.
"""

import logging
from collections.abc import Callable

from treeshell.core.context import Context, Display
from treeshell.exceptions import CommandSyntaxError
from treeshell.parsing import parse_line
from treeshell.shell.config import ShellConfig

logger = logging.getLogger(__name__)

PROMPT_SUFFIX = "/> "

LineReader = Callable[[str], str | None]


class Shell:
    """Command interpreter bound to a single session context."""

    def __init__(
        self,
        config: ShellConfig | None = None,
        context: Context | None = None,
        display: Display | None = None,
    ):
        """
        Create a shell.

        Params:
            config: Session settings; defaults when omitted
            context: Existing context to drive; a fresh /home/<user> session when omitted
            display: Output sink for a fresh context; print when omitted
        """
        self.config = config if config is not None else ShellConfig()
        self.context = (
            context
            if context is not None
            else Context.create(self.config.user, display=display)
        )

    def prompt(self) -> str:
        """Render the prompt from the current directory, e.g. "/home/myuser/> "."""
        return self.context.current_path().rstrip("/") + PROMPT_SUFFIX

    def run_line(self, line: str) -> bool:
        """
        Parse and execute one line.

        Params:
            line: Raw input; surrounding whitespace and the newline are ignored

        Returns:
            True if the line parsed and its commands ran, False if it was rejected
        """
        line = line.strip()
        logger.debug("Running line %r in %s", line, self.context.current_path())
        try:
            commands = parse_line(line)
        except CommandSyntaxError as e:
            logger.warning("Rejected line %r: %s", line, e)
            self.context.echo(str(e))
            return False

        for command in commands:
            command.execute(self.context)
        return True

    def run(self, read_line: LineReader) -> None:
        """
        Read and run lines until the reader signals end of input.

        Params:
            read_line: Called with the prompt text; returns a line, or None
                (or raises EOFError) at end of input
        """
        logger.info("Session started for user %s", self.config.user)
        while True:
            try:
                line = read_line(self.prompt())
            except EOFError:
                break
            if line is None:
                break
            self.run_line(line)
        logger.info("Session ended")
