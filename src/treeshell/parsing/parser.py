"""
Parser for the treeshell command language.

This module turns a token list into executable command objects in a single
pass. Token order is checked against a transition table keyed on the type
of the previous token; argument tokens are gathered into spans and compiled
into typed arguments; each command is built (and so validated) when it ends
at "&&" or at the end of the line. Any error rejects the whole line.
"""

import logging
from collections.abc import Sequence

from treeshell.commands import Command, CommandBuilder
from treeshell.core.paths import (
    Argument,
    DirSegment,
    FileSegment,
    NodePath,
    NodePathSegment,
    NumberArgument,
    ParentSegment,
    PathArgument,
    RootSegment,
)
from treeshell.exceptions import (
    CommandNotProvidedError,
    InvalidCommandError,
    InvalidPathError,
    UnexpectedTokenError,
)
from treeshell.parsing.lexer import tokenize
from treeshell.parsing.tokens import (
    And,
    CommandKeyword,
    Dot,
    Number,
    PreviousDir,
    Slash,
    Space,
    Token,
    UnexpectedChar,
    Word,
)

logger = logging.getLogger(__name__)

ANY_TOKEN: frozenset[type] = frozenset(
    {CommandKeyword, Word, Number, UnexpectedChar, PreviousDir, Space, Dot, Slash, And}
)

# Token types allowed to follow each token type
TRANSITIONS: dict[type, frozenset[type]] = {
    CommandKeyword: frozenset({Space}),
    Space: ANY_TOKEN - {Dot},
    Word: frozenset({And, Slash, Dot, Space}),
    Slash: frozenset({Word, And, Space}),
    Dot: frozenset({Word}),
    PreviousDir: frozenset({Slash}),
    Number: frozenset({Space}),
    And: frozenset({CommandKeyword, Space}),
    UnexpectedChar: ANY_TOKEN,
}

PATH_START_TOKENS = (Word, Slash, PreviousDir)


def describe_token(token: Token | None) -> str:
    """Readable token text for error messages."""
    if token is None:
        return "end of input"
    if isinstance(token, Space):
        return "<space>"
    return str(token)


class CommandParser:
    """Single pass parser from tokens to commands."""

    def __init__(self, tokens: Sequence[Token]):
        """
        Create a parser over a token list.

        Params:
            tokens: Tokens of one input line
        """
        self.tokens = list(tokens)
        self._reset()

    def _reset(self) -> None:
        self.cursor = 0
        self.previous_token: Token | None = None
        self.arg_start: int | None = None
        self.current_command: CommandBuilder | None = None

    def parse(self) -> list[Command]:
        """
        Parse the tokens into commands, in the order they appear.

        Returns:
            One command per verb on the line

        Raises:
            CommandNotProvidedError: If there are no tokens
            InvalidCommandError: If a command does not start with a known verb
            UnexpectedTokenError: If the token order is invalid
            InvalidPathError: If a path uses '.' incorrectly
            InvalidArgumentsError: If a verb gets the wrong number of arguments
            InvalidTypeError: If a verb gets an argument of the wrong kind
        """
        if not self.tokens:
            raise CommandNotProvidedError()

        self._reset()
        commands: list[Command] = []

        for token in self.tokens:
            self._validate_token_order(token)

            if isinstance(token, CommandKeyword):
                if self.current_command is not None:
                    # two verbs need "&&" between them
                    raise UnexpectedTokenError(
                        describe_token(token), describe_token(self.previous_token)
                    )
                self.current_command = CommandBuilder(token.command)
            elif isinstance(token, And):
                self._close_argument()
                self._finish_command(commands)
            elif isinstance(token, Space):
                self._close_argument()
            elif isinstance(token, UnexpectedChar):
                logger.warning("Skipping unexpected character %r", token.char)
            elif self.arg_start is None:
                if self.current_command is None:
                    raise InvalidCommandError(describe_token(token))
                self.arg_start = self.cursor

            self.previous_token = token
            self.cursor += 1

        self._close_argument()
        self._finish_command(commands)
        return commands

    def _validate_token_order(self, token: Token) -> None:
        """Check the token against the transition table for the previous token."""
        if self.previous_token is None:
            if not isinstance(token, CommandKeyword):
                raise InvalidCommandError(describe_token(token))
            return

        allowed = TRANSITIONS[type(self.previous_token)]
        if type(token) not in allowed:
            raise UnexpectedTokenError(
                describe_token(token), describe_token(self.previous_token)
            )

    def _close_argument(self) -> None:
        """Compile the open argument span, if any, into the current command."""
        if self.arg_start is None:
            return
        argument = compile_argument(self.tokens[self.arg_start : self.cursor])
        self.current_command.add_argument(argument)
        self.arg_start = None

    def _finish_command(self, commands: list[Command]) -> None:
        if self.current_command is None:
            return
        command = self.current_command.build()
        self.current_command = None
        logger.debug("Built command %r", command)
        commands.append(command)


def compile_argument(tokens: Sequence[Token]) -> Argument:
    """
    Compile an argument span into a typed argument.

    Params:
        tokens: The span, without surrounding spaces

    Returns:
        PathArgument for spans starting with a name, '/' or '..';
        NumberArgument for a lone number

    Raises:
        UnexpectedTokenError: If the span starts with anything else
        InvalidPathError: If the path is malformed
    """
    first = tokens[0] if tokens else None
    if isinstance(first, PATH_START_TOKENS):
        return PathArgument(compile_path(tokens))
    if isinstance(first, Number) and len(tokens) == 1:
        return NumberArgument(first.value)
    raise UnexpectedTokenError(describe_token(first))


def compile_path(tokens: Sequence[Token]) -> NodePath:
    """
    Compile path tokens into node path segments.

    A leading '/' becomes a root segment, names become directory segments
    and '..' becomes a parent segment. A '.' followed by a name turns the
    preceding directory segment into a file segment ("name.ext"), or adds
    a bare ".ext" file segment when there is none, and ends the path: only
    one extension is recognised.

    Raises:
        InvalidPathError: If a '.' has nothing before it or no name after it
    """
    segments: list[NodePathSegment] = []
    if tokens and isinstance(tokens[0], Slash):
        segments.append(RootSegment())

    for index, token in enumerate(tokens):
        if isinstance(token, Word):
            segments.append(DirSegment(token.text))
        elif isinstance(token, PreviousDir):
            segments.append(ParentSegment())
        elif isinstance(token, Dot):
            if not segments:
                raise InvalidPathError("'.' must follow a name")
            following = tokens[index + 1] if index + 1 < len(tokens) else None
            if not isinstance(following, Word):
                raise InvalidPathError("'.' must be followed by an extension")

            last = segments[-1]
            if isinstance(last, DirSegment):
                segments[-1] = FileSegment(f"{last.name}.{following.text}")
            else:
                segments.append(FileSegment(f".{following.text}"))
            break

    return tuple(segments)


def parse_tokens(tokens: Sequence[Token]) -> list[Command]:
    """
    Convenience function to parse a token list.

    Raises:
        CommandSyntaxError: If the tokens do not form valid commands
    """
    return CommandParser(tokens).parse()


def parse_line(line: str) -> list[Command]:
    """
    Tokenize and parse one input line.

    Params:
        line: Raw input text

    Returns:
        Commands in execution order

    Raises:
        CommandSyntaxError: If the line does not form valid commands
    """
    return parse_tokens(tokenize(line))
