"""
Tokenizer for the treeshell command language.

The tokenizer turns one raw input line into a flat list of tokens. It has
no knowledge of grammar and never fails: characters it does not recognise
become UnexpectedChar tokens and are left for the parser to judge.
"""

import logging

from treeshell.parsing.tokens import (
    And,
    CommandKeyword,
    CommandType,
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

QUOTE = '"'


class Tokenizer:
    """Single pass, left to right scanner over one input line."""

    # Fixed literals tried before anything else, in priority order
    OPERATORS: tuple[tuple[str, type], ...] = (("&&", And), ("..", PreviousDir))

    STRUCTURAL = {".": Dot, "/": Slash, " ": Space}

    def __init__(self, line: str):
        """
        Create a tokenizer for a single line.

        Params:
            line: The raw input line
        """
        self.line = line
        self.cursor = 0

    def tokenize(self) -> list[Token]:
        """
        Scan the whole line and return its tokens in input order.

        Returns:
            List of tokens; empty for an empty line
        """
        self.cursor = 0
        tokens: list[Token] = []
        while self.cursor < len(self.line):
            tokens.append(self._next_token())
        logger.debug("Tokenized %r into %d tokens", self.line, len(tokens))
        return tokens

    def _next_token(self) -> Token:
        rest = self.line[self.cursor :]

        for literal, token_class in self.OPERATORS:
            if rest.startswith(literal):
                self.cursor += len(literal)
                return token_class()

        # Keywords win over words, so "cdrom" splits into cd + rom
        for command in CommandType.keywords_by_priority():
            if rest.startswith(command.value):
                self.cursor += len(command.value)
                return CommandKeyword(command)

        char = rest[0]
        if char in self.STRUCTURAL:
            self.cursor += 1
            return self.STRUCTURAL[char]()

        if char == QUOTE:
            return self._quoted_word()

        if char.isascii() and char.isdigit():
            return self._number()

        if char.isalpha():
            return self._word()

        self.cursor += 1
        return UnexpectedChar(char)

    def _quoted_word(self) -> Word:
        """Read a quoted word; an unterminated quote runs to end of input."""
        start = self.cursor + 1
        end = self.line.find(QUOTE, start)
        if end == -1:
            self.cursor = len(self.line)
            return Word(self.line[start:])
        self.cursor = end + 1
        return Word(self.line[start:end])

    def _number(self) -> Number:
        start = self.cursor
        while (
            self.cursor < len(self.line)
            and self.line[self.cursor].isascii()
            and self.line[self.cursor].isdigit()
        ):
            self.cursor += 1
        return Number(int(self.line[start : self.cursor]))

    def _word(self) -> Word:
        """Read a run of letters and digits; any other character ends the word."""
        start = self.cursor
        while (
            self.cursor < len(self.line)
            and self.line[self.cursor].isalnum()
        ):
            self.cursor += 1
        return Word(self.line[start : self.cursor])


def tokenize(line: str) -> list[Token]:
    """
    Convenience function to tokenize a line.

    Params:
        line: The raw input line

    Returns:
        List of tokens in input order
    """
    return Tokenizer(line).tokenize()
