"""
Lexical token types for the treeshell command language.

Tokens are immutable value objects compared by type and fields. They carry
no position metadata; their order in the token list is the only position
information the parser needs.
"""

from attrs import frozen

from treeshell.commands.base import CommandType


@frozen
class CommandKeyword:
    command: CommandType

    def __str__(self) -> str:
        return self.command.value


@frozen
class Word:
    text: str

    def __str__(self) -> str:
        return self.text


@frozen
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@frozen
class UnexpectedChar:
    char: str

    def __str__(self) -> str:
        return self.char


@frozen
class PreviousDir:
    def __str__(self) -> str:
        return ".."


@frozen
class Space:
    def __str__(self) -> str:
        return " "


@frozen
class Dot:
    def __str__(self) -> str:
        return "."


@frozen
class Slash:
    def __str__(self) -> str:
        return "/"


@frozen
class And:
    def __str__(self) -> str:
        return "&&"


Token = (
    CommandKeyword
    | Word
    | Number
    | UnexpectedChar
    | PreviousDir
    | Space
    | Dot
    | Slash
    | And
)
