"""
treeshell parsing components.

This package provides the token types, the tokenizer and the command
parser for the treeshell command language.
"""

from treeshell.parsing.lexer import Tokenizer, tokenize
from treeshell.parsing.parser import (
    CommandParser,
    compile_argument,
    compile_path,
    parse_line,
    parse_tokens,
)
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

__all__ = [
    "Tokenizer",
    "tokenize",
    "CommandParser",
    "compile_argument",
    "compile_path",
    "parse_line",
    "parse_tokens",
    "Token",
    "CommandKeyword",
    "Word",
    "Number",
    "UnexpectedChar",
    "PreviousDir",
    "Space",
    "Dot",
    "Slash",
    "And",
]
