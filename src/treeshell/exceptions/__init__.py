"""
treeshell exception classes.

This package provides all exception types used throughout treeshell for
consistent error handling and reporting.
"""

from treeshell.exceptions.core import (
    CommandNotProvidedError,
    CommandSyntaxError,
    InvalidArgumentsError,
    InvalidCommandError,
    InvalidPathError,
    InvalidTypeError,
    NodeError,
    NodeNotFoundError,
    NodeTypeError,
    TreeShellError,
    UnexpectedTokenError,
)

__all__ = [
    "TreeShellError",
    "CommandSyntaxError",
    "CommandNotProvidedError",
    "InvalidCommandError",
    "InvalidPathError",
    "UnexpectedTokenError",
    "InvalidArgumentsError",
    "InvalidTypeError",
    "NodeError",
    "NodeTypeError",
    "NodeNotFoundError",
]
