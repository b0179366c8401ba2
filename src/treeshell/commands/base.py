"""
Shared command infrastructure.

Every verb is a dataclass deriving from Command. build() is pure
validation of the compiled arguments and raises a CommandSyntaxError
subclass before anything runs; execute() performs the effect on a Context
and reports user-level failures through the context's display instead of
raising.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import ClassVar

from treeshell.core.context import Context
from treeshell.core.paths import (
    Argument,
    NodePath,
    NumberArgument,
    PathArgument,
    format_path,
)
from treeshell.core.tree import Node
from treeshell.exceptions import (
    InvalidArgumentsError,
    InvalidTypeError,
    NodeNotFoundError,
)

# Name and size policy applied when commands execute
MAX_NAME_LENGTH = 12
MAX_FILE_SIZE = 4194304
DEFAULT_FILE_SIZE = 1
EXTENSION_LENGTH = 3

INVALID_PATH_MESSAGE = "Invalid path"
ROOT_ACCESS_MESSAGE = "Cannot access the root directory"


class CommandType(Enum):
    """Known command verbs, in declaration order."""

    CD = "cd"
    LS = "ls"
    TOUCH = "touch"
    MKDIR = "mkdir"
    RMDIR = "rmdir"
    RM = "rm"

    @classmethod
    def keywords_by_priority(cls) -> list["CommandType"]:
        """Return verbs ordered for prefix matching: longest first, then declaration order."""
        return sorted(cls, key=lambda command: -len(command.value))


class Command(ABC):
    """Base class for executable commands."""

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def build(cls, arguments: Sequence[Argument]) -> "Command":
        """
        Validate compiled arguments and create the command.

        Params:
            arguments: Arguments in the order they appeared on the line

        Raises:
            InvalidArgumentsError: If the argument count is wrong
            InvalidTypeError: If an argument has the wrong kind or path shape
        """

    @abstractmethod
    def execute(self, context: Context) -> None:
        """Run the command against the session context."""

    @classmethod
    def _check_arity(
        cls, arguments: Sequence[Argument], minimum: int, maximum: int
    ) -> None:
        count = len(arguments)
        if minimum <= count <= maximum:
            return
        expected = str(minimum) if minimum == maximum else f"{minimum} to {maximum}"
        raise InvalidArgumentsError(cls.name, count, expected)

    @classmethod
    def _path_of(cls, argument: Argument) -> NodePath:
        """Return the path carried by an argument, rejecting numbers and empty paths."""
        if not isinstance(argument, PathArgument):
            raise InvalidTypeError(cls.name, f"expected a path, got number {argument}")
        if not argument.path:
            raise InvalidTypeError(cls.name, "expected a non-empty path")
        return argument.path

    @classmethod
    def _number_of(cls, argument: Argument) -> int:
        if not isinstance(argument, NumberArgument):
            raise InvalidTypeError(cls.name, f"expected a number, got path '{argument}'")
        return argument.value

    def _resolve(self, context: Context, path: NodePath) -> Node | None:
        """Resolve a path, printing the invalid path message on failure."""
        try:
            return context.resolve(path)
        except NodeNotFoundError:
            context.echo(INVALID_PATH_MESSAGE)
            return None

    def __str__(self) -> str:
        return self.name


def describe_path(path: NodePath) -> str:
    """Quote a path for an error message."""
    return f"'{format_path(path)}'"
