"""Create a file."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from treeshell.commands.base import (
    DEFAULT_FILE_SIZE,
    EXTENSION_LENGTH,
    MAX_FILE_SIZE,
    MAX_NAME_LENGTH,
    Command,
    describe_path,
)
from treeshell.core.context import Context
from treeshell.core.paths import Argument, FileSegment, NodePath, split_target
from treeshell.exceptions import InvalidTypeError, NodeTypeError

logger = logging.getLogger(__name__)


@dataclass
class TouchCommand(Command):
    """touch <path> [<size>]: create a file of the given size (default 1)."""

    name = "touch"

    parent_path: NodePath
    file_name: str
    size: int = DEFAULT_FILE_SIZE

    @classmethod
    def build(cls, arguments: Sequence[Argument]) -> "TouchCommand":
        cls._check_arity(arguments, 1, 2)
        path = cls._path_of(arguments[0])
        parent_path, last = split_target(path)
        if not isinstance(last, FileSegment):
            raise InvalidTypeError(
                cls.name, f"{describe_path(path)} does not end in a file name"
            )

        size = DEFAULT_FILE_SIZE
        if len(arguments) == 2:
            size = cls._number_of(arguments[1])
        return cls(parent_path=parent_path, file_name=last.name, size=size)

    def policy_violation(self) -> str | None:
        """Return the message for the first name or size rule broken, if any."""
        if " " in self.file_name:
            return "The file name cannot contain spaces"
        if len(self.file_name) > MAX_NAME_LENGTH:
            return f"The file name cannot be over {MAX_NAME_LENGTH} characters"
        if self.size >= MAX_FILE_SIZE:
            return "The file size can only be up to 4GB"
        if self.size == 0:
            return "Cannot create a file with 0 size"
        if len(self.file_name.split(".")[-1]) != EXTENSION_LENGTH:
            return f"File extension must be {EXTENSION_LENGTH} characters"
        return None

    def execute(self, context: Context) -> None:
        violation = self.policy_violation()
        if violation:
            context.echo(violation)
            return

        parent = self._resolve(context, self.parent_path)
        if parent is None:
            return

        store = context.store
        try:
            store.add(parent, store.new_file(self.file_name, self.size))
        except NodeTypeError as e:
            context.echo(str(e))
            return
        logger.debug(
            "Created file %s (%d) under %s",
            self.file_name,
            self.size,
            store.path_of(parent),
        )
