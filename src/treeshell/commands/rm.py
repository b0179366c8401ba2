"""Remove a file."""

from collections.abc import Sequence
from dataclasses import dataclass

from treeshell.commands.base import Command, describe_path
from treeshell.core.context import Context
from treeshell.core.paths import Argument, FileSegment, NodePath, split_target
from treeshell.core.tree import NodeKind
from treeshell.exceptions import InvalidTypeError, NodeNotFoundError


@dataclass
class RmCommand(Command):
    """rm <path>: remove the first file with the given name from the path's parent."""

    name = "rm"

    parent_path: NodePath
    file_name: str

    @classmethod
    def build(cls, arguments: Sequence[Argument]) -> "RmCommand":
        cls._check_arity(arguments, 1, 1)
        path = cls._path_of(arguments[0])
        parent_path, last = split_target(path)
        if not isinstance(last, FileSegment):
            raise InvalidTypeError(
                cls.name, f"{describe_path(path)} does not end in a file name"
            )
        return cls(parent_path=parent_path, file_name=last.name)

    def execute(self, context: Context) -> None:
        parent = self._resolve(context, self.parent_path)
        if parent is None:
            return
        try:
            context.store.remove(parent, self.file_name, NodeKind.FILE)
        except NodeNotFoundError as e:
            context.echo(str(e))
