"""List the contents of a folder."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from treeshell.commands.base import ROOT_ACCESS_MESSAGE, Command, describe_path
from treeshell.core.context import Context
from treeshell.core.paths import Argument, FileSegment, NodePath, RootSegment
from treeshell.core.tree import Node
from treeshell.exceptions import InvalidTypeError


@dataclass
class LsCommand(Command):
    """
    ls [<path>]: print each child of a folder with its size.

    Folders are suffixed with a slash, e.g. "docs/ 8KB" and "a.txt 5KB".
    Without a path the current directory is listed.
    """

    name = "ls"

    path: NodePath = field(default_factory=tuple)

    @classmethod
    def build(cls, arguments: Sequence[Argument]) -> "LsCommand":
        cls._check_arity(arguments, 0, 1)
        if not arguments:
            return cls()

        path = cls._path_of(arguments[0])
        if isinstance(path[-1], (FileSegment, RootSegment)):
            raise InvalidTypeError(
                cls.name, f"{describe_path(path)} does not name a directory"
            )
        return cls(path=path)

    def execute(self, context: Context) -> None:
        target = self._resolve(context, self.path)
        if target is None:
            return
        if target.is_root:
            context.echo(ROOT_ACCESS_MESSAGE)
            return
        children = context.store.children(target)
        if children is None:
            context.echo(f"Not a directory: {target.name}")
            return
        for child in children:
            context.echo(format_entry(child))


def format_entry(node: Node) -> str:
    suffix = "/" if node.is_folder else ""
    return f"{node.name}{suffix} {node.size}KB"
