"""Remove a folder and everything in it."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from treeshell.commands.base import Command, describe_path
from treeshell.core.context import Context
from treeshell.core.paths import Argument, DirSegment, NodePath, split_target
from treeshell.core.tree import NodeKind
from treeshell.exceptions import InvalidTypeError, NodeNotFoundError

logger = logging.getLogger(__name__)

DEPTH_MESSAGE = "Cannot remove directory as it is less deep than the current directory"


@dataclass
class RmdirCommand(Command):
    """
    rmdir <path>: remove the first folder with the given name from the path's parent.

    The removal is refused when the parent folder sits higher in the tree
    than the current directory, which keeps the current directory and its
    ancestors out of reach.
    """

    name = "rmdir"

    parent_path: NodePath
    dir_name: str

    @classmethod
    def build(cls, arguments: Sequence[Argument]) -> "RmdirCommand":
        cls._check_arity(arguments, 1, 1)
        path = cls._path_of(arguments[0])
        parent_path, last = split_target(path)
        if not isinstance(last, DirSegment):
            raise InvalidTypeError(
                cls.name, f"{describe_path(path)} does not end in a directory name"
            )
        return cls(parent_path=parent_path, dir_name=last.name)

    def execute(self, context: Context) -> None:
        parent = self._resolve(context, self.parent_path)
        if parent is None:
            return

        if parent.depth < context.current_dir.depth:
            context.echo(DEPTH_MESSAGE)
            return

        try:
            removed = context.store.remove(parent, self.dir_name, NodeKind.FOLDER)
        except NodeNotFoundError as e:
            context.echo(str(e))
            return
        logger.debug("Removed folder %r", removed)
