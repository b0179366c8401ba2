"""Create a folder."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from treeshell.commands.base import MAX_NAME_LENGTH, Command, describe_path
from treeshell.core.context import Context
from treeshell.core.paths import Argument, DirSegment, NodePath, split_target
from treeshell.exceptions import InvalidTypeError, NodeTypeError

logger = logging.getLogger(__name__)


@dataclass
class MkdirCommand(Command):
    """mkdir <path>: create an empty folder under the path's parent."""

    name = "mkdir"

    parent_path: NodePath
    dir_name: str

    @classmethod
    def build(cls, arguments: Sequence[Argument]) -> "MkdirCommand":
        cls._check_arity(arguments, 1, 1)
        path = cls._path_of(arguments[0])
        parent_path, last = split_target(path)
        if not isinstance(last, DirSegment):
            raise InvalidTypeError(
                cls.name, f"{describe_path(path)} does not end in a directory name"
            )
        return cls(parent_path=parent_path, dir_name=last.name)

    def execute(self, context: Context) -> None:
        if len(self.dir_name) > MAX_NAME_LENGTH:
            context.echo(f"The dir name cannot be over {MAX_NAME_LENGTH} characters")
            return

        parent = self._resolve(context, self.parent_path)
        if parent is None:
            return

        store = context.store
        try:
            store.add(parent, store.new_folder(self.dir_name))
        except NodeTypeError as e:
            context.echo(str(e))
            return
        logger.debug("Created folder %s under %s", self.dir_name, store.path_of(parent))
