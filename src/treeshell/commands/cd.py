"""Change the current directory."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from treeshell.commands.base import ROOT_ACCESS_MESSAGE, Command, describe_path
from treeshell.core.context import Context
from treeshell.core.paths import Argument, FileSegment, NodePath, RootSegment
from treeshell.exceptions import InvalidTypeError

logger = logging.getLogger(__name__)


@dataclass
class CdCommand(Command):
    """cd <path>: move to a folder."""

    name = "cd"

    path: NodePath

    @classmethod
    def build(cls, arguments: Sequence[Argument]) -> "CdCommand":
        cls._check_arity(arguments, 1, 1)
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
        if not target.is_folder:
            context.echo(f"Not a directory: {target.name}")
            return
        context.change_dir(target)
        logger.debug("Changed directory to %s", context.current_path())
