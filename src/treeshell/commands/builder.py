"""
Command builder used by the parser.

The parser opens a builder when it meets a command keyword, feeds it each
compiled argument, and calls build() when the command ends at "&&" or at
the end of the line.
"""

from treeshell.commands.base import Command, CommandType
from treeshell.commands.cd import CdCommand
from treeshell.commands.ls import LsCommand
from treeshell.commands.mkdir import MkdirCommand
from treeshell.commands.rm import RmCommand
from treeshell.commands.rmdir import RmdirCommand
from treeshell.commands.touch import TouchCommand
from treeshell.core.paths import Argument

COMMAND_CLASSES: dict[CommandType, type[Command]] = {
    CommandType.CD: CdCommand,
    CommandType.LS: LsCommand,
    CommandType.TOUCH: TouchCommand,
    CommandType.MKDIR: MkdirCommand,
    CommandType.RMDIR: RmdirCommand,
    CommandType.RM: RmCommand,
}


class CommandBuilder:
    """Accumulates arguments for one command until it can be built."""

    def __init__(self, command_type: CommandType):
        self.command_type = command_type
        self.arguments: list[Argument] = []

    def add_argument(self, argument: Argument) -> None:
        self.arguments.append(argument)

    def build(self) -> Command:
        """
        Validate the accumulated arguments and create the command.

        Raises:
            InvalidArgumentsError: If the argument count is wrong for the verb
            InvalidTypeError: If an argument has the wrong kind or shape
        """
        return COMMAND_CLASSES[self.command_type].build(self.arguments)
