"""
treeshell command objects.

Each verb lives in its own module; CommandBuilder maps command keywords to
their classes.
"""

from treeshell.commands.base import (
    DEFAULT_FILE_SIZE,
    EXTENSION_LENGTH,
    MAX_FILE_SIZE,
    MAX_NAME_LENGTH,
    Command,
    CommandType,
)
from treeshell.commands.builder import COMMAND_CLASSES, CommandBuilder
from treeshell.commands.cd import CdCommand
from treeshell.commands.ls import LsCommand
from treeshell.commands.mkdir import MkdirCommand
from treeshell.commands.rm import RmCommand
from treeshell.commands.rmdir import RmdirCommand
from treeshell.commands.touch import TouchCommand

__all__ = [
    "Command",
    "CommandType",
    "CommandBuilder",
    "COMMAND_CLASSES",
    "CdCommand",
    "LsCommand",
    "MkdirCommand",
    "TouchCommand",
    "RmCommand",
    "RmdirCommand",
    "MAX_NAME_LENGTH",
    "MAX_FILE_SIZE",
    "DEFAULT_FILE_SIZE",
    "EXTENSION_LENGTH",
]
