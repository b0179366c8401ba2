"""
Interactive shell around the treeshell core: configuration, the
read-execute loop and the console entry point.
"""

from treeshell.shell.config import ShellConfig
from treeshell.shell.repl import Shell

__all__ = ["Shell", "ShellConfig"]
