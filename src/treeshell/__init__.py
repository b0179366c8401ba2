"""
treeshell - shell-like commands over an in-memory file hierarchy

treeshell tokenizes and parses lines such as "mkdir docs && touch docs/a.txt 5"
into command objects and runs them against a simulated tree of folders and
files.
"""

from importlib.metadata import version

from treeshell.core import Context, NodeStore
from treeshell.parsing import parse_line, parse_tokens, tokenize
from treeshell.shell import Shell, ShellConfig

__version__ = version("treeshell")

__all__ = [
    "__version__",
    "Context",
    "NodeStore",
    "Shell",
    "ShellConfig",
    "tokenize",
    "parse_tokens",
    "parse_line",
]
