"""
Session state shared by every command on a line.

A Context owns the node store for the lifetime of the session and tracks
the current directory. It is created once and passed explicitly to each
command's execute(); nothing in treeshell keeps module-level session state.
"""

import logging
from collections.abc import Callable

from treeshell.core.paths import NodePath
from treeshell.core.tree import Node, NodeStore

logger = logging.getLogger(__name__)

DEFAULT_USER = "myuser"

Display = Callable[[str], None]


class Context:
    """
    The live session: node store, root handle and current directory.

    Params:
        store: Node store to operate on; a fresh empty store when omitted
        display: Sink receiving one line of user-facing output per call
    """

    def __init__(self, store: NodeStore | None = None, display: Display | None = None):
        self.store = store if store is not None else NodeStore()
        self.current_dir: Node = self.store.root
        self.display: Display = display if display is not None else print

    @classmethod
    def create(cls, user: str = DEFAULT_USER, display: Display | None = None) -> "Context":
        """
        Build the initial /home/<user> skeleton and start the session in it.

        Params:
            user: Name of the user folder under /home
            display: Output sink, print when omitted

        Returns:
            A context whose current directory is /home/<user>
        """
        context = cls(display=display)
        store = context.store
        home = store.new_folder("home")
        store.add(store.root, home)
        user_dir = store.new_folder(user)
        store.add(home, user_dir)
        context.change_dir(user_dir)
        logger.debug("Created session skeleton for user %s", user)
        return context

    @property
    def root(self) -> Node:
        return self.store.root

    def resolve(self, path: NodePath) -> Node:
        """
        Resolve a path relative to the current directory.

        Raises:
            NodeNotFoundError: If any segment cannot be followed
        """
        return self.store.resolve(self.current_dir, path)

    def change_dir(self, node: Node) -> None:
        self.current_dir = node

    def current_path(self) -> str:
        """Absolute path of the current directory, e.g. "/home/myuser"."""
        return self.store.path_of(self.current_dir)

    def echo(self, message: str) -> None:
        """Send one line of user-facing output to the display sink."""
        self.display(message)
