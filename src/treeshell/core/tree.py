"""
In-memory node store for the simulated file hierarchy.

The store is an arena: it owns every attached node in a dict keyed by a
stable integer id. A node refers to its parent by id and lists its children
by id, so there are no ownership cycles between nodes. Removing a node
drops its slot together with the slots of everything below it.

Size accounting is deliberately shallow. Adding a child increases the
immediate parent folder's size by the child's size; grandparents are not
touched, and removal never decreases any size.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import count

from treeshell.core.paths import (
    DirSegment,
    FileSegment,
    NodePath,
    ParentSegment,
    RootSegment,
)
from treeshell.exceptions import NodeNotFoundError, NodeTypeError

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """The kind of entity a node represents."""

    ROOT = "root"
    FOLDER = "folder"
    FILE = "file"


@dataclass(eq=False)
class Node:
    """
    A single entry in the node store.

    Fields that do not apply to a kind stay None: the root has no name,
    size or parent, and files have no children.

    Params:
        node_id: Stable arena id
        kind: Root, folder or file
        name: Display name (None for the root)
        size: Aggregate size for folders, intrinsic size for files
        parent_id: Arena id of the parent (None for the root and detached nodes)
        children: Child ids in insertion order (None for files)
        depth: Distance from the root
    """

    node_id: int
    kind: NodeKind
    name: str | None = None
    size: int | None = None
    parent_id: int | None = None
    children: list[int] | None = None
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.kind is NodeKind.ROOT

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def __repr__(self) -> str:
        return f"Node({self.kind.value}, id={self.node_id}, name={self.name!r})"


class NodeStore:
    """Arena that owns the root and every node attached below it."""

    def __init__(self) -> None:
        self._ids = count()
        self.root = Node(node_id=next(self._ids), kind=NodeKind.ROOT, children=[])
        self._nodes: dict[int, Node] = {self.root.node_id: self.root}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: Node) -> bool:
        return self._nodes.get(node.node_id) is node

    def get(self, node_id: int) -> Node:
        """
        Look up an attached node by id.

        Raises:
            NodeNotFoundError: If no attached node has this id
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(f"#{node_id}") from None

    # Construction

    def new_folder(self, name: str) -> Node:
        """Allocate a detached, empty folder. It joins the arena on add()."""
        return Node(
            node_id=next(self._ids),
            kind=NodeKind.FOLDER,
            name=name,
            size=0,
            children=[],
        )

    def new_file(self, name: str, size: int) -> Node:
        """Allocate a detached file of the given size. It joins the arena on add()."""
        return Node(node_id=next(self._ids), kind=NodeKind.FILE, name=name, size=size)

    # Accessors

    def name(self, node: Node) -> str | None:
        return node.name

    def size(self, node: Node) -> int | None:
        return node.size

    def depth(self, node: Node) -> int:
        return node.depth

    def parent(self, node: Node) -> Node | None:
        if node.parent_id is None:
            return None
        return self._nodes.get(node.parent_id)

    def children(self, node: Node) -> list[Node] | None:
        """Return the node's children in insertion order, or None for a file."""
        if node.children is None:
            return None
        return [self._nodes[child_id] for child_id in node.children]

    def walk(self, node: Node) -> Iterator[Node]:
        """Yield the node and every descendant, depth first in insertion order."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self.children(current) or []))

    def path_of(self, node: Node) -> str:
        """
        Build the absolute path of a node by following parent links to the root.

        Returns:
            Text such as "/home/myuser", or "/" for the root
        """
        names = []
        current: Node | None = node
        while current is not None and not current.is_root:
            names.append(current.name)
            current = self.parent(current)
        return "/" + "/".join(reversed(names))

    # Mutation

    def add(self, parent: Node, child: Node) -> None:
        """
        Attach a child under a parent.

        Sets the child's parent link and depth, appends it to the parent's
        children and, for folder parents only, adds the child's size to the
        parent's size.

        Params:
            parent: Root or folder receiving the child
            child: Detached node to attach

        Raises:
            NodeTypeError: If the parent is a file
        """
        if parent.children is None:
            raise NodeTypeError(parent.name)

        child.parent_id = parent.node_id
        child.depth = parent.depth + 1
        parent.children.append(child.node_id)
        self._nodes[child.node_id] = child

        if parent.is_folder:
            parent.size += child.size
        logger.debug("Added %r under %r", child, parent)

    def remove(self, node: Node, name: str, kind: NodeKind | None = None) -> Node:
        """
        Detach and drop the first child of a node with the given name.

        Everything the removed child owns is dropped with it. Sizes are not
        adjusted.

        Params:
            node: Node whose children are searched
            name: Name to match
            kind: When given, only children of this kind match

        Returns:
            The removed node (no longer in the store)

        Raises:
            NodeNotFoundError: If no matching child exists
        """
        target = self.find_child(node, name, kind)
        if target is None:
            raise NodeNotFoundError(name)

        node.children.remove(target.node_id)
        for dropped in list(self.walk(target)):
            del self._nodes[dropped.node_id]
        target.parent_id = None
        logger.debug("Removed %r from %r", target, node)
        return target

    # Lookup

    def find_child(
        self, node: Node, name: str, kind: NodeKind | None = None
    ) -> Node | None:
        """Return the first child with a matching name (and kind), or None."""
        for child in self.children(node) or []:
            if child.name == name and (kind is None or child.kind is kind):
                return child
        return None

    def resolve(self, start: Node, path: NodePath) -> Node:
        """
        Walk a path from a starting node.

        Params:
            start: Node the walk begins at (normally the current directory)
            path: Segments to follow

        Returns:
            The node the path leads to

        Raises:
            NodeNotFoundError: On the first segment that cannot be followed
        """
        current = start
        for segment in path:
            if isinstance(segment, RootSegment):
                current = self.root
            elif isinstance(segment, ParentSegment):
                parent = self.parent(current)
                if parent is None:
                    raise NodeNotFoundError("..")
                current = parent
            elif isinstance(segment, (DirSegment, FileSegment)):
                child = self.find_child(current, segment.name)
                if child is None:
                    raise NodeNotFoundError(segment.name)
                current = child
        return current
