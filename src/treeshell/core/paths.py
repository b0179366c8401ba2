"""
Node paths and compiled command arguments.

A NodePath is an ordered tuple of segments describing how to reach a node
from the current directory, or from the root when the first segment is a
RootSegment. Arguments are what the parser hands to command objects: either
a path or a plain number.
"""

from attrs import frozen


@frozen
class RootSegment:
    def __str__(self) -> str:
        return ""


@frozen
class DirSegment:
    name: str

    def __str__(self) -> str:
        return self.name


@frozen
class ParentSegment:
    def __str__(self) -> str:
        return ".."


@frozen
class FileSegment:
    name: str

    def __str__(self) -> str:
        return self.name


NodePathSegment = RootSegment | DirSegment | ParentSegment | FileSegment

NodePath = tuple[NodePathSegment, ...]


@frozen
class PathArgument:
    path: NodePath

    def __str__(self) -> str:
        return format_path(self.path)


@frozen
class NumberArgument:
    value: int

    def __str__(self) -> str:
        return str(self.value)


Argument = PathArgument | NumberArgument


def format_path(path: NodePath) -> str:
    """
    Render a path back to command language text.

    Params:
        path: Segments to render

    Returns:
        Text such as "/home/docs", "../a.txt" or "/" for a bare root path
    """
    if path == (RootSegment(),):
        return "/"
    return "/".join(str(segment) for segment in path)


def split_target(path: NodePath) -> tuple[NodePath, NodePathSegment]:
    """
    Split a path into the parent path and its final segment.

    Params:
        path: A non-empty path

    Returns:
        Tuple of (segments leading to the parent, last segment)
    """
    return path[:-1], path[-1]
