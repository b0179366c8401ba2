"""
Core treeshell components.

This package provides the in-memory node store, node paths and compiled
arguments, and the session context that commands execute against.
"""

from treeshell.core.context import DEFAULT_USER, Context
from treeshell.core.paths import (
    Argument,
    DirSegment,
    FileSegment,
    NodePath,
    NodePathSegment,
    NumberArgument,
    ParentSegment,
    PathArgument,
    RootSegment,
    format_path,
    split_target,
)
from treeshell.core.tree import Node, NodeKind, NodeStore

__all__ = [
    "Context",
    "DEFAULT_USER",
    "Node",
    "NodeKind",
    "NodeStore",
    "Argument",
    "PathArgument",
    "NumberArgument",
    "NodePath",
    "NodePathSegment",
    "RootSegment",
    "DirSegment",
    "ParentSegment",
    "FileSegment",
    "format_path",
    "split_target",
]
