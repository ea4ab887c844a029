# treegrid/tree.py

"""
Filesystem tree rendering utilities.

This module renders a directory structure as a Unicode tree, similar to the
Unix ``tree`` command, in two steps:

- :func:`build_tree` enumerates the filesystem into an ``anytree`` node
  hierarchy,
- :func:`iter_tree_lines` / :func:`draw_tree` walk that hierarchy and draw
  one line per visible entry with box-drawing connectors.

Traversal is deterministic (byte-wise path order, directories and files
interleaved). Entries whose name starts with ``.`` are never shown and hidden
directories are never descended into. A subdirectory that cannot be read, or
that sits at the depth limit, is shown with a single marker child instead of
its contents.

The main entry point is :func:`path_tree`, which returns the rendered tree
as a string.
"""


from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import AbstractSet, Iterator

from anytree import Node

from treegrid.config import TreeConfig
from treegrid.entries import (
    DirectoryReadError,
    TypeCategory,
    classify_entry,
    scan_directory,
)

logger = logging.getLogger(__name__)

TEE = "├── "
LAST = "└── "
VERT = "│   "
SPACE = "    "

ERROR_MARKER = "[error opening dir]"
DEPTH_MARKER = "[max depth reached]"


def is_dir(raw: os.DirEntry, follow_symlinks: bool) -> bool:
    """
    Safely determine whether a raw entry refers to a directory.

    Returns ``False`` instead of raising when the directory status cannot be
    determined (e.g. a dangling symlink or a permission error).
    """

    try:
        return raw.is_dir(follow_symlinks=follow_symlinks)
    except OSError:
        return False


def _marker(parent: Node, message: str) -> Node:
    return Node(
        message,
        parent=parent,
        fs_path=None,
        entry=None,
        skip_reason=None,
        is_dir=False,
        is_symlink=False,
        is_hidden=False,
        error=message,
    )


def _expand(parent: Node, directory: str, depth: int, config: TreeConfig) -> None:
    """
    Attach the children of ``directory`` to ``parent``.

    ``depth`` is the depth of the children being attached (0 for the root's
    children). Every enumerated child becomes a node, including hidden and
    unclassifiable ones, so that connector placement reflects the complete
    listing. Only visible directories are expanded further.
    """

    for raw in scan_directory(directory):
        result = classify_entry(raw, directory)
        entry = result.entry
        category = entry.type_category if entry is not None else None
        hidden = entry is not None and entry.is_hidden

        if category is TypeCategory.DIRECTORY:
            child_is_dir = True
        elif category is TypeCategory.SYMLINK and config.follow_symlinks:
            child_is_dir = is_dir(raw, follow_symlinks=True)
        else:
            child_is_dir = False

        child = Node(
            entry.display_name if entry is not None else raw.name,
            parent=parent,
            fs_path=Path(raw.path),
            entry=entry,
            skip_reason=result.reason,
            is_dir=child_is_dir,
            is_symlink=category is TypeCategory.SYMLINK,
            is_hidden=hidden,
            error=None,
        )

        if entry is None or hidden or not child_is_dir:
            continue

        if depth + 1 >= config.max_depth:
            logger.warning("not descending into %r: depth limit %d reached", raw.path, config.max_depth)
            _marker(child, DEPTH_MARKER)
            continue

        try:
            _expand(child, raw.path, depth + 1, config)
        except DirectoryReadError as exc:
            logger.warning("cannot open directory %r: %s", exc.path, exc.strerror)
            _marker(child, ERROR_MARKER)


def build_tree(root: str | os.PathLike[str], *, config: TreeConfig | None = None) -> Node:
    """
    Build an ``anytree`` hierarchy mirroring the directory at ``root``.

    Parameters
    ----------
    root : str | os.PathLike
        Directory to traverse. The root node is named with this path exactly
        as given.
    config : TreeConfig | None, optional
        Depth limit and symlink policy. Defaults to ``TreeConfig()``.

    Returns
    -------
    anytree.Node
        Root node. Every node carries ``fs_path``, ``entry`` (the classified
        :class:`~treegrid.entries.DirectoryEntry` or ``None``),
        ``skip_reason``, ``is_dir``, ``is_symlink``, ``is_hidden`` and
        ``error`` (the marker text for marker nodes, else ``None``).

    Raises
    ------
    DirectoryReadError
        If ``root`` itself cannot be opened as a directory. Unreadable
        subdirectories do not raise; they receive an error marker child.
    """

    config = config or TreeConfig()
    root_str = os.fspath(root)
    node = Node(
        root_str,
        fs_path=Path(root_str),
        entry=None,
        skip_reason=None,
        is_dir=True,
        is_symlink=False,
        is_hidden=False,
        error=None,
    )
    _expand(node, root_str, 0, config)
    return node


def _printable(node: Node) -> bool:
    if node.error is not None:
        return True
    return node.entry is not None and not node.is_hidden


def _walk(node: Node, depth: int, continuation: AbstractSet[int]) -> Iterator[str]:
    children = node.children
    last_index = len(children) - 1

    for i, child in enumerate(children):
        last = i == last_index
        if _printable(child):
            indent = "".join(VERT if d in continuation else SPACE for d in range(depth))
            yield indent + (LAST if last else TEE) + child.name

        # this level still has siblings to draw below the child's subtree
        inner = continuation if last else continuation | {depth}
        yield from _walk(child, depth + 1, inner)


def iter_tree_lines(node: Node) -> Iterator[str]:
    """
    Yield the rendered lines of a tree built by :func:`build_tree`.

    The first line is the root path. Each following line is prefixed, per
    ancestor depth, by a continuation bar (``│``) when that ancestor still has
    siblings to draw, or by blanks otherwise, then by ``├──`` or, for the
    last child of its directory, ``└──``.
    """

    yield node.name
    yield from _walk(node, 0, frozenset())


def draw_tree(node: Node) -> str:
    """Render a tree built by :func:`build_tree` as a single string."""
    return "\n".join(iter_tree_lines(node))


def path_tree(root: str | os.PathLike[str], *, config: TreeConfig | None = None) -> str:
    """
    Render the directory tree at ``root`` as a string.

    Equivalent to ``draw_tree(build_tree(root, config=config))``.

    Raises
    ------
    DirectoryReadError
        If ``root`` cannot be opened as a directory.
    """

    return draw_tree(build_tree(root, config=config))
