"""
treegrid — directory listing and tree rendering for the terminal.

This package provides two directory-inspection tools built on ``pathlib`` and
``os.scandir``:
- a flat lister that packs names into terminal-width-aware columns,
- a tree renderer that draws a directory hierarchy with box-drawing
  connectors.

Both are usable programmatically (functions return strings) and from the
command line (``treegrid-ls`` and ``treegrid-tree``).
"""

from __future__ import annotations

from .columns import FormattedEntry, format_entry, layout_columns, list_directory
from .config import Config, TreeConfig, parse_ls_args, parse_tree_args
from .entries import (
    Classification,
    DirectoryEntry,
    DirectoryReadError,
    SkipReason,
    TypeCategory,
    classify_entry,
    scan_directory,
)
from .tree import build_tree, draw_tree, iter_tree_lines, path_tree

__all__ = [
    "Classification",
    "Config",
    "DirectoryEntry",
    "DirectoryReadError",
    "FormattedEntry",
    "SkipReason",
    "TreeConfig",
    "TypeCategory",
    "build_tree",
    "classify_entry",
    "draw_tree",
    "format_entry",
    "iter_tree_lines",
    "layout_columns",
    "list_directory",
    "parse_ls_args",
    "parse_tree_args",
    "path_tree",
    "scan_directory",
]
