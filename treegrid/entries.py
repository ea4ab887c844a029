# treegrid/entries.py

"""
Directory enumeration and entry classification.

This module lists the immediate children of a directory in a deterministic
order and maps each raw ``os.DirEntry`` to a classified
:class:`DirectoryEntry`. Classification never raises: an entry whose type or
metadata cannot be read, or whose name cannot be displayed, is reported as a
:class:`Classification` carrying a :class:`SkipReason` instead.
"""


from __future__ import annotations

import enum
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterable

logger = logging.getLogger(__name__)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class DirectoryReadError(OSError):
    """Raised when a path cannot be opened for listing."""

    def __init__(self, path: str | os.PathLike[str], reason: OSError) -> None:
        super().__init__(reason.errno, reason.strerror or str(reason), os.fspath(path))
        self.path = os.fspath(path)
        self.reason = reason


class TypeCategory(enum.Enum):
    DIRECTORY = "directory"
    REGULAR_FILE = "regular-file"
    EXECUTABLE_FILE = "executable-file"
    SYMLINK = "symlink"
    OTHER = "other"


class SkipReason(enum.Enum):
    METADATA_UNREADABLE = "metadata-unreadable"
    PREFIX_MISMATCH = "prefix-mismatch"
    UNDECODABLE_NAME = "undecodable-name"


@dataclass(frozen=True)
class DirectoryEntry:
    path: str
    display_name: str
    type_category: TypeCategory

    @property
    def is_hidden(self) -> bool:
        return self.display_name.startswith(".")

    @property
    def is_dir(self) -> bool:
        return self.type_category is TypeCategory.DIRECTORY


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one raw entry: either an entry or a skip reason."""

    entry: DirectoryEntry | None = None
    reason: SkipReason | None = None

    @property
    def ok(self) -> bool:
        return self.entry is not None


def scan_directory(path: str | os.PathLike[str]) -> list[os.DirEntry]:
    """
    List the immediate children of a directory in byte-wise path order.

    Parameters
    ----------
    path : str | os.PathLike
        Directory to list.

    Returns
    -------
    list[os.DirEntry]
        Children sorted by the raw bytes of their path, so that uppercase
        names sort before lowercase ones and directories and files are
        interleaved.

    Raises
    ------
    DirectoryReadError
        If ``path`` cannot be opened as a directory.
    """

    try:
        with os.scandir(path) as it:
            children = list(it)
    except OSError as exc:
        raise DirectoryReadError(path, exc) from exc

    children.sort(key=lambda e: os.fsencode(e.path))
    return children


def _category(entry: os.DirEntry) -> TypeCategory:
    """
    Map a raw entry to its display category, first match wins.

    The file type is read from the link itself, never its target.

    Parameters
    ----------
    entry : os.DirEntry
        Raw entry to inspect.

    Returns
    -------
    TypeCategory
        The entry category.

    Raises
    ------
    OSError
        If the type or mode of the entry cannot be read.
    """

    if entry.is_dir(follow_symlinks=False):
        return TypeCategory.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        mode = entry.stat(follow_symlinks=False).st_mode
        if mode & EXECUTE_BITS:
            return TypeCategory.EXECUTABLE_FILE
        return TypeCategory.REGULAR_FILE
    if entry.is_symlink():
        return TypeCategory.SYMLINK
    return TypeCategory.OTHER


def display_name_for(path: str, prefix: str | os.PathLike[str]) -> str | SkipReason:
    """Strip ``prefix`` from ``path``, or return why that is not possible."""
    try:
        name = PurePath(path).relative_to(prefix).as_posix()
    except ValueError:
        return SkipReason.PREFIX_MISMATCH
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return SkipReason.UNDECODABLE_NAME
    return name


def classify_entry(entry: os.DirEntry, prefix: str | os.PathLike[str]) -> Classification:
    """
    Classify one raw directory entry.

    Category assignment is first-match-wins: directory, then regular file
    (executable when any execute bit is set), then symlink, then other.

    Parameters
    ----------
    entry : os.DirEntry
        Raw entry produced by :func:`scan_directory`.
    prefix : str | os.PathLike
        Directory the entry was enumerated under; stripped from the entry
        path to form its display name.

    Returns
    -------
    Classification
        The classified entry, or the reason it was skipped.
    """

    try:
        category = _category(entry)
    except OSError as exc:
        logger.debug("skipping %r: metadata unreadable (%s)", entry.path, exc)
        return Classification(reason=SkipReason.METADATA_UNREADABLE)

    name = display_name_for(entry.path, prefix)
    if isinstance(name, SkipReason):
        logger.debug("skipping %r: %s", entry.path, name.value)
        return Classification(reason=name)

    return Classification(
        entry=DirectoryEntry(path=entry.path, display_name=name, type_category=category)
    )


def classify_entries(
    entries: Iterable[os.DirEntry], prefix: str | os.PathLike[str]
) -> list[DirectoryEntry]:
    """Classify ``entries`` in order, dropping the ones that cannot be classified."""
    out: list[DirectoryEntry] = []
    for raw in entries:
        result = classify_entry(raw, prefix)
        if result.entry is not None:
            out.append(result.entry)
    return out
