# treegrid/style.py

"""ANSI color selection and visible-width measurement for entry names."""


from __future__ import annotations

import unicodedata

from treegrid.entries import TypeCategory

COLOR_GREEN_BOLD = "\x1b[32;1m"
COLOR_BLUE_BOLD = "\x1b[34;1m"
COLOR_CYAN_BOLD = "\x1b[36;1m"
COLOR_RESET = "\x1b[0m"

_CATEGORY_COLORS = {
    TypeCategory.DIRECTORY: COLOR_BLUE_BOLD,
    TypeCategory.EXECUTABLE_FILE: COLOR_GREEN_BOLD,
    TypeCategory.SYMLINK: COLOR_CYAN_BOLD,
}


def color_for(category: TypeCategory) -> str:
    """
    Return the SGR sequence used for ``category``.

    Directories are bold blue, executables bold green and symlinks bold cyan;
    every other category uses the reset sequence.
    """

    return _CATEGORY_COLORS.get(category, COLOR_RESET)


def colorize(text: str, category: TypeCategory) -> str:
    """Wrap ``text`` in the SGR sequence for ``category``, closed by a reset."""
    return f"{color_for(category)}{text}{COLOR_RESET}"


def display_width(text: str) -> int:
    """
    Return the number of terminal columns ``text`` occupies.

    Must only be given plain text: escape sequences are not recognised and
    would be counted. Combining marks take no column and East Asian wide or
    fullwidth characters take two.
    """

    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1
    return width
