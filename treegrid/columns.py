# treegrid/columns.py

"""
Terminal-width-aware multi-column listing.

Names are laid out in a grid of equal-width cells, one cell per entry in
listing order, wrapping to a new row whenever another cell would not fit in
the terminal. Cell width is derived from the longest *plain* name plus a fixed
gutter; styled text is only ever padded, never measured.
"""


from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from typing import Sequence

from treegrid.config import Config
from treegrid.entries import DirectoryEntry, classify_entries, scan_directory
from treegrid.style import colorize, display_width

logger = logging.getLogger(__name__)

GUTTER_WIDTH = 3
DEFAULT_TERMINAL_WIDTH = 80


@dataclass(frozen=True)
class FormattedEntry:
    raw_text: str
    styled_text: str

    def display_text(self, show_color: bool) -> str:
        return self.styled_text if show_color else self.raw_text


def format_entry(entry: DirectoryEntry, show_color: bool) -> FormattedEntry:
    """
    Derive the layout view of a classified entry.

    Parameters
    ----------
    entry : DirectoryEntry
        Classified entry to display.
    show_color : bool
        Whether ``styled_text`` is wrapped in the SGR sequence for the
        entry category.

    Returns
    -------
    FormattedEntry
        Plain text for width arithmetic and the text to print.
    """

    raw = entry.display_name
    styled = colorize(raw, entry.type_category) if show_color else raw
    return FormattedEntry(raw_text=raw, styled_text=styled)


def terminal_width() -> int:
    """Current terminal column count, or 80 when it cannot be determined."""
    columns = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def layout_columns(entries: Sequence[FormattedEntry], config: Config, width: int) -> str:
    """
    Render entries as a grid (or one per line) and return the output text.

    Parameters
    ----------
    entries : Sequence[FormattedEntry]
        Entries in display order, already filtered for hidden status.
    config : Config
        Supplies ``one_per_line`` and ``show_color``.
    width : int
        Terminal width in columns.

    Returns
    -------
    str
        The rendered listing. Every row ends with a newline; an empty
        ``entries`` yields the empty string.
    """

    if config.one_per_line:
        return "".join(e.display_text(config.show_color) + "\n" for e in entries)

    longest = max((display_width(e.raw_text) for e in entries), default=0)
    column_width = longest + GUTTER_WIDTH
    # a single cell is never padded past the terminal edge
    cell_width = min(width, column_width)

    out: list[str] = []
    line_length = 0
    for e in entries:
        padding = max(0, cell_width - display_width(e.raw_text))
        out.append(e.display_text(config.show_color) + " " * padding)

        line_length += column_width
        if line_length > width or width - line_length < column_width:
            out.append("\n")
            line_length = 0

    if line_length != 0:
        out.append("\n")
    return "".join(out)


def list_directory(
    path: str | os.PathLike[str],
    config: Config,
    width: int | None = None,
) -> str:
    """
    List a directory as a column grid.

    Runs the full flat pipeline: enumerate, classify, drop hidden entries
    unless ``config.show_hidden``, format, lay out.

    Raises
    ------
    DirectoryReadError
        If ``path`` cannot be opened as a directory.
    """

    entries = classify_entries(scan_directory(path), path)
    if not config.show_hidden:
        entries = [e for e in entries if not e.is_hidden]
    logger.debug("listing %d entries of %r", len(entries), os.fspath(path))

    formatted = [format_entry(e, config.show_color) for e in entries]
    return layout_columns(formatted, config, terminal_width() if width is None else width)
