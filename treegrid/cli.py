# treegrid/cli.py

"""Command-line entry points for ``treegrid-ls`` and ``treegrid-tree``."""


from __future__ import annotations

import logging
import sys
from typing import Sequence

from treegrid.columns import list_directory
from treegrid.config import log_level, parse_ls_args, parse_tree_args
from treegrid.entries import DirectoryReadError
from treegrid.tree import build_tree, iter_tree_lines

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stderr at the level named by ``TREEGRID_LOG_LEVEL``."""
    logging.basicConfig(
        level=log_level(),
        stream=sys.stderr,
        format="%(name)s: %(levelname)s: %(message)s",
    )


def _report(prog: str, exc: DirectoryReadError) -> int:
    sys.stdout.flush()
    print(f"{prog}: cannot open directory '{exc.path}': {exc.strerror}", file=sys.stderr)
    return 1


def ls_main(argv: Sequence[str] | None = None) -> int:
    """
    Run the column lister.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Argument tokens without the program name. Defaults to
        ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit status: 0 on success, 1 when the directory cannot be listed.
    """

    configure_logging()
    target, config = parse_ls_args(sys.argv[1:] if argv is None else argv)
    logger.debug("ls %r with %s", target, config)

    try:
        output = list_directory(target, config)
    except DirectoryReadError as exc:
        return _report("treegrid-ls", exc)

    sys.stdout.write(output)
    return 0


def tree_main(argv: Sequence[str] | None = None) -> int:
    """
    Run the tree renderer.

    The root path line is printed first, even when the root itself cannot
    be listed.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Argument tokens without the program name. Defaults to
        ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit status: 0 on success, 1 when the root cannot be listed.
    """

    configure_logging()
    target, config = parse_tree_args(sys.argv[1:] if argv is None else argv)
    logger.debug("tree %r with %s", target, config)

    print(target)
    try:
        root = build_tree(target, config=config)
    except DirectoryReadError as exc:
        return _report("treegrid-tree", exc)

    lines = iter_tree_lines(root)
    next(lines)
    for line in lines:
        print(line)
    return 0
