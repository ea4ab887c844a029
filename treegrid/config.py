# treegrid/config.py

"""
Invocation settings for the lister and the tree renderer.

Both parsers are deliberately permissive: recognised flags are consumed and
every other token is taken as the target directory, the last one winning.
"""


from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Sequence

DEFAULT_DIRECTORY = "."
DEFAULT_MAX_DEPTH = 256
LOG_LEVEL_ENV = "TREEGRID_LOG_LEVEL"
LS_FLAGS = ("-a", "-1", "-G")


@dataclass(frozen=True)
class Config:
    show_hidden: bool = False
    one_per_line: bool = False
    show_color: bool = False


@dataclass(frozen=True)
class TreeConfig:
    max_depth: int = DEFAULT_MAX_DEPTH
    follow_symlinks: bool = True


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _target(leftovers: Sequence[str]) -> str:
    return leftovers[-1] if leftovers else DEFAULT_DIRECTORY


def _ls_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="treegrid-ls", add_help=False, allow_abbrev=False)
    parser.add_argument("-a", dest="show_hidden", action="store_true")
    parser.add_argument("-1", dest="one_per_line", action="store_true")
    parser.add_argument("-G", dest="show_color", action="store_true")
    return parser


def _tree_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="treegrid-tree", add_help=False, allow_abbrev=False)
    parser.add_argument("--max-depth", type=_positive_int, default=DEFAULT_MAX_DEPTH)
    parser.add_argument(
        "--follow-symlinks", action=argparse.BooleanOptionalAction, default=True
    )
    return parser


def parse_ls_args(tokens: Sequence[str]) -> tuple[str, Config]:
    """
    Parse lister arguments.

    Parameters
    ----------
    tokens : Sequence[str]
        Argument tokens, without the program name.

    Returns
    -------
    tuple[str, Config]
        The target directory (``"."`` when none is given) and the flags.
    """

    # only the exact flag tokens are options; anything else names the directory
    flags = [t for t in tokens if t in LS_FLAGS]
    leftovers = [t for t in tokens if t not in LS_FLAGS]
    ns = _ls_parser().parse_args(flags)
    config = Config(
        show_hidden=ns.show_hidden,
        one_per_line=ns.one_per_line,
        show_color=ns.show_color,
    )
    return _target(leftovers), config


def parse_tree_args(tokens: Sequence[str]) -> tuple[str, TreeConfig]:
    """Parse tree renderer arguments into a target directory and a ``TreeConfig``."""
    ns, leftovers = _tree_parser().parse_known_args(list(tokens))
    return _target(leftovers), TreeConfig(
        max_depth=ns.max_depth, follow_symlinks=ns.follow_symlinks
    )


def log_level() -> int:
    """Resolve the logging level from the environment, defaulting to WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
