"""Property path parser using Lark."""

import os
from typing import Any

from lark import Lark
from lark.exceptions import LarkError
from lark.visitors import Transformer

from .errors import InvalidPathError

_g_parser: Lark | None = None


class PathTransformer(Transformer):
    """Transform a path parse tree into its name tokens."""

    def start(self, args: list[Any]) -> tuple[str, ...]:
        return tuple(str(arg) for arg in args)


def parse_path(text: str) -> tuple[str, ...]:
    """Split a dotted property path into its ordered, non-empty name tokens.

    Raises:
        InvalidPathError: text is empty or is not a dot-separated list of
            identifiers (``"a..b"``, ``".a"``, ``"a."``, ``"a b"``).
    """
    global _g_parser

    if not isinstance(text, str):
        raise InvalidPathError(f"Path must be a string, not {type(text).__qualname__}")

    # Threads racing here each build an identical parser; the last one is kept
    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/path.lark", encoding="utf-8") as f:
            grammar = f.read()
        _g_parser = Lark(grammar, parser="lalr")

    try:
        tree = _g_parser.parse(text)
    except LarkError as e:
        raise InvalidPathError(f"Invalid property path {text!r}") from e

    return PathTransformer().transform(tree)


def split_leaf(text: str) -> tuple[tuple[str, ...], str]:
    """Parse a path and split it into the parent tokens and the final token."""
    tokens = parse_path(text)
    return tokens[:-1], tokens[-1]
