# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path normalization.

A path addresses a nested location and can be written either as a dotted
string (``'config.database.host'``) or as a sequence of string segments
(``['config', 'database', 'host']``). The canonical form is a list of
segments; the dot-joined string is the path id used as a lookup key.

Segments containing a literal dot cannot be told apart from two segments
once turned into a path id.
"""

from __future__ import annotations

from typing import Sequence, Union

from .exceptions import InvalidPathError

PathLike = Union[str, Sequence[str]]


def normalize_path(path: PathLike) -> list[str]:
    """Return the canonical list of segments for a path.

    Args:
        path: Dotted string or sequence of strings.

    Returns:
        A new list of string segments. An empty string yields ``['']``,
        an empty sequence yields ``[]``.

    Raises:
        InvalidPathError: If path has any other shape.

    Example:
        >>> normalize_path('a.b.c')
        ['a', 'b', 'c']
        >>> normalize_path(('a', 'b'))
        ['a', 'b']
    """
    if isinstance(path, str):
        return path.split('.')
    if isinstance(path, (list, tuple)) and all(isinstance(s, str) for s in path):
        return list(path)
    raise InvalidPathError(
        f"path must be either a string or a sequence of strings, "
        f"not {path!r}"
    )


def get_path_id(path: PathLike) -> str:
    """Return the dot-joined identity of a path."""
    return '.'.join(normalize_path(path))
