# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path traversal over plain nested containers.

Containers are mappings and sequences (strings and bytes excluded).
Sequence items are addressed by canonical decimal segments such as
``'0'`` or ``'12'``.

Neither function creates intermediate containers: a write only succeeds
when every segment before the last one resolves to a container.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from .missing import MISSING
from .paths import PathLike, normalize_path


def is_object(value: Any) -> bool:
    """True if value is a container that paths can descend into."""
    return isinstance(value, (Mapping, Sequence)) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _sequence_index(segment: str) -> int | None:
    """Parse a segment as a sequence index, or None if it is not one."""
    if not (segment.isascii() and segment.isdigit()):
        return None
    if len(segment) > 1 and segment[0] == '0':
        return None
    return int(segment)


def _child(container: Any, segment: str) -> Any:
    """Return container[segment], or MISSING if there is no such item."""
    if isinstance(container, Mapping):
        return container.get(segment, MISSING)
    index = _sequence_index(segment)
    if index is None or index >= len(container):
        return MISSING
    return container[index]


def get_object_property(obj: Any, path: PathLike, default: Any = MISSING) -> Any:
    """Read the value at path.

    Traversal stops as soon as a non-container is met; the result is then
    absent. A zero-length path resolves to obj itself.

    Args:
        obj: Root container.
        path: Dotted string or sequence of segments.
        default: Returned when the resolved value is absent.

    Returns:
        The resolved value, or default if nothing is stored there.
        A stored None is returned as-is.

    Example:
        >>> get_object_property({'a': {'b': 0}}, 'a.b', 5)
        0
        >>> get_object_property({'a': 1}, 'a.b', 5)
        5
    """
    result = obj
    for segment in normalize_path(path):
        if not is_object(result):
            result = MISSING
            break
        result = _child(result, segment)
    if result is MISSING:
        return default
    return result


def set_object_property(obj: Any, path: PathLike, value: Any) -> bool:
    """Assign value at path without creating intermediate containers.

    Args:
        obj: Root container.
        path: Dotted string or sequence of segments.
        value: Value to assign at the last segment.

    Returns:
        True if the value was assigned. False for a zero-length path, when
        an intermediate segment does not resolve to a container, or when
        the last parent cannot take the assignment (read-only container,
        non-index segment on a sequence, index past the end). Nothing is
        mutated when False is returned.
    """
    parts = normalize_path(path)
    if not parts:
        return False

    current = obj
    for segment in parts[:-1]:
        if not is_object(current):
            return False
        current = _child(current, segment)

    last = parts[-1]
    if isinstance(current, MutableMapping):
        current[last] = value
        return True
    if isinstance(current, MutableSequence) and not isinstance(current, bytearray):
        index = _sequence_index(last)
        if index is None or index > len(current):
            return False
        if index == len(current):
            current.append(value)
        else:
            current[index] = value
        return True
    return False
