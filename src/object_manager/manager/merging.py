# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Deep merge of plain nested data into an ObjectManager.

Every write goes through ObjectManager.set, so each leaf and each
container reset is validated and produces its own 'set' and 'change'
events.

Merge rules for the value found at each path of the source:
    - list or tuple: the target is replaced by a new empty list, then
      rebuilt item by item (segments '0', '1', ...)
    - mapping: the target is reset to an empty dict only if it does not
      already hold a container, then each key is merged in turn
    - MISSING: nothing is written, the target is left untouched. Inside
      a list source it becomes None so later items keep their index
    - anything else: written as-is
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..accessor import get_object_property, is_object
from ..missing import MISSING

if TYPE_CHECKING:
    from .core import ObjectManager


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def merge_into(manager: ObjectManager, path: list[str], source: Any) -> Any:
    """Merge source at path and return the value now stored there.

    Args:
        manager: The ObjectManager receiving the data.
        path: Canonical segments of the merge cursor ([] for the root).
        source: Value from the merge source at this path.

    Returns:
        The value at path after merging, MISSING if there is none.
    """
    if _is_sequence(source):
        manager.set(path, [])
        for index, item in enumerate(source):
            if item is MISSING:
                item = None
            _merge_child(manager, [*path, str(index)], item)
    elif isinstance(source, Mapping):
        if not is_object(get_object_property(manager.object, path)):
            manager.set(path, {})
        for key, item in source.items():
            _merge_child(manager, [*path, key], item)
    elif source is not MISSING:
        manager.set(path, source)
    return get_object_property(manager.object, path)


def _merge_child(manager: ObjectManager, path: list[str], item: Any) -> None:
    """Merge one child and write the result back onto its parent."""
    if item is MISSING:
        return
    merged = merge_into(manager, path, item)
    if merged is not MISSING:
        manager.set(path, merged)
