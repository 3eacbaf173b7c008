# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Event and validation records passed to user callbacks."""

from __future__ import annotations

from typing import Any, Callable

from .exceptions import InvalidEventTypeError
from .missing import MISSING

EVENT_TYPES: tuple[str, ...] = ('get', 'set', 'change')


def validate_event_type(type: str) -> None:
    """Raise InvalidEventTypeError unless type is a known event type."""
    if type not in EVENT_TYPES:
        raise InvalidEventTypeError(f"type {type!r} is not a valid type")


class Event:
    """Notification delivered to event listeners.

    Attributes:
        object: The managed root object.
        path: Canonical list of segments the event refers to.
        type: One of 'get', 'set', 'change'.
        value: The value read or written, MISSING for bare dispatches.
        previous_value: The value before a write. Only meaningful for
            'set' and 'change'; MISSING when the path was empty before.
    """

    __slots__ = ('object', 'path', 'type', 'value', 'previous_value')

    def __init__(
        self,
        object: Any,
        path: list[str],
        type: str,
        value: Any = MISSING,
        previous_value: Any = MISSING,
    ) -> None:
        self.object = object
        self.path = path
        self.type = type
        self.value = value
        self.previous_value = previous_value

    def __repr__(self) -> str:
        return (
            f"Event({self.type!r}, path={'.'.join(self.path)!r}, "
            f"value={self.value!r}, previous_value={self.previous_value!r})"
        )


class EventListener:
    """A (type, callback) registration in a listener bucket."""

    __slots__ = ('type', 'callback')

    def __init__(self, type: str, callback: Callable[[Any], Any]) -> None:
        self.type = type
        self.callback = callback

    def __repr__(self) -> str:
        return f"EventListener({self.type!r}, {self.callback!r})"

    def matches(self, type: str, callback: Callable[[Any], Any]) -> bool:
        return self.type == type and self.callback == callback


class ValidationContext:
    """Argument handed to validator functions before a write.

    Validators reject a value by raising; the return value is ignored.
    """

    __slots__ = ('value', 'path', 'path_id', 'object')

    def __init__(self, value: Any, path: list[str], path_id: str, object: Any) -> None:
        self.value = value
        self.path = path
        self.path_id = path_id
        self.object = object

    def __repr__(self) -> str:
        return f"ValidationContext({self.path_id!r}, value={self.value!r})"
