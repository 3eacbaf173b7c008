# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Event listener registry for ObjectManager.

Listeners are kept per path id, in registration order. Dispatch is exact:
a listener on 'config' is not notified of writes to 'config.name'.

Event types:
    - 'get': a value was read through ObjectManager.get
    - 'set': a value was written (fires on every successful write)
    - 'change': a write replaced the previous value with a different one
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..event import Event, EventListener, validate_event_type
from ..exceptions import InvalidCallbackError
from ..paths import PathLike, get_path_id, normalize_path

logger = logging.getLogger(__name__)

EventCallback = Callable[[Any], Any]


class SubscriptionMixin:
    """Mixin adding path-scoped event listeners.

    The host class must provide an ``object`` attribute (the managed root)
    and initialize ``_event_listeners`` to an empty dict.
    """

    __slots__ = ()

    _event_listeners: dict[str, list[EventListener]]
    object: Any

    @property
    def event_listeners(self) -> dict[str, list[EventListener]]:
        """Listener buckets keyed by path id."""
        return self._event_listeners

    def add_event_listener(
        self, path: PathLike, type: str, callback: EventCallback
    ) -> None:
        """Register a callback for events of a given type at path.

        Args:
            path: Dotted string or sequence of segments.
            type: 'get', 'set' or 'change'.
            callback: Called with the Event (or the custom event passed to
                dispatch_event).

        Raises:
            InvalidPathError: If path is malformed.
            InvalidEventTypeError: If type is unknown.
            InvalidCallbackError: If callback is not callable.

        Example:
            >>> manager.add_event_listener('user.name', 'change',
            ...     lambda event: print(event.previous_value, '->', event.value))
        """
        path_id = get_path_id(path)
        validate_event_type(type)
        if not callable(callback):
            raise InvalidCallbackError("callback must be callable")
        self._event_listeners.setdefault(path_id, []).append(
            EventListener(type, callback)
        )
        logger.debug("added %r listener on %r", type, path_id)

    def remove_event_listener(
        self, path: PathLike, type: str, callback: EventCallback
    ) -> None:
        """Remove every registration of callback for type at path.

        Does nothing if no registration matches. The bucket itself is kept
        even when it ends up empty.
        """
        path_id = get_path_id(path)
        validate_event_type(type)
        bucket = self._event_listeners.get(path_id)
        if bucket is None:
            return
        survivors = [
            listener for listener in bucket
            if not listener.matches(type, callback)
        ]
        removed = len(bucket) - len(survivors)
        bucket[:] = survivors
        if removed:
            logger.debug("removed %d %r listener(s) from %r", removed, type, path_id)

    def dispatch_event(
        self, path: PathLike, type: str, event: Any = None
    ) -> None:
        """Call the listeners registered for type at path.

        Listeners run synchronously in registration order. Exceptions
        raised by a listener propagate to the caller and stop the dispatch.
        Listeners added or removed during a dispatch only take effect on
        the next one.

        Args:
            path: Dotted string or sequence of segments.
            type: 'get', 'set' or 'change'.
            event: Object passed to the callbacks. Defaults to an Event
                carrying the root object, path and type.
        """
        path = normalize_path(path)
        path_id = get_path_id(path)
        validate_event_type(type)
        bucket = self._event_listeners.get(path_id)
        if bucket is None:
            return
        if event is None:
            event = Event(self.object, path, type)
        listeners = [listener for listener in bucket if listener.type == type]
        if listeners:
            logger.debug(
                "dispatching %r on %r to %d listener(s)", type, path_id, len(listeners)
            )
        for listener in listeners:
            listener.callback(event)
