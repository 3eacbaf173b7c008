# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ObjectManager - path-addressable access to a nested object.

This module provides the ObjectManager class, which wraps a caller-owned
nested structure of dicts and lists and offers:

    - **Path access**: dotted paths ('a.b.c') or segment sequences
      (['a', 'b', 'c']) for reading and writing nested values
    - **Validation**: per-path validator functions run before each write
    - **Events**: 'get', 'set' and 'change' listeners scoped to a path
    - **Deep merge**: observable merge of plain nested data

The managed object is never copied; all writes mutate it in place.
Intermediate containers are never created by set(): writing below a path
that does not exist returns False.

Example:
    Basic usage::

        data = {'config': {'database': {}}}
        manager = ObjectManager(data)
        manager.set('config.database.host', 'localhost')
        manager.get('config.database.host')   # 'localhost'
        manager.get('config.cache.ttl', 60)   # 60

    With validation and listeners::

        def positive(context):
            if context.value <= 0:
                raise ValueError(f"{context.path_id} must be positive")

        manager = ObjectManager({'port': 80}, {'port': positive})
        manager.add_event_listener('port', 'change', print)
        manager.set('port', 8080)  # prints the change Event
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Callable

from ..accessor import get_object_property, is_object, set_object_property
from ..event import EVENT_TYPES, Event, ValidationContext
from ..exceptions import (
    InvalidMergeArgumentError,
    InvalidRootError,
    InvalidValidationMapError,
)
from ..missing import MISSING
from ..paths import PathLike, get_path_id, normalize_path
from .merging import merge_into
from .subscription import SubscriptionMixin

logger = logging.getLogger(__name__)

Validator = Callable[[ValidationContext], Any]


_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes, Decimal)


def _strictly_equal(a: Any, b: Any) -> bool:
    """Same type and equal value for scalars, identity for anything else.

    NaN is never equal to itself.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, _SCALAR_TYPES):
        return a == b
    return a is b


class ObjectManager(SubscriptionMixin):
    """Path-based reader/writer over a nested object with events.

    Attributes:
        object: The managed root container. Must be a mapping or sequence.
        validation: Optional mapping from path id to validator function.
            Entries that are not callable are ignored.
    """

    __slots__ = ('_object', '_validation', '_event_listeners')

    normalize_path = staticmethod(normalize_path)
    get_path_id = staticmethod(get_path_id)
    event_listener_types = EVENT_TYPES

    def __init__(
        self,
        object: Any,
        validation: Mapping[str, Validator] | None = None,
    ) -> None:
        """Initialize an ObjectManager.

        Args:
            object: The root container to manage (dict, list, or any
                mapping/sequence that is not a string).
            validation: Optional mapping of path id to validator. A
                validator receives a ValidationContext and rejects the
                value by raising.

        Raises:
            InvalidRootError: If object is not a container.
            InvalidValidationMapError: If validation is neither a mapping
                nor None.
        """
        self._event_listeners = {}
        self.object = object
        self.validation = validation

    def __repr__(self) -> str:
        return f"ObjectManager({self._object!r})"

    # ==================== Properties ====================

    @property
    def object(self) -> Any:
        """The managed root container."""
        return self._object

    @object.setter
    def object(self, object: Any) -> None:
        if not is_object(object):
            raise InvalidRootError(
                f"object must be a mapping or sequence, not {type(object).__name__}"
            )
        self._object = object

    @property
    def validation(self) -> Mapping[str, Validator] | None:
        """Validator functions keyed by path id, or None."""
        return self._validation

    @validation.setter
    def validation(self, validation: Mapping[str, Validator] | None) -> None:
        if validation is not None and not isinstance(validation, Mapping):
            raise InvalidValidationMapError(
                f"validation must be a mapping or None, "
                f"not {type(validation).__name__}"
            )
        self._validation = validation

    # ==================== Validation ====================

    def validate_property_value(self, path: PathLike, value: Any) -> None:
        """Run the validator registered for path, if any.

        Lookup is by exact path id; there is no prefix matching.

        Raises:
            InvalidPathError: If path is malformed.
            Exception: Whatever the validator raises, unchanged.
        """
        path = normalize_path(path)
        path_id = get_path_id(path)
        if not self._validation:
            return
        validator = self._validation.get(path_id)
        if callable(validator):
            validator(ValidationContext(value, path, path_id, self._object))

    # ==================== Core API ====================

    def get(self, path: PathLike, default: Any = None) -> Any:
        """Get the value at path and notify 'get' listeners.

        Args:
            path: Dotted string or sequence of segments.
            default: Returned when nothing is stored at path, or when the
                path runs through a non-container.

        Returns:
            The stored value (falsy values and None included) or default.

        Example:
            >>> manager = ObjectManager({'a': {'b': 0}})
            >>> manager.get('a.b', 5)
            0
            >>> manager.get(['a', 'c'], 5)
            5
        """
        path = normalize_path(path)
        value = get_object_property(self._object, path, default)
        self.dispatch_event(path, 'get', Event(self._object, path, 'get', value))
        return value

    def set(self, path: PathLike, value: Any) -> bool:
        """Validate and write value at path, then notify listeners.

        The validator for path runs first; if it raises nothing is written
        and no event is dispatched. After a successful write a 'set' event
        is always dispatched, followed by a 'change' event when value is not
        strictly equal to the previous one. Only plain scalars compare by
        value; anything else compares by identity, so a new but equal dict,
        list, set or dataclass always counts as a change.

        Args:
            path: Dotted string or sequence of segments.
            value: Value to store.

        Returns:
            True if the value was written, False if the path could not be
            reached (see set_object_property).
        """
        self.validate_property_value(path, value)
        path = normalize_path(path)
        previous_value = get_object_property(self._object, path)
        if not set_object_property(self._object, path, value):
            logger.debug("set on %r failed: path not reachable", get_path_id(path))
            return False
        self.dispatch_event(
            path, 'set', Event(self._object, path, 'set', value, previous_value)
        )
        if not _strictly_equal(value, previous_value):
            self.dispatch_event(
                path, 'change', Event(self._object, path, 'change', value, previous_value)
            )
        return True

    def merge(self, merge_object: Any) -> None:
        """Deep merge plain nested data into the managed object.

        Lists replace the target entirely and are rebuilt item by item;
        mappings are merged key by key; MISSING values are skipped. Every
        write goes through set(), so validators and listeners see each
        container reset and each leaf. A raising validator or listener
        stops the merge; writes already done are kept.

        Args:
            merge_object: Mapping or sequence to merge at the root.

        Raises:
            InvalidMergeArgumentError: If merge_object is not a container.

        Example:
            >>> manager = ObjectManager({'a': {'x': 1}})
            >>> manager.merge({'a': {'y': 2}, 'b': [1, 2]})
            >>> manager.object
            {'a': {'x': 1, 'y': 2}, 'b': [1, 2]}
        """
        if not is_object(merge_object):
            raise InvalidMergeArgumentError(
                f"merge_object must be a mapping or sequence, "
                f"not {type(merge_object).__name__}"
            )
        merge_into(self, [], merge_object)

    # ==================== Special Methods ====================

    def __getitem__(self, path: PathLike) -> Any:
        """Get value at path.

        Raises:
            KeyError: If nothing is stored at path.
        """
        path = normalize_path(path)
        value = get_object_property(self._object, path)
        if value is MISSING:
            raise KeyError(get_path_id(path))
        self.dispatch_event(path, 'get', Event(self._object, path, 'get', value))
        return value

    def __setitem__(self, path: PathLike, value: Any) -> None:
        """Set value at path.

        Raises:
            KeyError: If the path cannot be reached.
        """
        if not self.set(path, value):
            raise KeyError(get_path_id(path))

    def __contains__(self, path: PathLike) -> bool:
        """Check if a value is stored at path. No event is dispatched."""
        return get_object_property(self._object, path) is not MISSING

