# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ObjectManager exceptions."""

from __future__ import annotations


class ObjectManagerError(Exception):
    """Base exception for ObjectManager errors."""

    pass


class InvalidPathError(ObjectManagerError, TypeError):
    """Raised when a path is neither a dotted string nor a sequence of strings."""

    pass


class InvalidRootError(ObjectManagerError, TypeError):
    """Raised when the managed object is not a container."""

    pass


class InvalidValidationMapError(ObjectManagerError, TypeError):
    """Raised when the validation map is neither a mapping nor None."""

    pass


class InvalidEventTypeError(ObjectManagerError, ValueError):
    """Raised when an event type is not one of 'get', 'set', 'change'."""

    pass


class InvalidCallbackError(ObjectManagerError, TypeError):
    """Raised when an event listener callback is not callable."""

    pass


class InvalidMergeArgumentError(ObjectManagerError, TypeError):
    """Raised when merge() receives something other than a container."""

    pass
