# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Object-Manager - Path-addressable access to nested objects.

A lightweight, zero-dependency library to read and write nested dict/list
structures through dotted paths, with per-path validators and 'get', 'set'
and 'change' event listeners.
"""

__version__ = "0.1.0"

from .accessor import get_object_property, is_object, set_object_property
from .event import EVENT_TYPES, Event, EventListener, ValidationContext
from .exceptions import (
    InvalidCallbackError,
    InvalidEventTypeError,
    InvalidMergeArgumentError,
    InvalidPathError,
    InvalidRootError,
    InvalidValidationMapError,
    ObjectManagerError,
)
from .manager import ObjectManager
from .missing import MISSING
from .paths import get_path_id, normalize_path

__all__ = [
    # Core classes
    "ObjectManager",
    "Event",
    "EventListener",
    "ValidationContext",
    "EVENT_TYPES",
    "MISSING",
    # Path and accessor functions
    "normalize_path",
    "get_path_id",
    "is_object",
    "get_object_property",
    "set_object_property",
    # Exceptions
    "ObjectManagerError",
    "InvalidPathError",
    "InvalidRootError",
    "InvalidValidationMapError",
    "InvalidEventTypeError",
    "InvalidCallbackError",
    "InvalidMergeArgumentError",
]
