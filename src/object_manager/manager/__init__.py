# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ObjectManager package - path access, validation and events.

The package is organized into:
- core: ObjectManager facade with get, set, merge and validation
- merging: Recursive deep merge driven through ObjectManager.set
- subscription: Path-scoped event listener registry

Example:
    >>> from object_manager import ObjectManager
    >>> manager = ObjectManager({'config': {}})
    >>> manager.set('config.name', 'MyApp')
    True
    >>> manager.get('config.name')
    'MyApp'
"""

from .core import ObjectManager
from .subscription import SubscriptionMixin

__all__ = ["ObjectManager", "SubscriptionMixin"]
