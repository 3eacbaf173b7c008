# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Sentinel for absent values.

``None`` is a legitimate stored value, so lookups that find nothing
return ``MISSING`` instead.
"""

from __future__ import annotations

import enum
from typing import Final, Literal


class Missing(enum.Enum):
    _VALUE = enum.auto()

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING: Final[Literal[Missing._VALUE]] = Missing._VALUE
