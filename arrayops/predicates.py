# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Predicate scans over integer and string arrays
"""

from typing import Callable, Sequence

import numpy as np

from .utils import NONE_MATCH_DIVISOR, IntArrayLike, as_int_array


def none_match(values: IntArrayLike) -> bool:
    """True if no element is a multiple of NONE_MATCH_DIVISOR (0 is one)."""
    arr = as_int_array(values)
    return not bool(np.any(arr % NONE_MATCH_DIVISOR == 0))


def some_match(values: IntArrayLike, predicate: Callable[[int], bool]) -> bool:
    """True if predicate(v) holds for at least one element; stops at the first hit."""
    return any(predicate(int(v)) for v in as_int_array(values))


def all_match(
    items: Sequence[str],
    transform: Callable[[str], int],
    predicate: Callable[[int], bool],
) -> bool:
    """
    True if predicate(transform(item)) holds for every item.

    An empty `items` is vacuously True.
    """
    for item in items:
        if not predicate(transform(item)):
            return False
    return True
