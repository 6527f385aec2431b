# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .errors import NotSortedError
from .utils import INT_DTYPE, IntArrayLike, as_int_array, is_non_decreasing

logger = logging.getLogger(__name__)


def merge_sorted(a: IntArrayLike, b: IntArrayLike) -> np.ndarray:
    """
    Merge two non-decreasing arrays into one non-decreasing array.

    Duplicates are kept. On ties the element from `a` comes first.

    Raises
    ------
    NotSortedError : if `a` or `b` is not non-decreasing. Both inputs
                     are checked before any merging happens.
    """
    a = as_int_array(a)
    b = as_int_array(b)
    if not is_non_decreasing(a):
        raise NotSortedError("first array is not sorted in non-decreasing order")
    if not is_non_decreasing(b):
        raise NotSortedError("second array is not sorted in non-decreasing order")

    n, m = a.size, b.size
    logger.debug(f"merge_sorted: merging {n} + {m} elements")

    out = np.empty(n + m, dtype=INT_DTYPE)
    i = j = k = 0
    while i < n and j < m:
        if a[i] <= b[j]:
            out[k] = a[i]
            i += 1
        else:
            out[k] = b[j]
            j += 1
        k += 1

    # at most one of these tails is non-empty
    out[k : k + n - i] = a[i:]
    k += n - i
    out[k:] = b[j:]
    return out
