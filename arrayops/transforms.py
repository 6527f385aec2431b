# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Copying, rewriting and filtering of integer arrays
"""

import logging
from typing import MutableSequence, Union

import numpy as np

from .errors import RangeError
from .utils import NEAR_MAX_WINDOW, IntArrayLike, as_int_array

logger = logging.getLogger(__name__)


def copy_range(values: IntArrayLike, start: int, end: int) -> np.ndarray:
    """
    Copy of values[start:end].

    Both `start` and `end` must lie in [0, len(values)) and start <= end,
    so the last element can never be part of the copy.

    Raises
    ------
    RangeError : if the bounds are violated.
    """
    arr = as_int_array(values)
    n = arr.size
    if not (0 <= start < n and 0 <= end < n) or start > end:
        raise RangeError(f"invalid range [{start}, {end}) for array of length {n}")
    return arr[start:end].copy()


def replace(values: Union[MutableSequence[int], np.ndarray]):
    """
    In place: double every even-indexed element, negate every odd-indexed one.

    `values` itself is modified and returned. There is no locking, so two
    callers must not replace the same buffer concurrently. See `replaced`
    for a version that leaves the input alone.

    A warning is logged for any ndarray that has a `.base`, i.e. one that
    does not own its data. That covers slices as well as reshape and
    ravel results; the check does not look at how much memory is shared.
    """
    if isinstance(values, np.ndarray) and values.base is not None:
        logger.warning("replace(): input is a view, its base array is modified too")
    for i in range(len(values)):
        values[i] = values[i] * 2 if i % 2 == 0 else -values[i]
    return values


def replaced(values: IntArrayLike) -> np.ndarray:
    """Like `replace`, but returns a new array and leaves `values` untouched."""
    return replace(as_int_array(values).copy())


def second_max(values: IntArrayLike) -> int:
    """
    The second-largest distinct value.

    Raises
    ------
    ValueError : if there are fewer than two distinct values.
    """
    uniq = np.unique(as_int_array(values))  # sorted ascending
    if uniq.size < 2:
        raise ValueError("second_max() needs at least two distinct values")
    return int(uniq[-2])


def rearrange_negatives_then_positives(values: IntArrayLike) -> np.ndarray:
    """
    Negatives in reverse order, then positives in reverse order.

    Zeros are neither and are dropped.
    e.g. [3, -5, 4, -7, 2, 9] -> [-7, -5, 9, 2, 4, 3]
    """
    rev = as_int_array(values)[::-1]
    return np.concatenate([rev[rev < 0], rev[rev > 0]])


def filter_near_max(values: IntArrayLike) -> np.ndarray:
    """Elements greater than max(values) - NEAR_MAX_WINDOW, original order kept."""
    arr = as_int_array(values)
    if arr.size == 0:
        return arr.copy()
    return arr[arr > arr.max() - NEAR_MAX_WINDOW]


def insert_at(values: IntArrayLike, start: int, inserted: IntArrayLike) -> np.ndarray:
    """
    New array with `inserted` spliced in before index `start`.

    Raises
    ------
    RangeError : unless 0 <= start < len(values).
    """
    arr = as_int_array(values)
    if not 0 <= start < arr.size:
        raise RangeError(f"start {start} out of bounds for array of length {arr.size}")
    return np.concatenate([arr[:start], as_int_array(inserted), arr[start:]])


def distinct(values: IntArrayLike) -> np.ndarray:
    """Unique values in order of first occurrence."""
    arr = as_int_array(values)
    _, first = np.unique(arr, return_index=True)
    return arr[np.sort(first)]
