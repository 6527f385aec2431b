# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Sequence, Union

import numpy as np

INT_DTYPE = np.int64

# none_match() looks for multiples of this
NONE_MATCH_DIVISOR: int = 10
# filter_near_max() keeps values strictly above max - NEAR_MAX_WINDOW
NEAR_MAX_WINDOW: int = 10

IntArrayLike = Union[Sequence[int], np.ndarray]


def as_int_array(values: IntArrayLike) -> np.ndarray:
    """
    Coerce a 1-D sequence of ints into an int64 ndarray.

    The result may share memory with `values` when it already is an
    int64 ndarray; callers that write to it must copy first.

    Raises
    ------
    TypeError     : if `values` is not 1-D or holds non-integer data.
    OverflowError : if unsigned data holds values above the int64 range.
    """
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise TypeError(f"expected a 1-D array of ints, got ndim={arr.ndim}")
    if arr.size == 0:
        # np.asarray([]) is float64, an empty input is still a valid IntArray
        return np.zeros(0, dtype=INT_DTYPE)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"expected integer data, got dtype {arr.dtype}")
    if arr.dtype.kind == "u" and arr.max() > np.iinfo(INT_DTYPE).max:
        raise OverflowError(f"value {arr.max()} does not fit in {np.dtype(INT_DTYPE)}")
    return arr.astype(INT_DTYPE, copy=False)


def is_non_decreasing(arr: np.ndarray) -> bool:
    """True if every element is >= the one before it."""
    if arr.size < 2:
        return True
    return bool(np.all(arr[1:] >= arr[:-1]))
