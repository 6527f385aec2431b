# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

import arrayops
from arrayops.merge import merge_sorted
from arrayops.utils import INT_DTYPE, as_int_array, is_non_decreasing


def test_as_int_array():
    arr = as_int_array([1, 2, 3])
    assert arr.dtype == INT_DTYPE
    assert as_int_array([]).dtype == INT_DTYPE
    assert as_int_array(np.array([1, 2], dtype=np.int32)).dtype == INT_DTYPE


@pytest.mark.parametrize(
    "bad",
    [
        [1.5, 2.0],
        [[1, 2], [3, 4]],
        ["a", "b"],
        np.zeros((0, 3), dtype=np.int64),
        [[]],
    ],
)
def test_as_int_array_rejects(bad):
    with pytest.raises(TypeError):
        as_int_array(bad)


def test_is_non_decreasing():
    assert is_non_decreasing(np.array([], dtype=INT_DTYPE))
    assert is_non_decreasing(np.array([1, 1, 2]))
    assert not is_non_decreasing(np.array([2, 1]))


def test_public_api():
    for name in arrayops.__all__:
        assert hasattr(arrayops, name)
    assert isinstance(arrayops.__version__, str)


def test_as_int_array_empty_2d_is_not_1d():
    with pytest.raises(TypeError, match="1-D"):
        as_int_array(np.zeros((0, 3)))


def test_as_int_array_unsigned_overflow():
    with pytest.raises(OverflowError):
        as_int_array(np.array([1, 2**63], dtype=np.uint64))


def test_as_int_array_unsigned_in_range():
    top = np.iinfo(np.int64).max
    arr = as_int_array(np.array([0, top], dtype=np.uint64))
    assert arr.dtype == INT_DTYPE
    assert arr.tolist() == [0, top]


def test_merge_rejects_unsigned_overflow():
    with pytest.raises(OverflowError):
        merge_sorted(np.array([1, 2**63], dtype=np.uint64), [])
