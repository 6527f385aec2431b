# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numpy as np
import pytest

from arrayops.errors import NotSortedError
from arrayops.merge import merge_sorted


def test_merge_keeps_duplicates():
    out = merge_sorted([1, 3, 5], [2, 2, 4])
    np.testing.assert_array_equal(out, np.array([1, 2, 2, 3, 4, 5]))


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ([], [], []),
        ([], [1, 2], [1, 2]),
        ([-3, 0], [], [-3, 0]),
        ([5, 5], [5], [5, 5, 5]),
        ([1, 2, 3], [4, 5, 6], [1, 2, 3, 4, 5, 6]),
        ([4, 5, 6], [1, 2, 3], [1, 2, 3, 4, 5, 6]),
    ],
)
def test_merge_edge_cases(a, b, expected):
    np.testing.assert_array_equal(merge_sorted(a, b), np.array(expected, dtype=np.int64))


def test_merge_first_not_sorted():
    with pytest.raises(NotSortedError, match="first"):
        merge_sorted([3, 1], [1, 2])


def test_merge_second_not_sorted():
    with pytest.raises(NotSortedError, match="second"):
        merge_sorted([1, 2], [2, 1])


def test_merge_against_sort():
    rng = np.random.default_rng(seed=7)
    for n, m in [(1, 1), (10, 3), (0, 25), (50, 50)]:
        a = np.sort(rng.integers(-20, 20, size=n))
        b = np.sort(rng.integers(-20, 20, size=m))
        out = merge_sorted(a, b)
        np.testing.assert_array_equal(out, np.sort(np.concatenate([a, b])))


def test_merge_does_not_mutate_inputs():
    a = np.array([1, 4, 9])
    b = [2, 3]
    merge_sorted(a, b)
    np.testing.assert_array_equal(a, np.array([1, 4, 9]))
    assert b == [2, 3]
