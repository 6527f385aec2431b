# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
arrayops
========

A small, educational toolkit of integer array and matrix utilities,
written as plain loops and NumPy vector ops so each algorithm stays
readable.

Public API
~~~~~~~~~~
- Matrices
    - `validate`, `multiply`, `shape_of`
- Sorted arrays
    - `merge_sorted`
- Predicates
    - `none_match`, `some_match`, `all_match`
- Array transforms
    - `copy_range`, `insert_at`, `distinct`
    - `replace` (in place), `replaced`
    - `second_max`, `filter_near_max`,
      `rearrange_negatives_then_positives`
- Errors
    - `ArrayOpsError`, `InvalidShapeError`, `DimensionMismatchError`,
      `NotSortedError`, `RangeError`

Example
-------
>>> import arrayops as ao
>>> ao.multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]).tolist()
[[19, 22], [43, 50]]
>>> ao.merge_sorted([1, 3, 5], [2, 2, 4]).tolist()
[1, 2, 2, 3, 4, 5]
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    ArrayOpsError,
    DimensionMismatchError,
    InvalidShapeError,
    NotSortedError,
    RangeError,
)
from .matrix import multiply, shape_of, validate
from .merge import merge_sorted
from .predicates import all_match, none_match, some_match
from .transforms import (
    copy_range,
    distinct,
    filter_near_max,
    insert_at,
    rearrange_negatives_then_positives,
    replace,
    replaced,
    second_max,
)
from .utils import as_int_array, is_non_decreasing

__all__ = [
    "validate",
    "multiply",
    "shape_of",
    "merge_sorted",
    "none_match",
    "some_match",
    "all_match",
    "copy_range",
    "replace",
    "replaced",
    "second_max",
    "rearrange_negatives_then_positives",
    "filter_near_max",
    "insert_at",
    "distinct",
    "as_int_array",
    "is_non_decreasing",
    "ArrayOpsError",
    "InvalidShapeError",
    "DimensionMismatchError",
    "NotSortedError",
    "RangeError",
]

# ---------------------------------------------------------------------
# Version string (helps "pip show arrayops", Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library code only logs; the host application decides where it goes.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
