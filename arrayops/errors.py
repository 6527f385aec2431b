# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by arrayops.

Every error also derives from the builtin a caller would expect, so
``except ValueError`` keeps working for shape and ordering problems and
``except IndexError`` for bad indices.
"""


class ArrayOpsError(Exception):
    """Base class for all arrayops errors."""


class InvalidShapeError(ArrayOpsError, ValueError):
    """A matrix has no rows, or one of its rows is empty."""


class DimensionMismatchError(ArrayOpsError, ValueError):
    """A matrix is ragged, or two matrices cannot be multiplied."""


class NotSortedError(ArrayOpsError, ValueError):
    """An input that must be non-decreasing is not."""


class RangeError(ArrayOpsError, IndexError):
    """An index argument falls outside the array bounds."""
