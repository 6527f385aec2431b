# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix validation and multiplication
"""

import logging
from typing import Sequence, Tuple, Union

import numpy as np

from .errors import DimensionMismatchError, InvalidShapeError
from .utils import INT_DTYPE, as_int_array

logger = logging.getLogger(__name__)

IntMatrixLike = Union[Sequence[Sequence[int]], np.ndarray]


def _check_not_empty(M: IntMatrixLike, name: str) -> None:
    if len(M) == 0:
        raise InvalidShapeError(f"{name} matrix has no rows")
    for i, row in enumerate(M):
        if len(row) == 0:
            raise InvalidShapeError(f"{name} matrix row {i} is empty")


def _check_rectangular(M: IntMatrixLike, name: str) -> None:
    width = len(M[0])
    for i, row in enumerate(M):
        if len(row) != width:
            raise DimensionMismatchError(
                f"{name} matrix row {i} has length {len(row)}, expected {width}"
            )


def shape_of(M: IntMatrixLike) -> Tuple[int, int]:
    """(rows, cols) of a rectangular, non-empty matrix."""
    _check_not_empty(M, "input")
    _check_rectangular(M, "input")
    return len(M), len(M[0])


def validate(left: IntMatrixLike, right: IntMatrixLike) -> None:
    """
    Check that `left @ right` is well defined.

    Raises
    ------
    InvalidShapeError      : a matrix has zero rows or a zero-length row.
    DimensionMismatchError : a matrix is ragged, or the inner
                             dimensions disagree (cols(left) != rows(right)).
    """
    _check_not_empty(left, "left")
    _check_not_empty(right, "right")
    _check_rectangular(left, "left")
    _check_rectangular(right, "right")

    k = len(left[0])
    if k != len(right):
        raise DimensionMismatchError(
            f"inner dimensions disagree: left has {k} columns, "
            f"right has {len(right)} rows"
        )


def _as_int_matrix(M: IntMatrixLike) -> np.ndarray:
    return np.stack([as_int_array(row) for row in M])


def multiply(left: IntMatrixLike, right: IntMatrixLike) -> np.ndarray:
    """
    Integer matrix product C = L R, computed cell by cell.

    Parameters
    ----------
    left  : (r, k) matrix, nested sequence or ndarray
    right : (k, c) matrix, nested sequence or ndarray

    Returns
    -------
    C : (r, c) int64 ndarray, C[i, m] = sum_j L[i, j] * R[j, m]

    Inputs are validated first; nothing is computed if validation fails.
    """
    validate(left, right)

    L = _as_int_matrix(left)
    R = _as_int_matrix(right)
    r, k = L.shape
    c = R.shape[1]
    logger.debug(f"multiply: ({r}x{k}) @ ({k}x{c})")

    C = np.zeros((r, c), dtype=INT_DTYPE)
    for i in range(r):
        for m in range(c):
            # row i of L against column m of R
            C[i, m] = L[i, :] @ R[:, m]
    return C
