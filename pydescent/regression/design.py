"""
Gradient descent training design.

The design holds the raw (un-normalized) feature matrix X and the target
vector y, validated once at construction. Backends normalize X themselves;
the design only guarantees that the arrays are well formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import DimensionError
from pydescent.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class DescentDesign:
    """
    Raw training data for gradient descent.

    Immutable after construction; build with DescentDesign.from_arrays().
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, X: ArrayLike, y: ArrayLike) -> DescentDesign:
        """
        Build a design from array-likes.

        Args:
            X: Features (m, n); 1-D input is a single feature column
            y: Targets (m,) or a column (m, 1)

        Raises:
            ValidationError: Non-numeric or non-finite values, no rows
            DimensionError: Wrong dimensionality or mismatched lengths
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))
        check_min_samples(X_arr, 1, 'X')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')

        n, p = X_arr.shape
        if p == 0:
            raise DimensionError("X: requires at least 1 feature column, got 0", expected=1, actual=0)

        # independent of the caller's arrays
        return cls(_X=X_arr.copy(), _y=y_arr.copy(), _n=n, _p=p)

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Raw feature matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Target vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of samples."""
        return self._n

    @property
    def p(self) -> int:
        """Number of raw features (bias column not counted)."""
        return self._p
