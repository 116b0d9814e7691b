"""
Feature standardization.

Gradient descent converges far faster when every feature lives on the same
scale, so the optimizer standardizes X column by column before iterating
and prepends the bias (intercept) column of ones.

The statistics from the training run are kept with the fit so that new
inputs are mapped into the same space at prediction time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import DimensionError
from pydescent.core.validation import check_array, check_2d, check_finite, check_min_samples


# Standard deviation used for constant columns (including every column of
# a single training row) so the division below is always defined.
STD_FLOOR = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class NormalizedFeatures:
    """
    Output of normalize_features().

    Attributes:
        X: Normalized matrix (m, n+1); column 0 is the bias column of ones
        mean: Per-feature mean (n,)
        std: Per-feature sample standard deviation (n,), strictly positive
    """
    X: NDArray[np.floating[Any]]
    mean: NDArray[np.floating[Any]]
    std: NDArray[np.floating[Any]]


def normalize_features(X: ArrayLike) -> NormalizedFeatures:
    """
    Standardize each feature column and prepend a bias column.

    Column j+1 of the result is (X[:, j] - mean[j]) / std[j], where std is
    the Bessel-corrected sample standard deviation (divides by m - 1).
    A zero std is replaced by STD_FLOOR, which turns a constant column into
    a column of zeros. With a single row the sample std is undefined and is
    treated the same way.

    Args:
        X: Raw feature matrix (m, n). 1-D input is one feature column.

    Returns:
        NormalizedFeatures. The input is never modified.

    Raises:
        ValidationError: Non-numeric or non-finite input, or no rows
        DimensionError: Input is not 1-D or 2-D, or has no columns
    """
    X = check_array(X, 'X')
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    check_2d(X, 'X')
    check_min_samples(X, 1, 'X')
    check_finite(X, 'X')

    m, n = X.shape
    if n == 0:
        raise DimensionError("X: requires at least 1 feature column, got 0", expected=1, actual=0)

    mean = X.mean(axis=0)
    if m > 1:
        std = X.std(axis=0, ddof=1)
    else:
        std = np.zeros(n, dtype=np.float64)

    # Rounding in mean() can leave a tiny nonzero std on a constant column,
    # so constant columns are found by comparing values, not by std == 0.
    constant = np.all(X == X[0], axis=0)
    mean[constant] = X[0, constant]
    std[constant] = STD_FLOOR
    std = np.where(std == 0.0, STD_FLOOR, std)

    X_norm = np.empty((m, n + 1), dtype=np.float64)
    X_norm[:, 0] = 1.0
    X_norm[:, 1:] = (X - mean) / std

    return NormalizedFeatures(X=X_norm, mean=mean, std=std)


def apply_normalization(
    x: ArrayLike,
    mean: NDArray[np.floating[Any]],
    std: NDArray[np.floating[Any]],
    *,
    add_bias: bool = True,
) -> NDArray[np.floating[Any]]:
    """
    Map new inputs into the space of a previous normalize_features() call.

    Args:
        x: One row (n,) or a batch (k, n) of raw feature values
        mean: Stored per-feature means
        std: Stored per-feature standard deviations
        add_bias: Prepend the bias term (1.0) to each row

    Returns:
        (n+1,) or (k, n+1) when add_bias, else (n,) or (k, n)

    Raises:
        DimensionError: If the feature count doesn't match the statistics
    """
    x = check_array(x, 'x')
    check_finite(x, 'x')
    n = mean.shape[0]

    if x.ndim not in (1, 2):
        raise DimensionError(
            f"x: expected 1D row or 2D batch, got {x.ndim}D with shape {x.shape}",
            expected=2,
            actual=x.ndim,
        )
    if x.shape[-1] != n:
        raise DimensionError(
            f"x: expected {n} features, got {x.shape[-1]}",
            expected=n,
            actual=x.shape[-1],
        )

    z = (x - mean) / std
    if not add_bias:
        return z
    if z.ndim == 1:
        return np.concatenate(([1.0], z))
    return np.column_stack([np.ones(z.shape[0]), z])
