"""
Stateful linear regression model.

LinearRegressionModel accumulates training rows, fits them with
gradient_descent(), and predicts from the stored fit. It has two states:
unfit (no successful solve() yet) and fit (holds a DescentSolution, which
every later solve() replaces wholesale).

Instances are not thread-safe; give each worker its own model.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.exceptions import ValidationError, DimensionError, IllegalStateError
from pydescent.core.validation import check_array, check_finite
from pydescent.regression.cost import mean_squared_cost
from pydescent.regression.design import DescentDesign
from pydescent.regression.solution import DescentSolution
from pydescent.regression.solvers import BackendChoice, CostFunction, gradient_descent


class LinearRegressionModel:
    """
    Linear regression trained by batch gradient descent.

    Each training row holds the feature values followed by the target:
    [x_0, ..., x_{n-1}, y]. Values after the target are ignored.

    Example:
        >>> model = LinearRegressionModel(2)
        >>> model.add_data([[2104, 3, 399900], [1600, 3, 329900], [2400, 3, 369000]])
        >>> model.solve(alpha=0.1, max_iters=400)
        >>> model.predict([1650, 3])
    """

    cost_function = staticmethod(mean_squared_cost)

    def __init__(
        self,
        num_features: int,
        *,
        cost_fn: CostFunction | None = None,
        backend: BackendChoice = 'cpu',
    ):
        """
        Args:
            num_features: Number of feature values per training row (>= 1)
            cost_fn: Cost function handed to gradient_descent(); defaults
                to LinearRegressionModel.cost_function
            backend: 'cpu', 'gpu' or 'auto', see gradient_descent()

        Raises:
            ValidationError: On an invalid feature count, cost function or
                backend name
        """
        if isinstance(num_features, bool) or not isinstance(num_features, Integral):
            raise ValidationError(
                f"num_features: expected an integer, got {type(num_features).__name__}"
            )
        if num_features < 1:
            raise ValidationError(f"num_features: must be >= 1, got {num_features}")
        if cost_fn is None:
            cost_fn = self.cost_function
        if not callable(cost_fn):
            raise ValidationError(f"cost_fn: expected a callable, got {type(cost_fn).__name__}")
        if backend not in ('auto', 'cpu', 'gpu'):
            raise ValidationError(f"Unknown backend: {backend!r}")

        self._num_features = int(num_features)
        self._cost_fn = cost_fn
        self._backend = backend
        self._data_X: list[list[float]] = []
        self._data_y: list[float] = []
        self._solution: DescentSolution | None = None

    # === Properties ===

    @property
    def num_features(self) -> int:
        return self._num_features

    @property
    def n_samples(self) -> int:
        """Number of training rows accumulated so far."""
        return len(self._data_y)

    @property
    def is_fit(self) -> bool:
        return self._solution is not None

    @property
    def solution(self) -> DescentSolution | None:
        """The current fit, or None before the first successful solve()."""
        return self._solution

    # === Training data ===

    def add_data(self, rows: Iterable[Sequence[float] | ArrayLike]) -> LinearRegressionModel:
        """
        Append training rows.

        Rows are checked and appended one at a time. A row with no more
        than num_features values raises ValidationError and is not stored;
        rows before it in the same call stay appended.

        Args:
            rows: Iterable of rows (lists, tuples, 1-D arrays) or a 2-D array

        Returns:
            self, for chaining

        Raises:
            ValidationError: Row too short, non-numeric or non-finite
            DimensionError: A row is not one-dimensional
        """
        nf = self._num_features
        for i, row in enumerate(rows):
            name = f"rows[{i}]"
            values = check_array(row, name)
            if values.ndim != 1:
                raise DimensionError(
                    f"{name}: expected a 1D row, got {values.ndim}D with shape {values.shape}",
                    expected=1,
                    actual=values.ndim,
                )
            if values.shape[0] <= nf:
                raise ValidationError(
                    f"not enough data: {name} has {values.shape[0]} values, "
                    f"need at least {nf + 1} ({nf} features + 1 target)"
                )
            used = values[:nf + 1]
            check_finite(used, name)

            self._data_X.append(used[:nf].tolist())
            self._data_y.append(float(used[nf]))

        return self

    def training_data(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Copies of the accumulated (X, y) as arrays of shape (m, n) and (m,)."""
        X = np.array(self._data_X, dtype=np.float64).reshape(-1, self._num_features)
        y = np.array(self._data_y, dtype=np.float64)
        return X, y

    def reset(self) -> None:
        """Drop all training rows and the current fit."""
        self._data_X = []
        self._data_y = []
        self._solution = None

    # === Fitting and prediction ===

    def solve(
        self,
        alpha: float = 0.01,
        max_iters: int = 1000,
        *,
        min_alpha: float | None = None,
    ) -> DescentSolution:
        """
        Fit all accumulated rows by gradient descent.

        The new fit replaces any previous one. If fitting raises, the
        previous fit is kept.

        Args:
            alpha: Initial learning rate
            max_iters: Maximum number of gradient steps
            min_alpha: Optional lower bound for the learning rate

        Returns:
            The new DescentSolution

        Raises:
            ValidationError: If no rows were added, or parameters are invalid
        """
        if not self._data_y:
            raise ValidationError("no training data: call add_data() before solve()")

        X, y = self.training_data()
        design = DescentDesign.from_arrays(X, y)
        self._solution = gradient_descent(
            design,
            None,
            self._cost_fn,
            alpha,
            max_iters,
            min_alpha=min_alpha,
            backend=self._backend,
        )
        return self._solution

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Predict the target for raw feature values.

        Uses the mean/std stored with the last fit; nothing is recomputed.

        Args:
            x: One row of num_features values, or a (k, num_features) batch

        Returns:
            float for a single row, (k,) array for a batch

        Raises:
            IllegalStateError: If solve() has not succeeded yet
            DimensionError: If the feature count is wrong
        """
        if self._solution is None:
            raise IllegalStateError("need to solve first: call solve() before predict()")
        return self._solution.predict(x)

    def __repr__(self) -> str:
        state = 'fit' if self.is_fit else 'unfit'
        return (
            f"LinearRegressionModel(num_features={self._num_features}, "
            f"n_samples={self.n_samples}, state={state})"
        )
