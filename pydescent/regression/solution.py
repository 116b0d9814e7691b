"""
Gradient descent solution types.

Contains the parameter payload produced by the backends and the
user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescent.core.result import Result
from pydescent.regression.normalization import apply_normalization

if TYPE_CHECKING:
    from pydescent.regression.design import DescentDesign


@dataclass(frozen=True)
class DescentParams:
    """
    Parameter payload for a gradient descent run.

    theta is expressed in normalized feature space; mean and std are the
    statistics needed to map raw inputs into that space.
    """
    theta: NDArray[np.floating[Any]]
    cost: float
    alpha: float
    iters: int
    mean: NDArray[np.floating[Any]]
    std: NDArray[np.floating[Any]]


@dataclass
class DescentSolution:
    """
    User-facing result of gradient_descent().

    Wraps the backend Result and the training design; fit diagnostics
    (fitted values, residuals, R²) are computed on first access.
    """
    _result: Result[DescentParams]
    _design: 'DescentDesign'

    # Cached computations
    _fitted_values: NDArray[np.floating[Any]] | None = None

    @property
    def theta(self) -> NDArray[np.floating[Any]]:
        return self._result.params.theta

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Alias for theta."""
        return self._result.params.theta

    @property
    def cost(self) -> float:
        return self._result.params.cost

    @property
    def alpha(self) -> float:
        """Learning rate at the end of the run."""
        return self._result.params.alpha

    @property
    def iters(self) -> int:
        return self._result.params.iters

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        return self._result.params.mean

    @property
    def std(self) -> NDArray[np.floating[Any]]:
        return self._result.params.std

    @property
    def initial_alpha(self) -> float:
        return self._result.info['initial_alpha']

    @property
    def initial_cost(self) -> float:
        return self._result.info['initial_cost']

    @property
    def n_backoffs(self) -> int:
        """Number of rejected steps, each of which halved alpha."""
        return self._result.info['n_backoffs']

    @property
    def stop_reason(self) -> str:
        """'zero_cost', 'max_iters' or 'non_finite_cost'."""
        return self._result.info['stop_reason']

    @property
    def converged(self) -> bool:
        """True only when the cost reached exactly zero."""
        return self.stop_reason == 'zero_cost'

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        """Predictions for the training rows."""
        if self._fitted_values is None:
            self._fitted_values = self.predict(self._design.X)
        return self._fitted_values

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    @property
    def r_squared(self) -> float:
        y = self._design.y
        rss = float(self.residuals @ self.residuals)
        tss = float(np.sum((y - y.mean()) ** 2))
        if tss == 0:
            return 1.0 if rss == 0 else 0.0
        return 1.0 - rss / tss

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Predict targets for raw (un-normalized) inputs.

        The inputs are normalized with the training mean/std, the bias term
        is prepended, and the result is dotted with theta.

        Args:
            x: One row of n features, or a (k, n) batch

        Returns:
            float for a single row, (k,) array for a batch

        Raises:
            DimensionError: If the feature count doesn't match the fit
        """
        z = apply_normalization(x, self.mean, self.std)
        prediction = z @ self.theta
        if np.ndim(prediction) == 0:
            return float(prediction)
        return prediction

    def to_dict(self) -> dict[str, Any]:
        """The fit as a plain record: theta, cost, alpha, iters, mean, std."""
        params = self._result.params
        return {
            'theta': params.theta.copy(),
            'cost': params.cost,
            'alpha': params.alpha,
            'iters': params.iters,
            'mean': params.mean.copy(),
            'std': params.std.copy(),
        }

    def summary(self) -> str:
        """Plain-text report of the run."""
        lines = [
            "Gradient Descent Linear Regression",
            "=" * 60,
            f"Observations: {self._design.n}",
            f"Features: {self._design.p}",
            f"Iterations: {self.iters} (stopped: {self.stop_reason})",
            f"Final cost: {self.cost:.6g} (initial: {self.initial_cost:.6g})",
            f"Learning rate: {self.alpha:.6g} (initial: {self.initial_alpha:.6g}, "
            f"{self.n_backoffs} backoffs)",
            f"R-squared: {self.r_squared:.6f}",
            "",
            "Parameters (normalized feature space):",
            "-" * 60,
            f"{'Term':<10} {'Theta':>16} {'Mean':>14} {'Std':>14}",
            "-" * 60,
            f"{'bias':<10} {self.theta[0]:16.6f} {'':>14} {'':>14}",
        ]
        for j in range(self._design.p):
            lines.append(
                f"{f'x[{j}]':<10} {self.theta[j + 1]:16.6f} "
                f"{self.mean[j]:14.6g} {self.std[j]:14.6g}"
            )
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescentSolution(n={self._design.n}, p={self._design.p}, "
            f"iters={self.iters}, cost={self.cost:.6g}, alpha={self.alpha:.6g})"
        )
