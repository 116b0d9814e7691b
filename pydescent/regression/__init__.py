"""
Linear regression by batch gradient descent.

Public API:
    normalize_features(X) -> NormalizedFeatures
    mean_squared_cost(X_norm, theta, y) -> float
    gradient_descent(X, y, cost_fn, alpha, max_iters) -> DescentSolution
    LinearRegressionModel(num_features)

gradient_descent() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pydescent.regression import LinearRegressionModel
    >>> from pydescent.regression.datasets import housing
    >>> model = LinearRegressionModel(2).add_data(housing)
    >>> result = model.solve(alpha=0.1, max_iters=400)
    >>> print(result.summary())
    >>> model.predict([1650, 3])
"""

from pydescent.regression.normalization import (
    STD_FLOOR,
    NormalizedFeatures,
    normalize_features,
    apply_normalization,
)
from pydescent.regression.cost import mean_squared_cost
from pydescent.regression.design import DescentDesign
from pydescent.regression.solution import DescentParams, DescentSolution
from pydescent.regression.solvers import gradient_descent
from pydescent.regression.model import LinearRegressionModel

__all__ = [
    "STD_FLOOR",
    "NormalizedFeatures",
    "normalize_features",
    "apply_normalization",
    "mean_squared_cost",
    "gradient_descent",
    "LinearRegressionModel",
    "DescentDesign",
    "DescentParams",
    "DescentSolution",
]
