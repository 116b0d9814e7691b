"""
Least-squares cost.

    J(theta) = 1/(2m) * sum((X theta - y)^2)

The 1/(2m) scaling makes the gradient exactly (1/m) X'(X theta - y),
which is the step the gradient descent backends take.
"""

from typing import Any


def mean_squared_cost(X: Any, theta: Any, y: Any) -> float:
    """
    Half mean squared error of the linear predictions X @ theta.

    Works on NumPy arrays and on torch tensors (the GPU backend passes
    tensors). Inputs are not modified.

    Args:
        X: Normalized design matrix (m, n+1), bias column included
        theta: Parameter vector (n+1,)
        y: Targets (m,)

    Returns:
        The cost as a Python float
    """
    residuals = X @ theta - y
    m = residuals.shape[0]
    return float((residuals * residuals).sum()) / (2 * m)
