"""
Solver dispatch for gradient descent regression.

This module provides gradient_descent() (public API) and backend selection.
"""

import warnings
from typing import Any, Callable, Literal

from numpy.typing import ArrayLike

from pydescent.core.exceptions import ValidationError
from pydescent.core.validation import check_positive, check_non_negative_int
from pydescent.core.compute.device import select_device
from pydescent.regression.cost import mean_squared_cost
from pydescent.regression.design import DescentDesign
from pydescent.regression.solution import DescentSolution
from pydescent.regression.backends.cpu import CPUGradientDescentBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']

CostFunction = Callable[[Any, Any, Any], float]


def gradient_descent(
    X: ArrayLike | DescentDesign,
    y: ArrayLike | None = None,
    cost_fn: CostFunction = mean_squared_cost,
    alpha: float = 0.01,
    max_iters: int = 1000,
    *,
    min_alpha: float | None = None,
    backend: BackendChoice = 'cpu',
) -> DescentSolution:
    """
    Fit a linear model by batch gradient descent.

    X is standardized column by column (see normalize_features) and a bias
    column is prepended; theta starts at zero. Each step moves every
    coordinate of theta against the gradient of the least-squares cost.
    A step that raises the cost is undone and the learning rate halved.
    The loop stops when the cost is exactly zero or after max_iters steps;
    there is no convergence tolerance, so choose max_iters accordingly.

    Args:
        X: Raw feature matrix (m x n), or a DescentDesign
        y: Targets (m,) or (m, 1). Required unless X is a DescentDesign.
        cost_fn: cost_fn(X_norm, theta, y) -> float. Called once before
            the loop and once per step.
        alpha: Initial learning rate
        max_iters: Maximum number of steps (0 evaluates the cost only)
        min_alpha: Optional lower bound for the learning rate. By default
            alpha can be halved without limit.
        backend: Computational backend:
            - 'cpu': NumPy float64 reference (default)
            - 'gpu': PyTorch on CUDA/MPS; cost_fn then receives tensors
            - 'auto': GPU if one is available, else CPU

    Returns:
        DescentSolution with theta, cost, alpha, iters, mean and std

    Raises:
        ValidationError: If inputs or parameters are invalid
        DimensionError: If X and y have inconsistent dimensions
        RuntimeError: If backend='gpu' and no GPU is available

    Example:
        >>> from pydescent.regression import gradient_descent, mean_squared_cost
        >>> X = [[34, 23], [20, 11], [41, 10], [54, 12]]
        >>> y = [0.9, 1.1, 2.2, 0.8]
        >>> result = gradient_descent(X, y, mean_squared_cost, 0.1, 400)
        >>> result.theta, result.mean, result.std
    """
    # === Input Validation ===
    if isinstance(X, DescentDesign):
        if y is not None:
            raise ValidationError("y must be None when X is a DescentDesign")
        design = X
    else:
        if y is None:
            raise ValidationError("y required when X is an array")
        design = DescentDesign.from_arrays(X, y)

    if not callable(cost_fn):
        raise ValidationError(f"cost_fn: expected a callable, got {type(cost_fn).__name__}")
    alpha = check_positive(alpha, 'alpha')
    max_iters = check_non_negative_int(max_iters, 'max_iters')
    if min_alpha is not None:
        min_alpha = check_positive(min_alpha, 'min_alpha')
        if min_alpha > alpha:
            raise ValidationError(
                f"min_alpha: must not exceed alpha ({alpha}), got {min_alpha}"
            )

    # === Select Backend and Solve ===
    backend_impl = _get_backend(backend)
    result = backend_impl.solve(
        design,
        cost_fn=cost_fn,
        alpha=alpha,
        max_iters=max_iters,
        min_alpha=min_alpha,
    )

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    return DescentSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice):
    """
    Instantiate the requested backend.

    Raises:
        ValidationError: If the backend name is unknown
        RuntimeError: If 'gpu' is requested but unavailable
    """
    if choice == 'cpu':
        return CPUGradientDescentBackend()

    if choice in ('auto', 'gpu'):
        device = select_device(choice)
        if device.is_gpu:
            from pydescent.regression.backends.gpu import GPUGradientDescentBackend
            return GPUGradientDescentBackend(device=device.device_type)
        return CPUGradientDescentBackend()

    raise ValidationError(f"Unknown backend: {choice!r}")
