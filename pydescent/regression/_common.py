"""
Helpers shared by the gradient descent backends.
"""

import math

METHOD = 'batch_gradient_descent'


def halve_alpha(alpha: float, min_alpha: float | None) -> float:
    """Backoff after an overshooting step, optionally clamped below."""
    alpha = alpha / 2
    if min_alpha is not None and alpha < min_alpha:
        return min_alpha
    return alpha


def stop_reason(cost: float) -> str:
    """Why the descent loop ended, given the last cost it saw."""
    if math.isnan(cost):
        return 'non_finite_cost'
    if cost <= 0:
        return 'zero_cost'
    return 'max_iters'


def run_warnings(cost: float, accepted_cost: float, initial_cost: float) -> tuple[str, ...]:
    """
    Non-fatal issues worth reporting on a finished run.

    cost is the last value computed; accepted_cost belongs to the returned
    theta. They differ when the final step was rejected.
    """
    found = []
    if not math.isfinite(initial_cost):
        found.append(
            f"initial cost is non-finite ({initial_cost}); check the cost function and targets"
        )
    elif not math.isfinite(accepted_cost):
        found.append(
            f"cost became non-finite ({accepted_cost}); the learning rate is likely far too large"
        )
    elif not math.isfinite(cost):
        found.append(
            f"last step was rejected with a non-finite cost ({cost}); theta is from the "
            f"last accepted step, cost {accepted_cost}"
        )
    return tuple(found)
