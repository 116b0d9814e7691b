"""
CPU reference backend for gradient descent.

Runs the batch gradient descent loop in float64 with NumPy. This is the
reference implementation the GPU backend is validated against.
"""

from typing import Any, Callable

import numpy as np

from pydescent.core.result import Result
from pydescent.core.compute.timing import Timer
from pydescent.regression._common import METHOD, halve_alpha, stop_reason, run_warnings
from pydescent.regression.design import DescentDesign
from pydescent.regression.normalization import normalize_features
from pydescent.regression.solution import DescentParams


class CPUGradientDescentBackend:
    """
    CPU backend for batch gradient descent with alpha-halving backoff.

    Implements the Backend protocol for DescentDesign -> DescentParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gd'

    def solve(
        self,
        design: DescentDesign,
        *,
        cost_fn: Callable[[Any, Any, Any], float],
        alpha: float,
        max_iters: int,
        min_alpha: float | None = None,
    ) -> Result[DescentParams]:
        """
        Minimize cost_fn over theta by batch gradient descent.

        Algorithm:
            1. Standardize X and prepend the bias column
            2. Start from theta = 0 and evaluate the cost
            3. Step theta -= alpha * X'(X theta - y) / m, all coordinates
               at once from the pre-step theta
            4. If the cost went up, keep the old theta and halve alpha;
               otherwise accept the step and make its cost the baseline
            5. Repeat until the cost is zero or max_iters steps were taken

        There is no tolerance-based early stop.

        Args:
            design: Validated training design
            cost_fn: cost_fn(X_norm, theta, y) -> float
            alpha: Initial learning rate
            max_iters: Hard cap on the number of steps
            min_alpha: Lower bound for alpha, or None for no bound

        Returns:
            Result containing DescentParams
        """
        timer = Timer()
        timer.start()

        with timer.section('normalization'):
            normalized = normalize_features(design.X)

        X = normalized.X
        y = design.y
        m = design.n

        initial_alpha = alpha
        theta = np.zeros(X.shape[1], dtype=np.float64)
        cost = float(cost_fn(X, theta, y))
        initial_cost = cost
        old_cost = cost

        iters = 0
        n_backoffs = 0
        with timer.section('iterations'):
            while cost > 0 and iters < max_iters:
                iters += 1

                h = X @ theta - y
                delta = alpha * (X.T @ h) / m
                candidate = theta - delta

                cost = float(cost_fn(X, candidate, y))

                if cost > old_cost:
                    # overshoot: keep theta, retry with a smaller step
                    alpha = halve_alpha(alpha, min_alpha)
                    n_backoffs += 1
                else:
                    theta = candidate
                    old_cost = cost

        timer.stop()

        params = DescentParams(
            theta=theta,
            cost=cost,
            alpha=alpha,
            iters=iters,
            mean=normalized.mean,
            std=normalized.std,
        )

        info: dict[str, Any] = {
            'method': METHOD,
            'initial_alpha': initial_alpha,
            'initial_cost': initial_cost,
            'n_backoffs': n_backoffs,
            'stop_reason': stop_reason(cost),
            'min_alpha': min_alpha,
            'device': 'cpu',
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=run_warnings(cost, old_cost, initial_cost),
        )
