"""
GPU backend for gradient descent using PyTorch.

Same loop as the CPU reference, with the matrix products on the GPU.
Normalization runs on the CPU in float64 before the transfer, so mean and
std are identical across backends. Supports CUDA and MPS (Apple Silicon).

The cost function receives torch tensors on this backend.
"""

from typing import Any, Callable

import numpy as np

from pydescent.core.result import Result
from pydescent.core.compute.timing import Timer
from pydescent.regression._common import METHOD, halve_alpha, stop_reason, run_warnings
from pydescent.regression.design import DescentDesign
from pydescent.regression.normalization import normalize_features
from pydescent.regression.solution import DescentParams


class GPUGradientDescentBackend:
    """
    GPU backend for batch gradient descent.

    FP32 by default; FP64 is available on CUDA only (MPS has no float64).
    The cost is pulled back to the host every step because the backoff
    decision is made there.
    """

    def __init__(self, use_fp64: bool = False, device: str = 'cuda'):
        """
        Args:
            use_fp64: Run in float64 (slow on consumer GPUs)
            device: 'cuda', 'cuda:N' or 'mps'

        Raises:
            RuntimeError: If the device is unavailable or can't do float64
            ValueError: If the device string is not recognized
        """
        import torch

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or backend='cpu' for double precision."
                )
        else:
            raise ValueError(f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'.")

        self.device = torch.device(device)
        self.use_fp64 = use_fp64
        self.dtype = torch.float64 if use_fp64 else torch.float32

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_gd_{precision}'

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
        Minimize cost_fn over theta by batch gradient descent on the GPU.

        See CPUGradientDescentBackend.solve for the algorithm.
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        with timer.section('normalization'):
            normalized = normalize_features(design.X)

        with timer.section('data_transfer_to_gpu'):
            X = torch.from_numpy(normalized.X).to(device=self.device, dtype=self.dtype)
            y = torch.from_numpy(design.y).to(device=self.device, dtype=self.dtype)
        m = design.n

        initial_alpha = alpha
        theta = torch.zeros(X.shape[1], device=self.device, dtype=self.dtype)
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
                    alpha = halve_alpha(alpha, min_alpha)
                    n_backoffs += 1
                else:
                    theta = candidate
                    old_cost = cost

        with timer.section('data_transfer_from_gpu'):
            theta_np = theta.cpu().numpy().astype(np.float64)

        timer.stop()

        params = DescentParams(
            theta=theta_np,
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
            'device': str(self.device),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=run_warnings(cost, old_cost, initial_cost),
        )
