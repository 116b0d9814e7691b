"""
Tolerance tiers for comparing results across compute paths.

The CPU backend runs in float64 and is the reference. GPU runs default to
float32, which agrees with the reference only to single precision.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """rtol/atol pair for numerical comparison."""
    rtol: float
    atol: float
    name: str


# CPU reference, float64
CPU_FP64 = ToleranceTier(rtol=1e-10, atol=1e-12, name='cpu_fp64')

# GPU with float64 (CUDA only)
GPU_FP64 = ToleranceTier(rtol=1e-10, atol=1e-12, name='gpu_fp64')

# GPU with float32 (CUDA default, the only option on MPS)
GPU_FP32 = ToleranceTier(rtol=1e-4, atol=1e-4, name='gpu_fp32')


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Tolerance tier matching a backend name such as 'gpu_gd_fp32'."""
    if backend_name.startswith('gpu'):
        return GPU_FP64 if backend_name.endswith('fp64') else GPU_FP32
    return CPU_FP64
