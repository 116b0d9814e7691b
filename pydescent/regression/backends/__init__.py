"""
Gradient descent backends.

Available backends:
    CPUGradientDescentBackend: NumPy float64 reference implementation
    GPUGradientDescentBackend: PyTorch implementation (CUDA/MPS), imported
        on demand from pydescent.regression.backends.gpu
"""

from pydescent.regression.backends.cpu import CPUGradientDescentBackend

__all__ = [
    "CPUGradientDescentBackend",
]
