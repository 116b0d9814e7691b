"""
pydescent: linear regression by batch gradient descent.

Feature standardization, a least-squares cost, and a gradient descent
optimizer with learning-rate backoff, on NumPy with optional GPU
acceleration through PyTorch.

Submodules:
    regression: Normalizer, cost function, optimizer and model
    core: Exceptions, validation, result envelope, compute utilities
"""

__version__ = "0.1.0"

from pydescent import regression

__all__ = [
    "__version__",
    "regression",
]
