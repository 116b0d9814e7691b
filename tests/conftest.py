"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_dataset():
    """Four samples, two features; the hand-checked gradient descent case."""
    X = np.array([[34.0, 23.0], [20.0, 11.0], [41.0, 10.0], [54.0, 12.0]])
    y = np.array([[0.9], [1.1], [2.2], [0.8]])
    return X, y


@pytest.fixture
def linear_data(rng):
    """Noisy linear data on very different feature scales."""
    n = 200
    X = np.column_stack([
        rng.uniform(0, 1000, n),
        rng.uniform(-5, 5, n),
    ])
    beta = np.array([0.02, -3.0])
    y = 7.0 + X @ beta + rng.standard_normal(n) * 0.1
    return X, y


class CostSpy:
    """Cost function wrapper that records every call."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = []

    def __call__(self, X, theta, y):
        self.calls.append((X.copy(), theta.copy(), y.copy()))
        return self.fn(X, theta, y)

    @property
    def call_count(self):
        return len(self.calls)


@pytest.fixture
def cost_spy():
    """Factory: cost_spy(fn) returns a recording cost function."""
    return CostSpy
