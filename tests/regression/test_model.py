"""
Tests for LinearRegressionModel.

Validates:
    - Row accumulation: feature/target split, extra values ignored
    - Short rows rejected without affecting rows already appended
    - solve() hands the accumulated data to gradient_descent()
    - predict() state handling and the normalize-then-dot formula
"""

import numpy as np
import pytest

from pydescent.core.exceptions import DimensionError, IllegalStateError, ValidationError
from pydescent.core.result import Result
from pydescent.regression import (
    DescentDesign,
    DescentParams,
    DescentSolution,
    LinearRegressionModel,
    mean_squared_cost,
)


def make_solution(theta, mean, std):
    """A DescentSolution built by hand, as if a fit had produced it."""
    theta = np.asarray(theta, dtype=float)
    mean = np.asarray(mean, dtype=float)
    std = np.asarray(std, dtype=float)
    params = DescentParams(theta=theta, cost=0.5, alpha=0.01, iters=10, mean=mean, std=std)
    result = Result(
        params=params,
        info={
            'method': 'batch_gradient_descent',
            'initial_alpha': 0.01,
            'initial_cost': 1.0,
            'n_backoffs': 0,
            'stop_reason': 'max_iters',
        },
        timing=None,
        backend_name='cpu_gd',
    )
    X = np.tile(mean, (2, 1))
    design = DescentDesign.from_arrays(X, np.zeros(2))
    return DescentSolution(_result=result, _design=design)


class FakeDescent:
    """Stand-in for gradient_descent() that records its arguments."""

    def __init__(self, solution):
        self.solution = solution
        self.calls = []

    def __call__(self, X, y, cost_fn, alpha, max_iters, *, min_alpha=None, backend='cpu'):
        self.calls.append(dict(
            X=X, y=y, cost_fn=cost_fn, alpha=alpha, max_iters=max_iters,
            min_alpha=min_alpha, backend=backend,
        ))
        return self.solution


@pytest.fixture
def fake_descent(monkeypatch):
    fake = FakeDescent(make_solution([0.25, 0.5, 1.5, 2.5], [5, 10, 15], [2, 1, 3]))
    monkeypatch.setattr('pydescent.regression.model.gradient_descent', fake)
    return fake


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_defaults(self):
        model = LinearRegressionModel(3)
        assert model.num_features == 3
        assert model.n_samples == 0
        assert not model.is_fit
        assert model.solution is None

    @pytest.mark.parametrize("bad", [0, -2])
    def test_num_features_positive(self, bad):
        with pytest.raises(ValidationError, match="num_features"):
            LinearRegressionModel(bad)

    @pytest.mark.parametrize("bad", [2.0, True, "3"])
    def test_num_features_integer(self, bad):
        with pytest.raises(ValidationError, match="expected an integer"):
            LinearRegressionModel(bad)

    def test_cost_fn_must_be_callable(self):
        with pytest.raises(ValidationError, match="cost_fn"):
            LinearRegressionModel(2, cost_fn="mse")

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            LinearRegressionModel(2, backend='tpu')

    def test_repr(self):
        assert repr(LinearRegressionModel(2)) == (
            "LinearRegressionModel(num_features=2, n_samples=0, state=unfit)"
        )


# ═══════════════════════════════════════════════════════════════════════
# add_data
# ═══════════════════════════════════════════════════════════════════════


class TestAddData:

    def test_splits_features_and_target(self):
        model = LinearRegressionModel(5)
        model.add_data([[23, 45, 12, 98, 34, 18, 81], [87, 48, 9, 1, 45, 23, 72]])
        model.add_data([[8, 7, 6, 5, 3, 9]])

        X, y = model.training_data()
        np.testing.assert_array_equal(
            X, [[23, 45, 12, 98, 34], [87, 48, 9, 1, 45], [8, 7, 6, 5, 3]]
        )
        np.testing.assert_array_equal(y, [18, 23, 9])
        assert model.n_samples == 3

    def test_rejects_short_row(self):
        model = LinearRegressionModel(5)
        with pytest.raises(ValidationError, match="not enough data"):
            model.add_data([[1, 2, 3, 4, 5]])
        assert model.n_samples == 0

    def test_short_row_keeps_earlier_rows(self):
        model = LinearRegressionModel(2)
        with pytest.raises(ValidationError, match=r"rows\[1\] has 2 values, need at least 3"):
            model.add_data([[1, 2, 3], [4, 5], [6, 7, 8]])
        X, y = model.training_data()
        np.testing.assert_array_equal(X, [[1, 2]])
        np.testing.assert_array_equal(y, [3])

    def test_chaining(self):
        model = LinearRegressionModel(1)
        assert model.add_data([[1, 2]]).add_data([[3, 4]]) is model
        assert model.n_samples == 2

    def test_accepts_2d_array(self, rng):
        data = rng.standard_normal((6, 4))
        model = LinearRegressionModel(3).add_data(data)
        X, y = model.training_data()
        np.testing.assert_array_equal(X, data[:, :3])
        np.testing.assert_array_equal(y, data[:, 3])

    def test_accepts_generator(self):
        model = LinearRegressionModel(1).add_data((i, 2 * i) for i in range(4))
        np.testing.assert_array_equal(model.training_data()[1], [0, 2, 4, 6])

    def test_empty_batch_is_noop(self):
        model = LinearRegressionModel(2).add_data([])
        assert model.n_samples == 0
        assert model.training_data()[0].shape == (0, 2)

    def test_nan_in_used_values_rejected(self):
        model = LinearRegressionModel(2)
        with pytest.raises(ValidationError, match="non-finite"):
            model.add_data([[1.0, np.nan, 3.0]])
        assert model.n_samples == 0

    def test_nan_after_target_ignored(self):
        model = LinearRegressionModel(2).add_data([[1.0, 2.0, 3.0, np.nan]])
        np.testing.assert_array_equal(model.training_data()[1], [3.0])

    def test_nested_row_rejected(self):
        with pytest.raises(DimensionError, match="1D row"):
            LinearRegressionModel(2).add_data([[[1, 2, 3]]])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            LinearRegressionModel(1).add_data([["a", "b"]])

    def test_training_data_is_a_copy(self):
        model = LinearRegressionModel(1).add_data([[1, 2]])
        X, y = model.training_data()
        X[0, 0] = 99.0
        y[0] = 99.0
        X2, y2 = model.training_data()
        assert X2[0, 0] == 1.0
        assert y2[0] == 2.0


# ═══════════════════════════════════════════════════════════════════════
# solve
# ═══════════════════════════════════════════════════════════════════════


class TestSolve:

    def test_requires_data(self):
        with pytest.raises(ValidationError, match="no training data"):
            LinearRegressionModel(2).solve()

    def test_passes_data_and_parameters(self, fake_descent):
        model = LinearRegressionModel(3)
        model.add_data([[1, 2, 3, 4], [5, 6, 7, 8]])
        model.solve(alpha=0.2, max_iters=25, min_alpha=0.001)

        call, = fake_descent.calls
        assert isinstance(call['X'], DescentDesign)
        assert call['y'] is None
        np.testing.assert_array_equal(call['X'].X, [[1, 2, 3], [5, 6, 7]])
        np.testing.assert_array_equal(call['X'].y, [4, 8])
        assert call['cost_fn'] is mean_squared_cost
        assert call['alpha'] == 0.2
        assert call['max_iters'] == 25
        assert call['min_alpha'] == 0.001
        assert call['backend'] == 'cpu'

    def test_default_parameters(self, fake_descent):
        LinearRegressionModel(3).add_data([[1, 2, 3, 4]]).solve()
        call, = fake_descent.calls
        assert call['alpha'] == 0.01
        assert call['max_iters'] == 1000
        assert call['min_alpha'] is None

    def test_stores_solution(self, fake_descent):
        model = LinearRegressionModel(3).add_data([[1, 2, 3, 4]])
        ret = model.solve()
        assert ret is fake_descent.solution
        assert model.solution is ret
        assert model.is_fit

    def test_custom_cost_fn(self, cost_spy):
        spy = cost_spy(mean_squared_cost)
        model = LinearRegressionModel(1, cost_fn=spy)
        model.add_data([[1, 2], [2, 4], [3, 7]])
        ret = model.solve(alpha=0.1, max_iters=4)
        assert spy.call_count == ret.iters + 1 == 5

    def test_resolve_replaces_fit(self):
        model = LinearRegressionModel(1).add_data([[1, 2], [2, 4], [3, 7]])
        first = model.solve(alpha=0.1, max_iters=5)
        model.add_data([[4, 20]])
        second = model.solve(alpha=0.1, max_iters=5)
        assert model.solution is second
        assert second is not first
        assert not np.array_equal(first.mean, second.mean)

    def test_failed_solve_keeps_previous_fit(self):
        model = LinearRegressionModel(1).add_data([[1, 2], [2, 4], [3, 7]])
        first = model.solve(alpha=0.1, max_iters=5)
        with pytest.raises(ValidationError, match="alpha"):
            model.solve(alpha=-1.0)
        assert model.solution is first

    def test_reset(self):
        model = LinearRegressionModel(1).add_data([[1, 2], [2, 4]])
        model.solve(alpha=0.1, max_iters=5)
        model.reset()
        assert model.n_samples == 0
        assert not model.is_fit
        with pytest.raises(IllegalStateError):
            model.predict([1.0])


# ═══════════════════════════════════════════════════════════════════════
# predict
# ═══════════════════════════════════════════════════════════════════════


class TestPredict:

    def test_before_solve(self):
        model = LinearRegressionModel(2).add_data([[1, 2, 3]])
        with pytest.raises(IllegalStateError, match="need to solve first"):
            model.predict([1, 2])

    def test_normalizes_then_dots(self, fake_descent):
        model = LinearRegressionModel(3).add_data([[1, 2, 3, 4]])
        model.solve()
        # z = [1, 1.5, -3, 3]; 0.25 + 0.75 - 4.5 + 7.5
        assert model.predict([8, 7, 24]) == 4.0

    def test_batch(self, fake_descent):
        model = LinearRegressionModel(3).add_data([[1, 2, 3, 4]])
        model.solve()
        np.testing.assert_array_equal(model.predict([[8, 7, 24], [5, 10, 15]]), [4.0, 0.25])

    def test_wrong_width(self, fake_descent):
        model = LinearRegressionModel(3).add_data([[1, 2, 3, 4]])
        model.solve()
        with pytest.raises(DimensionError, match="expected 3 features"):
            model.predict([1, 2])

    def test_matches_solution_predict(self):
        model = LinearRegressionModel(2)
        model.add_data([[34, 23, 0.9], [20, 11, 1.1], [41, 10, 2.2], [54, 12, 0.8]])
        ret = model.solve(alpha=0.1, max_iters=50)
        x = np.array([30.0, 15.0])
        expected = ret.theta[0] + ((x - ret.mean) / ret.std) @ ret.theta[1:]
        np.testing.assert_allclose(model.predict(x), expected, rtol=1e-14)

    def test_constant_feature_gets_no_weight(self):
        model = LinearRegressionModel(2)
        model.add_data([[0.1, 1, 2], [0.1, 2, 4], [0.1, 3, 6]])
        ret = model.solve(alpha=0.1, max_iters=500)
        assert ret.theta[1] == 0.0
        assert model.predict([0.2, 4]) == model.predict([0.1, 4])
        np.testing.assert_allclose(model.predict([0.1, 4]), 8.0, rtol=1e-4)

    def test_training_mean_predicts_bias(self):
        """At the training mean every normalized feature is zero."""
        model = LinearRegressionModel(2)
        model.add_data([[34, 23, 0.9], [20, 11, 1.1], [41, 10, 2.2], [54, 12, 0.8]])
        ret = model.solve(alpha=0.1, max_iters=50)
        assert model.predict(ret.mean) == ret.theta[0]
