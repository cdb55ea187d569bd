"""
Unit tests for the hyperparameter grid search.
"""

import math

import pytest

from gdregression import FitResult, LinearRegression, SearchResult, grid_search


class StubModel:
    """Returns preset errors in call order and records the fit arguments."""

    def __init__(self, errors):
        self.errors = list(errors)
        self.calls = []

    def fit(self, iterations, learning_rate, commit=True):
        self.calls.append((iterations, learning_rate, commit))
        return FitResult(intercept=0.0, slopes=(0.0,), error=self.errors.pop(0))


def linear_model():
    x = [i / 10 - 1 for i in range(21)]
    y = [3 * xi + 2 for xi in x]
    return LinearRegression(x, y)


class TestGridSearch:
    """Tests for `grid_search`."""

    def test_returns_verified_best_pair(self):
        model = linear_model()
        iteration_candidates = [5, 50, 500]
        learning_rate_candidates = [1.5, 0.1, 0.01]

        errors = {}
        for iteration in iteration_candidates:
            for learning_rate in learning_rate_candidates:
                result = model.fit(iterations=iteration, learning_rate=learning_rate, commit=False)
                errors[(iteration, learning_rate)] = result.error
        expected = min(errors, key=errors.get)

        best = grid_search(model, iteration_candidates, learning_rate_candidates)
        assert best == SearchResult(*expected)
        assert best == (500, 0.1)

    def test_model_method(self):
        model = linear_model()
        assert model.search([5, 500], [0.01, 0.1]) == grid_search(model, [5, 500], [0.01, 0.1])

    def test_does_not_change_parameters(self):
        model = linear_model()
        model.set_params(intercept=1.0, slopes=[1.0])
        model.search([10, 100], [0.1, 0.01])
        assert model.get_params() == (1.0, (1.0,))

    def test_unfitted_model_stays_unfitted(self):
        model = linear_model()
        model.search([10], [0.1])
        assert not model.is_fitted

    def test_trials_are_not_committed(self):
        model = StubModel([3.0, 2.0, 1.0, 4.0])
        grid_search(model, [10, 20], [0.1, 0.01])
        assert all(commit is False for _, _, commit in model.calls)

    def test_cross_product_order(self):
        model = StubModel([3.0, 2.0, 1.0, 4.0])
        best = grid_search(model, [10, 20], [0.1, 0.01])
        assert [(it, lr) for it, lr, _ in model.calls] == [
            (10, 0.1), (10, 0.01), (20, 0.1), (20, 0.01)
        ]
        assert best == SearchResult(iteration=20, learning_rate=0.1)

    def test_tie_keeps_first(self):
        model = StubModel([1.0, 1.0, 1.0, 1.0])
        assert grid_search(model, [10, 20], [0.1, 0.01]) == (10, 0.1)

    def test_nan_best_is_replaced(self):
        model = StubModel([math.nan, 5.0, math.nan])
        assert grid_search(model, [10], [0.1, 0.01, 0.001]) == (10, 0.01)

    @pytest.mark.parametrize(
        "iterations, learning_rates", [([], [0.1]), ([10], []), ([], [])]
    )
    def test_empty_candidates(self, iterations, learning_rates):
        model = StubModel([])
        assert grid_search(model, iterations, learning_rates) == SearchResult(0, 0)

    def test_verbose(self, capsys):
        model = StubModel([3.0, 2.0])
        grid_search(model, [10], [0.1, 0.01], verbose=True)
        out = capsys.readouterr().out
        assert "iterations=10, learning_rate=0.1: error 3.0" in out
        assert "Best: iterations=10, learning_rate=0.01" in out
