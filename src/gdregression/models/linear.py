"""Linear regression fitted by batch gradient descent."""

import math
from typing import Callable, Iterator, List, Optional, Sequence

from .base import FitResult, Parameters, RegressionModel
from ..estimators import starting_weights
from ..exceptions import DivergenceError, RangeError, ShapeError
from ..search import SearchResult, grid_search
from ..validation import as_row, validate


def _residuals(intercept: float, slopes: Sequence[float], rows, labels) -> List[float]:
    """Prediction minus label for every sample."""
    residuals = []
    for row, label in zip(rows, labels):
        predicted = intercept
        for slope, x in zip(slopes, row):
            predicted += slope * x
        residuals.append(predicted - label)
    return residuals


def _mean_squared_error(residuals: List[float]) -> float:
    total = 0.0
    for r in residuals:
        total += r * r  # not r ** 2, which raises OverflowError on divergence
    return total / len(residuals)


def _gradient(residuals: List[float], rows, n_features: int):
    """Gradient of the mean squared error w.r.t. the intercept and each slope."""
    n = len(residuals)
    grad_intercept = 0.0
    grad_slopes = [0.0] * n_features
    for r, row in zip(residuals, rows):
        grad_intercept += r
        for d, x in enumerate(row):
            grad_slopes[d] += r * x
    scale = 2.0 / n
    return grad_intercept * scale, [g * scale for g in grad_slopes]


class LinearRegression(RegressionModel):
    """
    Ordinary least squares linear regression fitted by gradient descent.

    Fits y = intercept + sum_d slopes[d] * x[d] by minimizing the mean
    squared error
        MSE = (1/n) sum_i (prediction_i - y_i)^2
    with batch gradient descent. Every iteration computes the gradient over
    the whole training set and updates all parameters at once.

    The arithmetic is written as plain loops over Python floats, so the model
    has no matrix-library dependency.

    Attributes:
        features: Training rows, list of tuples of shape (n_samples, n_features)
        labels: Training labels of shape (n_samples,)
        n_features: Number of features D
        intercept: Current intercept
        slopes: Current slopes, tuple of length D

    Example:
        >>> model = LinearRegression(X_train, y_train)
        >>> result = model.fit(iterations=5000, learning_rate=1e-3)
        >>> predictions = list(model.predict(X_test))
        >>> mse, mae = model.score(X_test, y_test)
    """

    def __init__(self, features: Sequence, labels: Sequence):
        """
        Create a `LinearRegression` instance with zero parameters.

        Args:
            features: Training rows of shape (n_samples, n_features), or a
                flat sequence of numbers for single-feature data.
            labels: Training labels of shape (n_samples,)
        """
        self.features, self.labels = validate(features, labels)
        self.n_features = len(self.features[0])
        self.intercept = 0.0
        self.slopes = (0.0,) * self.n_features
        self._fitted = False  # indicate whether parameters have been fitted or set

    @property
    def is_fitted(self) -> bool:
        return self._fitted

    def fit(
        self,
        iterations: int = 1000,
        learning_rate: float = 1e-3,
        seed_from_analytic: bool = False,
        commit: bool = True,
        verbose: bool = False,
        callback: Optional[Callable[[int, float], None]] = None,
        raise_on_divergence: bool = False,
    ) -> FitResult:
        """
        Fit the parameters with batch gradient descent.

        The error of each iteration is the MSE of the parameters the iteration
        starts from. The parameters with the lowest error over all iterations
        are returned, which need not be the final ones when a large learning
        rate makes the error oscillate.

        Args:
            iterations: Number of gradient descent iterations. Default: 1000.
            learning_rate: Step size. Default: 1e-3.
            seed_from_analytic: Start from the closed-form least-squares
                solution instead of zeros. Only used for single-feature data.
                Default: False.
            commit: Install the returned parameters on the model. Default: True.
            verbose: Print progress every `iterations // 10` iterations.
                Default: False.
            callback: Called as `callback(iteration, error)` after every iteration.
                Default: None.
            raise_on_divergence: Raise `DivergenceError` as soon as the error
                is not finite. If False, non-finite values are returned as they
                are. Default: False.

        Returns:
            result: `FitResult(intercept, slopes, error)`
        """
        if iterations <= 0:
            raise RangeError(f"iterations must be positive, got {iterations}.")
        if learning_rate <= 0:
            raise RangeError(f"learning_rate must be positive, got {learning_rate}.")

        rows, labels = self.features, self.labels

        intercept = 0.0
        slopes = [0.0] * self.n_features
        if seed_from_analytic and self.n_features == 1:
            seed = starting_weights(rows, labels)
            intercept, slopes = seed.intercept, list(seed.slopes)

        log_every = max(iterations // 10, 1)
        best = None

        for iteration in range(1, iterations + 1):
            residuals = _residuals(intercept, slopes, rows, labels)
            error = _mean_squared_error(residuals)

            if raise_on_divergence and not math.isfinite(error):
                raise DivergenceError(
                    f"Error became {error} at iteration {iteration} "
                    f"(learning_rate={learning_rate})."
                )

            if best is None or error < best.error:
                best = FitResult(intercept=intercept, slopes=tuple(slopes), error=error)

            grad_intercept, grad_slopes = _gradient(residuals, rows, self.n_features)
            intercept -= learning_rate * grad_intercept
            slopes = [s - learning_rate * g for s, g in zip(slopes, grad_slopes)]

            if verbose and iteration % log_every == 0:
                print(f"iteration {iteration}, error {error}, slopes {slopes}, intercept {intercept}")
            if callback is not None:
                callback(iteration, error)

        if commit:
            self.intercept = best.intercept
            self.slopes = best.slopes
            self._fitted = True

        return best

    def predict(self, features: Sequence) -> Iterator[float]:
        """
        Generate predictions with the current parameters.

        Args:
            features: Feature rows of shape (n_samples, n_features), or a flat
                sequence of numbers for a single-feature model.

        Yields:
            One prediction per row, in input order
        """
        intercept, slopes = self.intercept, self.slopes
        for row in features:
            predicted = intercept
            for slope, x in zip(slopes, as_row(row, self.n_features)):
                predicted += slope * x
            yield predicted

    def set_params(self, intercept: float, slopes: Sequence[float]):
        """
        Install previously fitted or externally computed parameters.

        Args:
            intercept: Intercept
            slopes: One slope per feature
        """
        slopes = list(slopes)
        if len(slopes) != self.n_features:
            raise ShapeError(
                f"Expected {self.n_features} slopes, got {len(slopes)}."
            )
        self.intercept = float(intercept)
        self.slopes = tuple(float(s) for s in slopes)
        self._fitted = True

    def get_params(self) -> Parameters:
        """
        Get the current parameters.

        Returns:
            Parameters(intercept, slopes)
        """
        return Parameters(intercept=self.intercept, slopes=self.slopes)

    def search(
        self,
        iteration_candidates: Sequence[int],
        learning_rate_candidates: Sequence[float],
        verbose: bool = False,
    ) -> SearchResult:
        """Grid search over iteration counts and learning rates. See `grid_search`."""
        return grid_search(self, iteration_candidates, learning_rate_candidates, verbose=verbose)

    def __repr__(self):
        return (
            f"LinearRegression(n_samples={len(self.labels)}, n_features={self.n_features}, "
            f"intercept={self.intercept}, slopes={self.slopes})"
        )
