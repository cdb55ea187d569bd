"""Base interface for regression models."""

from abc import ABC, abstractmethod
from typing import Iterator, NamedTuple, Sequence, Tuple

from ..exceptions import ShapeError


class Parameters(NamedTuple):
    """Intercept and one slope per feature."""
    intercept: float
    slopes: Tuple[float, ...]


class FitResult(NamedTuple):
    """Best parameters seen during a fit, with their training mean-squared error."""
    intercept: float
    slopes: Tuple[float, ...]
    error: float


class Scores(NamedTuple):
    mse: float
    mae: float


class RegressionModel(ABC):
    """
    Base class for regression models.
    """

    @abstractmethod
    def fit(self, *args, **kwargs) -> FitResult:
        """
        Fit model parameters to the training data held by the model.

        Returns:
            result: `FitResult` with the fitted parameters and training error
        """
        pass

    @abstractmethod
    def predict(self, features: Sequence) -> Iterator[float]:
        """
        Predict one label per feature vector.

        Args:
            features: Feature rows of shape (n_samples, n_features)

        Returns:
            predictions: Generator yielding predictions in input order
        """
        pass

    def score(self, test_features: Sequence, test_labels: Sequence) -> Scores:
        """
        Mean squared error and mean absolute error on a test set.

        Args:
            test_features: Feature rows
            test_labels: True labels, same length as `test_features`

        Returns:
            Scores(mse, mae)
        """
        if len(test_features) != len(test_labels):
            raise ShapeError(
                f"Dimensions in test_features ({len(test_features)}) and "
                f"test_labels ({len(test_labels)}) do not match."
            )
        n = len(test_labels)
        if n == 0:
            raise ShapeError("Cannot score an empty test set.")

        mse = 0.0
        mae = 0.0
        for real, predicted in zip(test_labels, self.predict(test_features)):
            err = real - predicted
            mse += err * err
            mae += abs(err)

        return Scores(mse=mse / n, mae=mae / n)
