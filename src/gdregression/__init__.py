"""Linear regression by batch gradient descent."""

__version__ = "0.1.0"

from .exceptions import (
    ShapeError,
    RangeError,
    DegenerateInputError,
    DivergenceError,
)

from .validation import validate

from .models import (
    RegressionModel,
    LinearRegression,
    Parameters,
    FitResult,
    Scores,
)

from .estimators import starting_weights

from .search import grid_search, SearchResult

from .partition import shuffle, split, train_test_sets

from .evaluation import mse, rmse, mae, r2_score

__all__ = [
    # Errors
    "ShapeError",
    "RangeError",
    "DegenerateInputError",
    "DivergenceError",

    # Models
    "RegressionModel",
    "LinearRegression",
    "Parameters",
    "FitResult",
    "Scores",
    "starting_weights",

    # Hyperparameter search
    "grid_search",
    "SearchResult",

    # Dataset utilities
    "validate",
    "shuffle",
    "split",
    "train_test_sets",

    # Evaluation metrics
    "mse",
    "rmse",
    "mae",
    "r2_score",
]
