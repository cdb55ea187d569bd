"""Hyperparameter grid search for gradient-descent regression."""

import math
from typing import NamedTuple, Sequence

from .models.base import RegressionModel


class SearchResult(NamedTuple):
    iteration: int
    learning_rate: float


def grid_search(
    model: RegressionModel,
    iteration_candidates: Sequence[int],
    learning_rate_candidates: Sequence[float],
    verbose: bool = False,
) -> SearchResult:
    """
    Find the (iterations, learning rate) pair with the lowest training error.

    Every pair in the cross product is tried with `model.fit(..., commit=False)`,
    so the model's parameters are left as they were. Iteration counts form the
    outer loop and learning rates the inner loop; on equal errors the pair met
    first wins.

    Args:
        model: Model whose `fit` accepts `iterations`, `learning_rate` and `commit`
        iteration_candidates: Iteration counts to try
        learning_rate_candidates: Learning rates to try
        verbose: Print the error of every pair. Default: False.

    Returns:
        SearchResult(iteration, learning_rate). `SearchResult(0, 0)` if either
        candidate list is empty. Re-run `fit` with these values to obtain the
        fitted parameters.
    """
    best = SearchResult(iteration=0, learning_rate=0)
    best_error = None

    for iteration in iteration_candidates:
        for learning_rate in learning_rate_candidates:
            result = model.fit(iterations=iteration, learning_rate=learning_rate, commit=False)
            print(f"iterations={iteration}, learning_rate={learning_rate}: error {result.error}") if verbose else None

            if (
                best_error is None
                or result.error < best_error
                or (math.isnan(best_error) and not math.isnan(result.error))
            ):
                best = SearchResult(iteration=iteration, learning_rate=learning_rate)
                best_error = result.error

    if verbose:
        print(f"Best: iterations={best.iteration}, learning_rate={best.learning_rate}, error {best_error}")

    return best
