"""Closed-form starting weights for gradient descent."""

import math

from .exceptions import DegenerateInputError, ShapeError
from .models.base import Parameters
from .validation import validate


def starting_weights(features, labels) -> Parameters:
    """
    Least-squares intercept and slope of a single-feature dataset.

    Computed in one pass from the sums Sx, Sy, Sxx and Sxy:
        slope     = (n Sxy - Sx Sy) / (n Sxx - Sx^2)
        intercept = (Sy Sxx - Sx Sxy) / (n Sxx - Sx^2)

    Used only to seed gradient descent.

    Args:
        features: Single-feature rows (or a flat sequence of numbers)
        labels: Target values

    Returns:
        Parameters with one slope

    Raises:
        ShapeError: If the features have more than one column
        DegenerateInputError: If the features are constant, so the
            denominator vanishes
    """
    rows, labels = validate(features, labels)
    if len(rows[0]) != 1:
        raise ShapeError(
            f"Starting weights need single-feature input, got {len(rows[0])} features."
        )

    n = len(rows)
    sum_x = sum_y = sum_xx = sum_xy = 0.0
    for (x,), y in zip(rows, labels):
        sum_x += x
        sum_y += y
        sum_xx += x * x
        sum_xy += x * y

    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        raise DegenerateInputError(
            "Cannot compute starting weights: features have zero variance."
        )

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y * sum_xx - sum_x * sum_xy) / denom
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise DegenerateInputError(
            f"Starting weights are not finite (slope={slope}, intercept={intercept})."
        )

    return Parameters(intercept=intercept, slopes=(slope,))
