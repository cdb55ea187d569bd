"""
Input validation for regression datasets.

Features may be given either as a sequence of rows (each row a sequence of
D numbers) or, for single-feature data, as a flat sequence of numbers. Both
forms are normalized to a list of tuples of floats so the numeric code only
ever sees one layout.
"""

import math
import numbers
from collections.abc import Sequence
from typing import List, Tuple

import numpy as np

from .exceptions import ShapeError

Row = Tuple[float, ...]


def _is_number(value) -> bool:
    """Return True for finite real numbers (booleans excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real) and math.isfinite(value)


def _is_row(value) -> bool:
    if isinstance(value, np.ndarray):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _to_list(values) -> list:
    if isinstance(values, np.ndarray):
        return values.tolist()
    return list(values)


def as_row(row, dimension: int) -> Row:
    """
    Normalize a single feature vector to a tuple of floats.

    Args:
        row: Sequence of numbers, or a bare number when `dimension` is 1
        dimension: Expected number of features

    Returns:
        Tuple of length `dimension`
    """
    if not _is_row(row):
        row = [row]
    row = _to_list(row)
    if len(row) != dimension:
        raise ShapeError(
            f"Expected a feature vector of length {dimension}, got {len(row)}."
        )
    for value in row:
        if not _is_number(value):
            raise ShapeError(f"Every feature must be a finite number, got {value!r}.")
    return tuple(float(value) for value in row)


def as_rows(features) -> List[Row]:
    """
    Normalize a feature matrix to a list of equal-length tuples.

    Args:
        features: Sequence of rows, or a flat sequence of numbers for
            single-feature data. `numpy.ndarray` inputs are accepted.

    Returns:
        rows: List of tuples, all of the same length D >= 1
    """
    features = _to_list(features)
    if len(features) == 0:
        raise ShapeError("Features must have at least one element.")

    if not _is_row(features[0]):
        # flat single-feature input
        rows = []
        for i, value in enumerate(features):
            if _is_row(value):
                raise ShapeError(f"Row {i} is a sequence but earlier rows are scalars.")
            rows.append(as_row(value, 1))
        return rows

    dimension = len(features[0])
    if dimension == 0:
        raise ShapeError("Feature vectors must have at least one element.")

    rows = []
    for i, row in enumerate(features):
        if not _is_row(row):
            raise ShapeError(f"Row {i} is a scalar but earlier rows are sequences.")
        if len(row) != dimension:
            raise ShapeError(
                f"Every row must have the same length: row 0 has {dimension}, "
                f"row {i} has {len(row)}."
            )
        rows.append(as_row(row, dimension))
    return rows


def as_labels(labels) -> List[float]:
    """Normalize labels to a list of floats."""
    labels = _to_list(labels)
    if len(labels) == 0:
        raise ShapeError("Labels must have at least one element.")
    for value in labels:
        if not _is_number(value):
            raise ShapeError(f"Every label must be a finite number, got {value!r}.")
    return [float(value) for value in labels]


def validate(features, labels) -> Tuple[List[Row], List[float]]:
    """
    Check a dataset and return it in normalized form.

    Checks:
    1. Features and labels have the same length
    2. Neither is empty
    3. All feature rows share one dimensionality
    4. Every element is a finite real number

    Args:
        features: Feature rows (or flat single-feature values)
        labels: Target values

    Returns:
        Tuple of (rows, labels)

    Raises:
        ShapeError: If any check fails
    """
    if len(features) != len(labels):
        raise ShapeError(
            f"Dimensions in features ({len(features)}) and labels ({len(labels)}) do not match."
        )
    return as_rows(features), as_labels(labels)


def is_single_feature(features) -> bool:
    """Return True if the (validated) feature rows have exactly one column."""
    return len(as_rows(features)[0]) == 1
