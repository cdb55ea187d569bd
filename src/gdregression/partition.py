"""Shuffling and train/test splitting of datasets."""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .exceptions import RangeError, ShapeError
from .validation import validate


def shuffle(
    features: Sequence,
    labels: Sequence,
    seed: Optional[int | np.random.Generator] = None,
) -> Tuple[list, list]:
    """
    Shuffle features and labels together with the Fisher-Yates algorithm.

    At every step the same random index is used for both lists, so each
    feature vector stays paired with its label. The inputs are copied and
    left unchanged.

    Args:
        features: Feature rows
        labels: Labels, same length as `features`
        seed: Seed or `numpy.random.Generator` for the random index draws.
            Default: None (fresh entropy).

    Returns:
        Tuple of (shuffled_features, shuffled_labels)
    """
    if len(features) != len(labels):
        raise ShapeError(
            f"Dimensions in features ({len(features)}) and labels ({len(labels)}) do not match."
        )

    rng = np.random.default_rng(seed)
    features = list(features)
    labels = list(labels)

    for i in range(len(features) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        features[i], features[j] = features[j], features[i]
        labels[i], labels[j] = labels[j], labels[i]

    return features, labels


def _check_ratio(ratio: float):
    if not 0 < ratio < 100:
        raise RangeError(
            f"ratio must lie strictly between 0 and 100 percent, got {ratio}."
        )


def split(ratio: float, sequence: Sequence) -> Tuple[list, list]:
    """
    Split a sequence into a training chunk and a test chunk.

    Args:
        ratio: Percentage of elements in the training chunk, 0 < ratio < 100
        sequence: Sequence to split

    Returns:
        train: First floor(ratio / 100 * len(sequence)) elements
        test: Remaining elements
    """
    _check_ratio(ratio)
    train_size = int(ratio * len(sequence) // 100)
    sequence = list(sequence)
    return sequence[:train_size], sequence[train_size:]


def train_test_sets(
    features: Sequence,
    labels: Sequence,
    ratio: float,
    seed: Optional[int | np.random.Generator] = None,
) -> Tuple[List, List, List, List]:
    """
    Randomly partition a dataset into training and test sets.

    Args:
        features: Feature rows (or flat single-feature values)
        labels: Labels
        ratio: Percentage of samples used for training, 0 < ratio < 100
        seed: Seed or `numpy.random.Generator` for the shuffle. Default: None.

    Returns:
        train_features, test_features, train_labels, test_labels

    Example:
        >>> X_train, X_test, y_train, y_test = train_test_sets(X, y, ratio=70, seed=0)
    """
    _check_ratio(ratio)
    validate(features, labels)

    shuffled_features, shuffled_labels = shuffle(features, labels, seed=seed)
    train_features, test_features = split(ratio, shuffled_features)
    train_labels, test_labels = split(ratio, shuffled_labels)

    return train_features, test_features, train_labels, test_labels
