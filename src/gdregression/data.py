"""
Loading regression datasets from pandas data frames and CSV files.

The model works on plain Python lists, so these helpers convert a
`pandas.DataFrame` into a list of feature rows and a list of labels.
"""

from typing import List, Optional, Sequence, Tuple

import pandas as pd


def dataset_from_frame(
    df: pd.DataFrame,
    target: str,
    features: Optional[Sequence[str]] = None,
) -> Tuple[List[List[float]], List[float]]:
    """
    Split a data frame into feature rows and labels.

    Rows with a missing value in any selected column are dropped.

    Args:
        df: `pandas.DataFrame`
        target: Name of the label column
        features: Names of the feature columns. Default: every column except `target`.

    Returns:
        Tuple of (rows, labels)
    """
    if target not in df.columns:
        raise KeyError(f"Target column '{target}' not found in data frame.")

    if features is None:
        features = [col for col in df.columns if col != target]
    features = list(features)

    missing = [col for col in features if col not in df.columns]
    if missing:
        raise KeyError(f"Feature columns not found in data frame: {missing}")

    df = df[features + [target]].dropna()
    rows = df[features].to_numpy(dtype=float).tolist()
    labels = df[target].to_numpy(dtype=float).tolist()
    return rows, labels


def load_csv(
    file_path: str,
    target: str,
    features: Optional[Sequence[str]] = None,
    verbose: bool = False,
) -> Tuple[List[List[float]], List[float]]:
    """
    Load a regression dataset from CSV.

    Args:
        file_path: Path to CSV file
        target: Name of the label column
        features: Names of the feature columns. Default: every other column.
        verbose: Print progress messages. Default: False.

    Returns:
        Tuple of (rows, labels)
    """
    if verbose:
        print(f"Loading data from {file_path}...")

    df = pd.read_csv(file_path)
    rows, labels = dataset_from_frame(df, target, features)

    if verbose:
        print(f"  Loaded {len(rows)} rows with {len(rows[0]) if rows else 0} features")
        if len(rows) < len(df):
            print(f"  Dropped {len(df) - len(rows)} rows with missing values")

    return rows, labels
