"""Evaluation metrics for regression models."""

import numpy as np


def mse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the mean squared error (MSE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mse: Mean squared error
    """
    y_true, y_pred = np.asarray(y_true, dtype=float), np.asarray(y_pred, dtype=float)
    return float(np.mean((y_pred - y_true)**2))


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        rmse: Root mean square error
    """
    return float(np.sqrt(mse(y_true, y_pred)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate mean absolute error (MAE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mae: Mean absolute error
    """
    y_true, y_pred = np.asarray(y_true, dtype=float), np.asarray(y_pred, dtype=float)
    return float(np.mean(np.abs(y_pred - y_true)))


def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Coefficient of determination between a set of predictions and ground truths.

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    y_true, y_pred = np.asarray(y_true, dtype=float), np.asarray(y_pred, dtype=float)
    sum_e = np.sum((y_true - y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    return float(1.0 - sum_e / sum_s)
