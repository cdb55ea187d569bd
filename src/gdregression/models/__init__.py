"""Regression models."""

from .base import RegressionModel, Parameters, FitResult, Scores
from .linear import LinearRegression

__all__ = ["RegressionModel", "Parameters", "FitResult", "Scores", "LinearRegression"]
