"""
Unit tests for loading datasets from pandas and CSV.
"""

import numpy as np
import pandas as pd
import pytest

from gdregression import LinearRegression
from gdregression.data import dataset_from_frame, load_csv


@pytest.fixture
def frame():
    return pd.DataFrame(
        {
            "area": [50.0, 80.0, 120.0, 65.0],
            "rooms": [2, 3, 4, 2],
            "price": [150.0, 230.0, 340.0, np.nan],
        }
    )


class TestDatasetFromFrame:
    """Tests for `dataset_from_frame`."""

    def test_default_features(self, frame):
        rows, labels = dataset_from_frame(frame, "price")
        assert rows == [[50.0, 2.0], [80.0, 3.0], [120.0, 4.0]]
        assert labels == [150.0, 230.0, 340.0]

    def test_selected_features(self, frame):
        rows, labels = dataset_from_frame(frame, "price", features=["rooms"])
        assert rows == [[2.0], [3.0], [4.0]]

    def test_missing_target(self, frame):
        with pytest.raises(KeyError):
            dataset_from_frame(frame, "value")

    def test_missing_feature(self, frame):
        with pytest.raises(KeyError):
            dataset_from_frame(frame, "price", features=["area", "floor"])

    def test_usable_by_model(self, frame):
        rows, labels = dataset_from_frame(frame, "price")
        model = LinearRegression(rows, labels)
        assert model.n_features == 2


class TestLoadCsv:
    """Tests for `load_csv`."""

    def test_load(self, frame, tmp_path):
        path = tmp_path / "houses.csv"
        frame.to_csv(path, index=False)

        rows, labels = load_csv(str(path), "price", features=["area"])
        assert rows == [[50.0], [80.0], [120.0]]
        assert labels == [150.0, 230.0, 340.0]

    def test_verbose(self, frame, tmp_path, capsys):
        path = tmp_path / "houses.csv"
        frame.to_csv(path, index=False)

        load_csv(str(path), "price", verbose=True)
        out = capsys.readouterr().out
        assert "Loaded 3 rows with 2 features" in out
        assert "Dropped 1 rows with missing values" in out
