import logging

import pytest
import numpy as np
import pandas as pd

from interdetect.exceptions import (
    InvalidValueError, MissingInputError, ShapeMismatchError)
from interdetect.screening import dcsis
from interdetect.types import ScreeningResult


@pytest.fixture
def data():
    rng = np.random.default_rng(0)
    X = rng.normal(size=(100, 5))
    y = X[:, 3] ** 2 + 0.1 * rng.normal(size=100)
    return X, y


def test_dcsis_output_structure(data):
    X, y = data
    result = dcsis(X, y, nsis=2)
    assert isinstance(result, ScreeningResult)
    assert sorted(result.ranked_all.tolist()) == list(range(5))
    assert result.scores.shape == (5,)
    assert np.array_equal(result.ranked_nsis, result.ranked_all[:2])

def test_dcsis_ranks_by_decreasing_score(data):
    X, y = data
    result = dcsis(X, y)
    ordered = result.scores[result.ranked_all]
    assert np.all(np.diff(ordered) <= 0)

def test_dcsis_detects_quadratic_dependence(data):
    X, y = data
    assert dcsis(X, y, nsis=1).ranked_nsis.tolist() == [3]

def test_dcsis_is_deterministic(data):
    X, y = data
    first = dcsis(X, y)
    second = dcsis(X, y)
    assert np.array_equal(first.ranked_all, second.ranked_all)
    assert np.array_equal(first.ranked_nsis, second.ranked_nsis)
    assert np.array_equal(first.scores, second.scores)

@pytest.mark.parametrize("nsis, expected_size", [
    (1, 1), (3, 3), (5, 5), (10, 5), (2.7, 2), (0, 0), (0.5, 0),
])
def test_dcsis_screening_size(data, nsis, expected_size):
    X, y = data
    result = dcsis(X, y, nsis=nsis)
    assert len(result.ranked_nsis) == expected_size
    assert len(result.ranked_all) == 5

def test_dcsis_default_nsis():
    rng = np.random.default_rng(1)
    X = rng.normal(size=(50, 20))
    y = X[:, 0] + rng.normal(size=50)
    # floor(50 / log(50)) == 12
    assert len(dcsis(X, y).ranked_nsis) == 12

def test_dcsis_ties_keep_column_order():
    rng = np.random.default_rng(3)
    signal = rng.normal(size=40)
    X = np.column_stack([rng.normal(size=40), signal, signal, rng.normal(size=40)])
    result = dcsis(X, signal + 0.01 * rng.normal(size=40))
    assert result.ranked_all[:2].tolist() == [1, 2]

def test_dcsis_accepts_pandas_and_lists(data):
    X, y = data
    expected = dcsis(X, y).ranked_all
    assert np.array_equal(dcsis(pd.DataFrame(X), pd.Series(y)).ranked_all, expected)
    assert np.array_equal(dcsis(X.tolist(), y.tolist()).ranked_all, expected)

def test_dcsis_does_not_mutate_input(data):
    X, y = data
    X_copy, y_copy = X.copy(), y.copy()
    dcsis(X, y, batch_size=7)
    assert np.array_equal(X, X_copy)
    assert np.array_equal(y, y_copy)

def test_dcsis_batch_size_does_not_change_ranking(data):
    X, y = data
    assert np.array_equal(dcsis(X, y, batch_size=3).ranked_all, dcsis(X, y).ranked_all)

# error handling

def test_dcsis_rows_mismatch(data):
    X, y = data
    with pytest.raises(ShapeMismatchError, match="'X' has 100 rows but 'y' has 99 rows"):
        dcsis(X, y[:-1])

@pytest.mark.parametrize("missing", ["X", "y"])
def test_dcsis_missing_input(data, missing):
    X, y = data
    args = {"X": X, "y": y, missing: None}
    with pytest.raises(MissingInputError, match=f"'{missing}' is missing"):
        dcsis(**args)

@pytest.mark.parametrize("target", ["X", "y", "nsis"])
def test_dcsis_nan_input(data, target):
    X, y = data
    X, y = X.copy(), y.copy()
    nsis = 3
    if target == "X":
        X[10, 1] = np.nan
    elif target == "y":
        y[4] = np.nan
    else:
        nsis = np.nan
    with pytest.raises(InvalidValueError, match=f"'{target}' contains null values"):
        dcsis(X, y, nsis=nsis)

def test_dcsis_negative_nsis(data):
    X, y = data
    with pytest.raises(InvalidValueError, match="'nsis' must be a non-negative"):
        dcsis(X, y, nsis=-1)

def test_dcsis_errors_are_value_errors(data):
    X, y = data
    with pytest.raises(ValueError):
        dcsis(X, y[:10])

# logging

def test_dcsis_verbose_logs_progress(data, caplog):
    X, y = data
    with caplog.at_level(logging.INFO, logger="interdetect"):
        dcsis(X, y, nsis=2, verbose=True)
    assert "Screening kept 2 of 5 predictors" in caplog.text

def test_dcsis_silent_by_default(data, caplog):
    X, y = data
    with caplog.at_level(logging.WARNING):
        dcsis(X, y)
    assert caplog.text == ""
