"""
Conversion utilities for data transformation and standardization.

This module provides low-level conversion functions that bring the
heterogeneous inputs accepted by the public API (lists, NumPy arrays,
pandas objects) into the NumPy representations used by the numerical
core, and resolves string aliases into canonical flag values.

Methods
-------
convert_design_matrix(data, data_name)
    Convert an input design matrix to a 2D float NumPy array (rows are
    observations).
convert_response(data, data_name)
    Convert a response vector (or matrix) to a float NumPy array.
convert_index_table(data, data_name)
    Convert a table of main-effect index pairs to a 2D integer NumPy array.
convert_from_alias(arg, default_values, path)
    Convert a string alias into its canonical (default) configuration value.

Notes
-----
- Unlike column-based converters, matrices here are read **row-major**:
  ``[[x11, x12], [x21, x22]]`` is two observations of two predictors.
- Functions return copies of data rather than views of user input, so the
  caller's objects are never mutated downstream.

Examples
--------
>>> from interdetect._utils import convert_design_matrix
>>> convert_design_matrix([[1, 2], [3, 4], [5, 6]]).shape
(3, 2)
"""

from typing import Any, Iterable, Sequence

import numpy as np
import pandas as pd

from interdetect.exceptions import ConsistencyError, InvalidValueError
from .readers import read_config


def _to_float_array(data: Any, data_name: str) -> np.ndarray:
    if isinstance(data, (pd.DataFrame, pd.Series)):
        data = data.to_numpy()
    try:
        return np.array(data, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidValueError(
            read_config("messages")["errors"]["not_numeric_f"].format(data_name)
        ) from e


def convert_design_matrix(data: Sequence[Sequence], data_name: str = "X") -> np.ndarray:
    """
    Convert an input design matrix to a 2D float NumPy array.

    Parameters
    ----------
    data : Sequence[Sequence] or numpy.ndarray or pandas.DataFrame
        Row-major matrix of shape ``(n, p)``. A one-dimensional input is
        interpreted as a single predictor column of ``n`` observations.
    data_name : str, default='X'
        Name of the input, used in error messages.

    Returns
    -------
    numpy.ndarray
        Float array of shape ``(n, p)``. Missing values (``None``,
        ``pd.NA``) become ``NaN`` and are left to the validators.

    Raises
    ------
    InvalidValueError
        If the input cannot be interpreted as a numeric matrix.
    """
    array = _to_float_array(data, data_name)
    if array.ndim == 1:
        array = array.reshape(-1, 1)
    if array.ndim != 2:
        raise InvalidValueError(
            read_config("messages")["errors"]["not_numeric_f"].format(data_name)
        )
    return array


def convert_response(data: Sequence, data_name: str = "y") -> np.ndarray:
    """
    Convert a response vector to a float NumPy array.

    One-dimensional inputs keep their shape ``(n,)``; a two-dimensional
    input of shape ``(n, d)`` is kept as is and treated as a multivariate
    response by the distance computations.

    Raises
    ------
    InvalidValueError
        If the input is not numeric or has more than two dimensions.
    """
    array = _to_float_array(data, data_name)
    if array.ndim == 0 or array.ndim > 2:
        raise InvalidValueError(
            read_config("messages")["errors"]["not_numeric_f"].format(data_name)
        )
    return array


def convert_index_table(data: Sequence[Sequence[int]], data_name: str = "interaction_ind"):
    """
    Convert a table of main-effect index pairs to a 2D integer array.

    Parameters
    ----------
    data : Sequence[Sequence[int]] or numpy.ndarray or pandas.DataFrame
        Row-major table, one ``(i, j)`` pair per row. An empty input yields
        an empty ``(0, 2)`` table.
    data_name : str, default='interaction_ind'
        Name of the input, used in error messages.

    Returns
    -------
    numpy.ndarray
        Integer array of shape ``(k, 2)``.

    Raises
    ------
    ConsistencyError
        If the table does not have exactly two columns or holds non-integer
        values.
    """
    if isinstance(data, pd.DataFrame):
        data = data.to_numpy()
    array = np.asarray(data)
    if array.size == 0:
        return np.empty((0, 2), dtype=int)
    errors = read_config("messages")["errors"]
    if array.ndim != 2 or array.shape[1] != 2:
        raise ConsistencyError(errors["malformed_interaction_table_f"].format(array.shape))
    try:
        as_float = array.astype(float)
    except (TypeError, ValueError) as e:
        raise ConsistencyError(
            errors["malformed_interaction_table_f"].format(array.shape)
        ) from e
    if np.isnan(as_float).any() or not np.all(as_float == np.round(as_float)):
        raise ConsistencyError(errors["malformed_interaction_table_f"].format(array.shape))
    return as_float.astype(int)


def convert_from_alias(arg: str, default_values: Iterable = None, path: str = "heredity"):
    """
    Convert a string alias into its canonical (default) configuration value.

    The function maps short or alternative forms of names to the
    corresponding default value, using the alias configuration file.

    Parameters
    ----------
    arg : str
        Input string to convert. The function is case-insensitive.
    default_values : Iterable, optional
        Subset of default values to restrict the search domain.
        If ``None`` (default), lookup is performed across the entire
        alias set for the specified path.
    path : str, default='heredity'
        Section name in the alias configuration, e.g. ``"heredity"`` or
        ``"engine"``.

    Returns
    -------
    str
        Canonical name corresponding to the alias.
        If no matching alias is found, returns the input argument unchanged.

    Raises
    ------
    KeyError
        If the specified alias section ``path`` does not exist in the configuration.

    Examples
    --------
    >>> convert_from_alias("s")
    'Strong'
    >>> convert_from_alias("px", path="engine")
    'plotly'
    """
    alias_dict = read_config("aliases")

    if path not in alias_dict:
        raise KeyError(f"Aliases path '{path}' not found in configuration.")

    arg_lower = str(arg).lower()
    if default_values is None:
        for default_value, aliases in alias_dict[path].items():
            if arg_lower in aliases:
                return default_value
    else:
        for default_value in default_values:
            if default_value in alias_dict[path]:
                if arg_lower in alias_dict[path][default_value]:
                    return default_value
    return arg
