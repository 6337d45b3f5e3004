"""
Data validation and integrity checking utilities.

This module provides the fail-fast precondition checks used by the
screening and selection pipeline: supported flag values, presence of
required inputs, matching observation counts, absence of NaN values and
natural-number parameters. Every check raises one of the
:mod:`interdetect.exceptions` error types (all ``ValueError`` subclasses)
with the message supplied by the caller.

Methods
-------
validate_string_flag(arg, supported_values, err_msg)
    Validate that a string flag is among a set of supported values.
validate_input_exists(value, err_msg)
    Ensure that a required input is not ``None``.
validate_lengths_match(array1, array2, err_msg)
    Check that two arrays describe the same number of observations.
validate_array_not_contains_nan(array, err_msg)
    Validate that a numeric array contains no ``NaN`` values.
validate_natural_number(value, err_msg)
    Ensure that a parameter is a positive integer.

Examples
--------
>>> import interdetect._utils as utils

>>> arg = "Medium"
>>> supported = {"Strong", "Weak", "No"}
>>> utils.validate_string_flag(arg,
...                            supported_values=supported,
...                            err_msg=f"Unsupported heredity '{arg}'.")
Traceback (most recent call last):
    ...
ValueError: Unsupported heredity 'Medium'.
"""

from typing import Any, Iterable

import numpy as np

from interdetect.exceptions import (
    InvalidValueError,
    MissingInputError,
    ShapeMismatchError,
)
from interdetect.types import NaturalNumber


def validate_string_flag(
    arg: str, supported_values: Iterable[str], err_msg: str
) -> None:
    """
    Validate a string flag against a set of supported values.

    Parameters
    ----------
    arg : str
        The string flag to validate.
    supported_values : Iterable[str]
        An iterable containing all supported flag values.
    err_msg : str
        The error message used in the raised ``ValueError`` if validation fails.

    Raises
    ------
    ValueError
        If `arg` is not found in `supported_values`.
    """
    if arg not in supported_values:
        raise ValueError(err_msg)


def validate_input_exists(value: Any, err_msg: str) -> None:
    """
    Validate that a required input was supplied.

    Raises
    ------
    MissingInputError
        If ``value`` is ``None``.

    Examples
    --------
    >>> validate_input_exists([1, 2], "X is missing")
    >>> validate_input_exists(None, "X is missing")
    Traceback (most recent call last):
        ...
    interdetect.exceptions.MissingInputError: X is missing
    """
    if value is None:
        raise MissingInputError(err_msg)


def validate_lengths_match(array1: np.ndarray, array2: np.ndarray, err_msg: str) -> None:
    """
    Validate that two arrays have the same number of rows.

    Both inputs are expected to be already converted NumPy arrays, the
    comparison is made along the first axis (observations).

    Raises
    ------
    ShapeMismatchError
        If the arrays have mismatched lengths.

    Examples
    --------
    >>> validate_lengths_match(np.zeros((10, 3)), np.zeros(9), "Row counts must match")
    Traceback (most recent call last):
        ...
    interdetect.exceptions.ShapeMismatchError: Row counts must match
    """
    if np.shape(array1)[0] != np.shape(array2)[0]:
        raise ShapeMismatchError(err_msg)


def validate_array_not_contains_nan(array: Any, err_msg: str) -> None:
    """
    Validate that a numeric array (or scalar) does not contain NaN values.

    Raises
    ------
    InvalidValueError
        If at least one element is ``NaN``.

    Examples
    --------
    >>> validate_array_not_contains_nan([1.0, 2.0, 3.0], "NaN found")
    >>> validate_array_not_contains_nan([1.0, np.nan], "NaN found")
    Traceback (most recent call last):
        ...
    interdetect.exceptions.InvalidValueError: NaN found
    """
    if np.isnan(np.asarray(array, dtype=float)).any():
        raise InvalidValueError(err_msg)


def validate_natural_number(value: Any, err_msg: str) -> None:
    """
    Validate that ``value`` is a natural number (``1``, ``2.0``, ...).

    Raises
    ------
    InvalidValueError
        If ``value`` is not a positive whole number.
    """
    if isinstance(value, bool) or not isinstance(value, NaturalNumber):
        raise InvalidValueError(err_msg)
