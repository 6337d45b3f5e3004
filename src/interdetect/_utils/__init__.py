"""
Internal utilities for the interdetect package.

This module provides low-level utilities for data conversion, validation,
and common package operations. These are internal APIs and may change
without notice.

Methods
-------
convert_design_matrix(data, data_name)
    Convert an input design matrix to a 2D float NumPy array.
convert_response(data, data_name)
    Convert a response vector (or matrix) to a float NumPy array.
convert_index_table(data, data_name)
    Convert a table of main-effect index pairs to a 2D integer array.
convert_from_alias(arg, default_values, path)
    Convert a string alias into its canonical (default) configuration value.
validate_array_not_contains_nan(array, err_msg)
    Validate that a numeric array does not contain NaN values.
validate_input_exists(value, err_msg)
    Validate that a required input is not ``None``.
validate_lengths_match(array1, array2, err_msg)
    Validate that two arrays have matching numbers of rows.
validate_natural_number(value, err_msg)
    Validate that a parameter is a positive integer.
validate_string_flag(arg, supported_values, err_msg)
    Validate a string flag against a set of supported values.
temp_log_level(logger, level)
    Temporarily sets the logging level of a logger within a context.
verbose_context(logger, verbose)
    INFO-level context for ``verbose=True`` calls.
read_config(name)
    Read and cache JSON configuration files.

Notes
-----
- These utilities are for internal package use only
- Use public APIs from main modules for stable functionality
"""

from .conversion import (
    convert_design_matrix,
    convert_from_alias,
    convert_index_table,
    convert_response,
)
from .helpers import temp_log_level, verbose_context
from .readers import read_config
from .validation import (
    validate_array_not_contains_nan,
    validate_input_exists,
    validate_lengths_match,
    validate_natural_number,
    validate_string_flag,
)

__all__ = [
    "convert_design_matrix",
    "convert_response",
    "convert_index_table",
    "convert_from_alias",
    "validate_array_not_contains_nan",
    "validate_input_exists",
    "validate_lengths_match",
    "validate_natural_number",
    "validate_string_flag",
    "temp_log_level",
    "verbose_context",
    "read_config",
]
