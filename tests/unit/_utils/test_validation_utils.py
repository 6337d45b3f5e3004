import pytest
import numpy as np

from interdetect._utils import (
    validate_string_flag, validate_input_exists, validate_lengths_match,
    validate_array_not_contains_nan, validate_natural_number)
from interdetect.exceptions import (
    InvalidValueError, MissingInputError, ShapeMismatchError)


# tests for validate_string_flag

def test_validate_string_flag_positive_case():
    validate_string_flag(arg="Weak", supported_values=["Strong", "Weak", "No"],
                         err_msg="my_error_message")

def test_validate_string_flag_negative_case():
    with pytest.raises(ValueError, match="my_error_message"):
        validate_string_flag(arg="Medium", supported_values=["Strong", "Weak", "No"],
                             err_msg="my_error_message")

# tests for validate_input_exists

@pytest.mark.parametrize("value", [0, [], np.zeros((2, 2)), ""])
def test_validate_input_exists_positive_case(value):
    validate_input_exists(value, err_msg="my_error_message")

def test_validate_input_exists_negative_case():
    with pytest.raises(MissingInputError, match="my_error_message"):
        validate_input_exists(None, err_msg="my_error_message")

# tests for validate_lengths_match

def test_validate_lengths_match_positive_case():
    validate_lengths_match(array1=np.zeros((3, 5)), array2=np.zeros(3),
                           err_msg="my_error_message")

def test_validate_lengths_match_negative_case():
    with pytest.raises(ShapeMismatchError, match="my_error_message"):
        validate_lengths_match(array1=np.zeros((3, 5)), array2=np.zeros(4),
                               err_msg="my_error_message")

def test_validate_lengths_match_error_is_value_error():
    with pytest.raises(ValueError):
        validate_lengths_match([1, 2, 3], [4, 5], err_msg="my_error_message")

# tests for validate_array_not_contains_nan

def test_validate_array_not_contains_nan_positive_case():
    validate_array_not_contains_nan([[1, 2], [3, 4]],
                                    err_msg="my_error_message")

@pytest.mark.parametrize("array", [
    [1.0, np.nan],
    [[1.0, 2.0], [np.nan, 4.0]],
    np.nan,
])
def test_validate_array_not_contains_nan_negative_case(array):
    with pytest.raises(InvalidValueError, match="my_error_message"):
        validate_array_not_contains_nan(array, err_msg="my_error_message")

# tests for validate_natural_number

@pytest.mark.parametrize("value", [1, 3, 40, 2.0, np.int64(5)])
def test_validate_natural_number_positive_case(value):
    validate_natural_number(value, err_msg="my_error_message")

@pytest.mark.parametrize("value", [0, -1, 2.5, "3", None, True, np.nan])
def test_validate_natural_number_negative_case(value):
    with pytest.raises(InvalidValueError, match="my_error_message"):
        validate_natural_number(value, err_msg="my_error_message")
