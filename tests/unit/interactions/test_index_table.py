from math import comb

import pytest
import numpy as np

from interdetect.exceptions import ConsistencyError, MissingArtifactError
from interdetect.interactions import (
    interaction_index_table, locate_interactions, validate_interaction_table)


# tests for interaction_index_table

def test_interaction_index_table_combinatorial_order():
    assert interaction_index_table(4).tolist() == [
        [0, 1], [0, 2], [0, 3], [1, 2], [1, 3], [2, 3]]

@pytest.mark.parametrize("nmain_p", [2, 5, 10, 31])
def test_interaction_index_table_size(nmain_p):
    table = interaction_index_table(nmain_p)
    assert table.shape == (comb(nmain_p, 2), 2)
    assert (table[:, 0] < table[:, 1]).all()
    assert len({tuple(row) for row in table.tolist()}) == len(table)

@pytest.mark.parametrize("nmain_p", [0, 1])
def test_interaction_index_table_too_few_main_effects(nmain_p):
    assert interaction_index_table(nmain_p).shape == (0, 2)

# tests for validate_interaction_table

def test_validate_interaction_table_missing():
    with pytest.raises(MissingArtifactError, match="interaction_index_table"):
        validate_interaction_table(None, 4)

def test_validate_interaction_table_returns_integer_copy():
    data = [[0.0, 1.0], [0.0, 2.0], [1.0, 2.0]]
    table = validate_interaction_table(data, 3)
    assert isinstance(table, np.ndarray)
    assert table.dtype.kind == "i"
    assert table.tolist() == [[0, 1], [0, 2], [1, 2]]

    source = interaction_index_table(3)
    validate_interaction_table(source, 3)[0, 0] = 99
    assert source[0, 0] == 0

@pytest.mark.parametrize("data", [[[0, 4]], [[-1, 2]]])
def test_validate_interaction_table_out_of_range(data):
    with pytest.raises(ConsistencyError, match=r"outside \[0, 4\)"):
        validate_interaction_table(data, 4)

def test_validate_interaction_table_malformed():
    with pytest.raises(ConsistencyError, match="two-column"):
        validate_interaction_table([[0, 1, 2]], 4)

def test_validate_interaction_table_empty():
    assert validate_interaction_table([], 1).shape == (0, 2)

# tests for locate_interactions

def test_locate_interactions_example_based():
    table = interaction_index_table(4)
    result = locate_interactions(np.array([[1, 2], [0, 1], [2, 3]]), table, 4)
    assert result.tolist() == [7, 4, 9]

def test_locate_interactions_keeps_pair_order():
    table = interaction_index_table(5)
    pairs = table[::-1]
    result = locate_interactions(pairs, table, 5)
    assert result.tolist() == list(range(5 + len(table) - 1, 4, -1))

def test_locate_interactions_first_occurrence():
    table = np.array([[0, 1], [1, 2], [0, 1]])
    assert locate_interactions(np.array([[0, 1]]), table, 3).tolist() == [3]

def test_locate_interactions_reversed_pair_is_missing():
    table = interaction_index_table(4)
    with pytest.raises(ConsistencyError, match=r"\(2, 1\) was not found"):
        locate_interactions(np.array([[2, 1]]), table, 4)

def test_locate_interactions_empty_pairs():
    table = interaction_index_table(4)
    result = locate_interactions(np.empty((0, 2), dtype=int), table, 4)
    assert result.shape == (0,)
    assert result.dtype.kind == "i"
