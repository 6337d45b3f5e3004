"""
Interaction index table utilities.

The interaction index table lists every unordered pair ``(i, j)``,
``i < j``, of main-effect indices in combinatorial order:
``(0, 1), (0, 2), ..., (0, p-1), (1, 2), ...``. A pair's row position
``k`` in that table defines its flat variable index ``nmain_p + k``, so
main effects occupy ``0 .. p-1`` and interactions follow them.

Functions
---------
interaction_index_table(nmain_p)
    Build the canonical table for ``nmain_p`` main effects.
validate_interaction_table(interaction_ind, nmain_p)
    Check a caller-supplied table and return it as an integer array.
locate_interactions(pairs, interaction_ind, nmain_p)
    Translate main-effect pairs to flat interaction variable indices.
"""

from itertools import combinations
from typing import Sequence

import numpy as np

from interdetect._utils import convert_index_table, read_config
from interdetect.exceptions import ConsistencyError, MissingArtifactError


def interaction_index_table(nmain_p: int) -> np.ndarray:
    """
    Build the table of all two-way interactions of ``nmain_p`` main effects.

    Parameters
    ----------
    nmain_p : int
        Number of main effects.

    Returns
    -------
    numpy.ndarray
        Integer array of shape ``(nmain_p * (nmain_p - 1) / 2, 2)``; empty
        ``(0, 2)`` when fewer than two main effects exist.

    Examples
    --------
    >>> interaction_index_table(4)
    array([[0, 1],
           [0, 2],
           [0, 3],
           [1, 2],
           [1, 3],
           [2, 3]])
    """
    pairs = list(combinations(range(int(nmain_p)), 2))
    return np.array(pairs, dtype=int).reshape(-1, 2)


def validate_interaction_table(
    interaction_ind: Sequence[Sequence[int]], nmain_p: int
) -> np.ndarray:
    """
    Validate a caller-supplied interaction index table.

    Parameters
    ----------
    interaction_ind : Sequence[Sequence[int]] or None
        Two-column table of main-effect index pairs.
    nmain_p : int
        Number of main effects the table refers to.

    Returns
    -------
    numpy.ndarray
        The table as a ``(k, 2)`` integer array (a copy of the input).

    Raises
    ------
    MissingArtifactError
        If ``interaction_ind`` is None.
    ConsistencyError
        If the table is not two-column integer data, or refers to an index
        outside ``[0, nmain_p)``.
    """
    errors = read_config("messages")["errors"]
    if interaction_ind is None:
        raise MissingArtifactError(errors["missing_interaction_table"])
    table = convert_index_table(interaction_ind)
    if table.size and (table.min() < 0 or table.max() >= nmain_p):
        raise ConsistencyError(
            errors["interaction_table_out_of_range_f"].format(nmain_p)
        )
    return table


def locate_interactions(
    pairs: np.ndarray, interaction_ind: np.ndarray, nmain_p: int
) -> np.ndarray:
    """
    Map main-effect pairs to their flat interaction variable indices.

    Each ordered pair is looked up in ``interaction_ind``; a pair found at
    row ``k`` (first occurrence) maps to ``nmain_p + k``.

    Parameters
    ----------
    pairs : numpy.ndarray
        ``(m, 2)`` array of candidate pairs.
    interaction_ind : numpy.ndarray
        The full interaction index table.
    nmain_p : int
        Number of main effects, used as offset.

    Returns
    -------
    numpy.ndarray
        Integer array of length ``m``, in the order of ``pairs``.

    Raises
    ------
    ConsistencyError
        If a pair does not occur in the table. Pairs are matched as
        ordered tuples, so ``(2, 1)`` does not match a ``(1, 2)`` row.

    Examples
    --------
    >>> table = interaction_index_table(4)
    >>> locate_interactions(np.array([[1, 2], [0, 1]]), table, 4)
    array([7, 4])
    """
    positions = {}
    for row, (first, second) in enumerate(np.asarray(interaction_ind).tolist()):
        positions.setdefault((first, second), row)
    located = []
    for first, second in np.asarray(pairs).reshape(-1, 2).tolist():
        if (first, second) not in positions:
            raise ConsistencyError(
                read_config("messages")["errors"]["pair_not_in_table_f"].format(
                    (first, second)
                )
            )
        located.append(nmain_p + positions[(first, second)])
    return np.array(located, dtype=int)
