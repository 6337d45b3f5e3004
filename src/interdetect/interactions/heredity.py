"""
Heredity-constrained interaction candidate pools.

Given the main effects kept after screening, a heredity policy decides
which two-way interactions are eligible for scoring:

- ``Strong``: every pair formed from the selected main effects;
- ``Weak``: every table row with at least one selected parent;
- ``No``: the whole interaction table.

Each policy is a pure function ``(interaction_ind, selected) -> pairs``
registered in ``HEREDITY_POOLS`` and dispatched once by
:func:`heredity_candidates`.

Functions
---------
resolve_heredity(heredity)
    Parse a heredity flag (enum member, name or alias).
select_main_effects(ranked_mains, r1, nmain_p)
    Keep the top-``r1`` ranked main effects.
heredity_candidates(interaction_ind, selected, heredity)
    Build the candidate pool for a heredity policy.
"""

from itertools import combinations
from typing import Callable, Dict, Sequence, Union

import numpy as np
import pandas as pd

from interdetect._utils import (
    convert_from_alias,
    read_config,
    validate_natural_number,
    validate_string_flag,
)
from interdetect.exceptions import InvalidValueError
from interdetect.types import Heredity


def resolve_heredity(heredity: Union[Heredity, str]) -> Heredity:
    """
    Convert a heredity flag to a :class:`Heredity` member.

    Accepts the member itself, its value (``"Strong"``, ``"Weak"``,
    ``"No"``) or any alias from the ``heredity`` alias table, case
    insensitive (``"s"``, ``"weak"``, ``"none"``, ...).

    Raises
    ------
    ValueError
        If the flag matches no heredity policy.

    Examples
    --------
    >>> resolve_heredity("strong")
    <Heredity.STRONG: 'Strong'>
    >>> resolve_heredity("none")
    <Heredity.NO: 'No'>
    """
    if isinstance(heredity, Heredity):
        return heredity
    supported = [member.value for member in Heredity]
    canonical = convert_from_alias(str(heredity), supported, path="heredity")
    validate_string_flag(
        canonical,
        supported,
        err_msg=read_config("messages")["errors"]["unsupported_method_f"].format(
            heredity, supported
        ),
    )
    return Heredity(canonical)


def select_main_effects(
    ranked_mains: Sequence[int], r1: int, nmain_p: int
) -> np.ndarray:
    """
    Keep the ``r1`` highest-ranked main effects.

    Raises
    ------
    InvalidValueError
        If ``r1`` is not a natural number or exceeds ``nmain_p``; the
        selection is never silently truncated.
    """
    errors = read_config("messages")["errors"]
    validate_natural_number(r1, errors["not_natural_number_f"].format("r1", r1))
    if r1 > nmain_p:
        raise InvalidValueError(errors["r1_exceeds_nmain_p_f"].format(r1, nmain_p))
    return np.asarray(ranked_mains, dtype=int)[: int(r1)].copy()


def _no_heredity_pool(interaction_ind: np.ndarray, selected: np.ndarray) -> np.ndarray:
    return interaction_ind.copy()


def _strong_heredity_pool(
    interaction_ind: np.ndarray, selected: np.ndarray
) -> np.ndarray:
    # the table is not consulted: pairs are rebuilt from the sorted selection
    pairs = list(combinations(sorted(int(i) for i in selected), 2))
    return np.array(pairs, dtype=int).reshape(-1, 2)


def _weak_heredity_pool(
    interaction_ind: np.ndarray, selected: np.ndarray
) -> np.ndarray:
    rank_of = {}
    for position, index in enumerate(int(i) for i in selected):
        rank_of.setdefault(index, position)
    blocks = []
    for column in (0, 1):
        rows = interaction_ind[np.isin(interaction_ind[:, column], selected)]
        order = np.argsort(
            np.array([rank_of[i] for i in rows[:, column].tolist()], dtype=int),
            kind="stable",
        )
        blocks.append(rows[order])
    pool = pd.DataFrame(np.concatenate(blocks)).drop_duplicates(keep="first")
    return pool.to_numpy(dtype=int).reshape(-1, 2)


HEREDITY_POOLS: Dict[Heredity, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    Heredity.STRONG: _strong_heredity_pool,
    Heredity.WEAK: _weak_heredity_pool,
    Heredity.NO: _no_heredity_pool,
}


def heredity_candidates(
    interaction_ind: np.ndarray,
    selected: Sequence[int],
    heredity: Union[Heredity, str] = Heredity.STRONG,
) -> np.ndarray:
    """
    Build the pool of interactions eligible for scoring.

    Parameters
    ----------
    interaction_ind : numpy.ndarray
        Full ``(k, 2)`` interaction index table.
    selected : Sequence[int]
        Selected main effects, in ranking order.
    heredity : Heredity or str, default=Heredity.STRONG
        Heredity policy.

    Returns
    -------
    numpy.ndarray
        ``(m, 2)`` integer array of candidate pairs; ``(0, 2)`` when no
        interaction qualifies (e.g. fewer than two selected main effects
        under Strong heredity).

    Notes
    -----
    - ``No``: the full table, unfiltered.
    - ``Strong``: all pairs of the selected main effects, built from the
      sorted selection, so both parents are always selected.
    - ``Weak``: table rows whose first index is selected, ordered by that
      index's rank in ``selected``, then rows whose second index is
      selected, ordered the same way; duplicates keep their first
      occurrence. Under ``r1 >= 2`` this pool contains the Strong pool
      whenever the table is complete.

    Examples
    --------
    >>> table = interaction_index_table(4)
    >>> heredity_candidates(table, [2, 0], "Weak")
    array([[2, 3],
           [0, 1],
           [0, 2],
           [0, 3],
           [1, 2]])
    """
    table = np.asarray(interaction_ind, dtype=int).reshape(-1, 2)
    chosen = np.asarray(selected, dtype=int)
    return HEREDITY_POOLS[resolve_heredity(heredity)](table, chosen)
