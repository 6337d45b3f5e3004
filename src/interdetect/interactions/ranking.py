"""
Ranking of candidate interactions by an external scoring criterion.

Every candidate interaction is scored together with the fixed set of
selected main effects, and candidates are ordered by that score, lower
first. The criterion is injected by the caller (see
:class:`interdetect.types.InteractionScorer`), so alternative criteria can
be used without touching screening or candidate generation.
"""

import logging
from numbers import Number
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd
from joblib import Parallel, delayed

from interdetect._utils import verbose_context
from interdetect.types import Heredity, InteractionScorer

logger = logging.getLogger(__name__)

RANKING_COLUMNS = ["interaction", "score"]


def rank_interactions(
    X: np.ndarray,
    y: np.ndarray,
    scorer: InteractionScorer,
    heredity: Union[Heredity, str],
    nmain_p: int,
    sigma: Optional[Number],
    selected: Sequence[int],
    candidates: Sequence[int],
    interaction_ind: np.ndarray,
    pi1: Number = 0.32,
    pi2: Number = 0.32,
    pi3: Number = 0.32,
    lambda_: Number = 10,
    **kwargs,
) -> pd.DataFrame:
    """
    Score and rank candidate interactions.

    Parameters
    ----------
    X, y : numpy.ndarray
        Design matrix and response, forwarded to the scorer unchanged.
    scorer : InteractionScorer
        Criterion called once per candidate with
        ``varind = [*selected, candidate]``. Must be side-effect free when
        ``n_jobs != 1``.
    heredity : Heredity or str
        Heredity policy, forwarded to the scorer as its string value.
    nmain_p : int
        Number of main effects.
    sigma : Number or None
        Noise standard deviation; None lets the scorer estimate it.
    selected : Sequence[int]
        Selected main effects, held fixed in every scored model.
    candidates : Sequence[int]
        Flat interaction variable indices (``nmain_p`` + table position).
    interaction_ind : numpy.ndarray
        Full interaction index table, forwarded to the scorer.
    pi1, pi2, pi3 : Number, default=0.32
        Prior parameters of the scoring criterion.
    lambda_ : Number, default=10
        Penalty parameter of the scoring criterion.
    n_jobs : int, default=1
        Number of threads scoring candidates concurrently. ``1`` scores
        sequentially; ``-1`` uses all cores. The ranking does not depend
        on this value.
    verbose : bool, default=False
        If True, log progress at INFO level.

    Returns
    -------
    pandas.DataFrame
        Columns ``interaction`` (int) and ``score`` (float), sorted by
        ascending score; candidates whose score is undefined (NaN or None)
        are kept and placed last, ties keep candidate order. An empty
        candidate list gives an empty frame with the same columns.
    """
    params = {"n_jobs": 1, "verbose": False, **kwargs}
    heredity_value = heredity.value if isinstance(heredity, Heredity) else str(heredity)
    fixed_mains = [int(i) for i in selected]
    candidates = [int(c) for c in candidates]

    def score_candidate(candidate: int) -> float:
        score = scorer(
            X,
            y,
            heredity=heredity_value,
            nmain_p=nmain_p,
            sigma=sigma,
            extract="Yes",
            varind=[*fixed_mains, candidate],
            interaction_ind=interaction_ind,
            pi1=pi1,
            pi2=pi2,
            pi3=pi3,
            lambda_=lambda_,
        )
        return np.nan if score is None else float(score)

    with verbose_context(logger, params["verbose"]):
        logger.info(
            "Scoring %d candidate interactions with %d fixed main effects.",
            len(candidates),
            len(fixed_mains),
        )
        if params["n_jobs"] == 1 or len(candidates) <= 1:
            scores = [score_candidate(c) for c in candidates]
        else:
            scores = Parallel(n_jobs=params["n_jobs"], prefer="threads")(
                delayed(score_candidate)(c) for c in candidates
            )
        ranking = pd.DataFrame(
            {
                "interaction": np.array(candidates, dtype=int),
                "score": np.array(scores, dtype=float),
            },
            columns=RANKING_COLUMNS,
        )
        ranking = ranking.sort_values(
            "score", kind="stable", na_position="last"
        ).reset_index(drop=True)
        undefined = int(ranking["score"].isna().sum())
        if undefined:
            logger.info("%d candidates have an undefined score.", undefined)
    return ranking
