"""
Interaction selection under heredity constraints.

This module chains the stages of interaction selection:

1. rank the main effects of ``X`` by distance correlation with ``y``
   (:func:`interdetect.screening.dcsis`);
2. keep the top ``r1`` main effects;
3. build the heredity-constrained pool of candidate interactions;
4. score each candidate, together with the kept main effects, with a
   caller-supplied criterion and rank candidates by score.

Functions
---------
select(X, y, scorer, heredity="Strong", ...)
    Run the pipeline and return the ranking with the selected main effects.
detect(X, y, scorer, heredity="Strong", ...)
    Run the pipeline and plot the best-ranked interactions.
"""

import logging
from numbers import Number
from typing import Optional, Sequence, Union

from interdetect._utils import (
    convert_design_matrix,
    convert_response,
    read_config,
    validate_input_exists,
    validate_natural_number,
    verbose_context,
)
from interdetect.exceptions import MissingArtifactError, ShapeMismatchError
from interdetect.interactions import (
    heredity_candidates,
    locate_interactions,
    rank_interactions,
    resolve_heredity,
    select_main_effects,
    validate_interaction_table,
)
from interdetect.screening import dcsis
from interdetect.types import (
    Heredity,
    InteractionScorer,
    SelectionResult,
    VisualizationResult,
)
from interdetect.visualizations import interaction_scoreplot

logger = logging.getLogger(__name__)


def select(
    X: Sequence[Sequence[Number]],
    y: Sequence[Number],
    scorer: InteractionScorer,
    heredity: Union[Heredity, str] = Heredity.STRONG,
    nmain_p: Optional[int] = None,
    sigma: Optional[Number] = None,
    r1: Optional[int] = None,
    r2: Optional[int] = None,
    interaction_ind: Optional[Sequence[Sequence[int]]] = None,
    pi1: Number = 0.32,
    pi2: Number = 0.32,
    pi3: Number = 0.32,
    lambda_: Number = 10,
    q: int = 40,
    **kwargs,
) -> SelectionResult:
    """
    Rank candidate two-way interactions for a model with ``r1`` main effects.

    Parameters
    ----------
    X : Sequence[Sequence[Number]]
        Row-major design matrix of shape ``(n, nmain_p)`` holding main
        effects only; interactions are never pre-included.
    y : Sequence[Number]
        Response vector of length ``n``.
    scorer : InteractionScorer
        Model-scoring criterion, lower is better (see
        :class:`interdetect.types.InteractionScorer`).
    heredity : {'Strong', 'Weak', 'No'} or Heredity, default='Strong'
        Heredity policy restricting the candidate interactions.
    nmain_p : int, optional
        Number of main effects. Defaults to the number of columns of ``X``.
    sigma : Number, optional
        Noise standard deviation, forwarded to the scorer. None (default)
        lets the scorer estimate it.
    r1 : int
        Number of main effects kept from the screening ranking.
    r2 : int
        Maximum number of interaction effects of the final model.
    interaction_ind : Sequence[Sequence[int]]
        Table of all two-way interactions, in combinatorial order, as
        built by :func:`interdetect.interaction_index_table`. Required.
    pi1, pi2, pi3 : Number, default=0.32
        Prior parameters forwarded to the scorer.
    lambda_ : Number, default=10
        Penalty parameter forwarded to the scorer.
    q : int, default=40
        Population size of the downstream model search. Validated but not
        used by the ranking.
    n_jobs : int, default=1
        Threads used to score candidates, see
        :func:`interdetect.interactions.rank_interactions`.
    batch_size : int, optional
        Block size of the distance computation in screening.
    verbose : bool, default=False
        If True, log pipeline progress at INFO level.

    Returns
    -------
    SelectionResult
        ``ranking`` (``interaction``/``score`` frame, ascending score,
        undefined scores last), ``selected_mains`` (top-``r1`` main
        effects), ``main_pool`` (all main effects by decreasing distance
        correlation) and ``max_model_size`` (``r1 + r2``).

    Raises
    ------
    MissingArtifactError
        If ``interaction_ind`` is None; raised before any computation.
    MissingInputError
        If ``X`` or ``y`` is None.
    ShapeMismatchError
        If ``X`` and ``y`` disagree on ``n``, or ``nmain_p`` differs from
        the number of columns of ``X``.
    InvalidValueError
        If the data contains NaN, ``r1``/``r2``/``q`` are not natural
        numbers, or ``r1 > nmain_p``.
    ConsistencyError
        If ``interaction_ind`` is malformed or lacks a candidate pair.

    Examples
    --------
    >>> import numpy as np
    >>> from interdetect import interaction_index_table, select
    >>> rng = np.random.default_rng(0)
    >>> X = rng.normal(1, 0.1, size=(50, 4))
    >>> y = 1 + X[:, 0] + X[:, 1] + X[:, 0] * X[:, 1] + rng.normal(0, 0.01, 50)
    >>> result = select(X, y, my_scorer, nmain_p=4, r1=3, r2=3,
    ...                 interaction_ind=interaction_index_table(4), q=5)
    >>> int(result.ranking["interaction"].iloc[0])  # pair (0, 1)
    4
    """
    params = {"n_jobs": 1, "batch_size": None, "verbose": False, **kwargs}
    errors = read_config("messages")["errors"]

    if interaction_ind is None:
        raise MissingArtifactError(errors["missing_interaction_table"])
    validate_input_exists(X, errors["missing_input_f"].format("X"))
    validate_input_exists(y, errors["missing_input_f"].format("y"))
    X = convert_design_matrix(X)
    y = convert_response(y)
    if nmain_p is None:
        nmain_p = X.shape[1]
    if nmain_p != X.shape[1]:
        raise ShapeMismatchError(
            errors["nmain_p_mismatch_f"].format(nmain_p, X.shape[1])
        )
    for name, value in (("r1", r1), ("r2", r2), ("q", q)):
        validate_natural_number(
            value, errors["not_natural_number_f"].format(name, value)
        )
    table = validate_interaction_table(interaction_ind, nmain_p)
    heredity = resolve_heredity(heredity)

    with verbose_context(logger, params["verbose"]):
        logger.info(
            "Selecting interactions under %s heredity (r1=%s, r2=%s).",
            heredity.value,
            r1,
            r2,
        )
        screening = dcsis(
            X, y, batch_size=params["batch_size"], verbose=params["verbose"]
        )
        selected = select_main_effects(screening.ranked_all, r1, nmain_p)
        pairs = heredity_candidates(table, selected, heredity)
        candidates = locate_interactions(pairs, table, nmain_p)
        logger.info(
            "Main effects %s selected; %d candidate interactions.",
            selected.tolist(),
            len(candidates),
        )
        if len(candidates) == 0:
            logger.warning(read_config("messages")["warns"]["no_candidates"])
        ranking = rank_interactions(
            X,
            y,
            scorer,
            heredity,
            nmain_p,
            sigma,
            selected,
            candidates,
            table,
            pi1=pi1,
            pi2=pi2,
            pi3=pi3,
            lambda_=lambda_,
            n_jobs=params["n_jobs"],
            verbose=params["verbose"],
        )
    return SelectionResult(
        ranking=ranking,
        selected_mains=selected,
        main_pool=screening.ranked_all,
        max_model_size=int(r1 + r2),
    )


def detect(
    X: Sequence[Sequence[Number]],
    y: Sequence[Number],
    scorer: InteractionScorer,
    heredity: Union[Heredity, str] = Heredity.STRONG,
    nmain_p: Optional[int] = None,
    sigma: Optional[Number] = None,
    r1: Optional[int] = None,
    r2: Optional[int] = None,
    interaction_ind: Optional[Sequence[Sequence[int]]] = None,
    pi1: Number = 0.32,
    pi2: Number = 0.32,
    pi3: Number = 0.32,
    lambda_: Number = 10,
    q: int = 40,
    **kwargs,
) -> VisualizationResult:
    """
    Plot the candidate interactions ranked by :func:`select`.

    Takes the same arguments as :func:`select`; keyword arguments that
    :func:`select` does not consume (``n_jobs``, ``batch_size``,
    ``verbose``) are passed to
    :func:`interdetect.visualizations.interaction_scoreplot` (e.g.
    ``top``, ``engine``, ``title``, ``directory``). At most the 50
    best-ranked interactions are shown by default.

    Returns
    -------
    VisualizationResult
        The rendered interaction score plot.

    Raises
    ------
    Same as :func:`select`.
    """
    pipeline_keys = {"n_jobs", "batch_size", "verbose"}
    pipeline_kws = {k: v for k, v in kwargs.items() if k in pipeline_keys}
    plot_kws = {k: v for k, v in kwargs.items() if k not in pipeline_keys - {"verbose"}}
    result = select(
        X,
        y,
        scorer,
        heredity=heredity,
        nmain_p=nmain_p,
        sigma=sigma,
        r1=r1,
        r2=r2,
        interaction_ind=interaction_ind,
        pi1=pi1,
        pi2=pi2,
        pi3=pi3,
        lambda_=lambda_,
        q=q,
        **pipeline_kws,
    )
    return interaction_scoreplot(result.ranking, **plot_kws)
