"""
Distance-correlation sure independence screening (DC-SIS).

Ranks the main effects of a design matrix by their distance correlation
with the response. The ranking is model-free: it picks up non-linear and
non-monotonic dependencies that marginal Pearson correlation misses, and
it is the first stage of interaction selection in
:func:`interdetect.select`.

Functions
---------
dcsis(X, y, nsis=None, **kwargs)
    Screen the columns of ``X`` by distance correlation with ``y``.
"""

import logging
from numbers import Number
from typing import Optional, Sequence

import numpy as np

from interdetect._utils import (
    convert_design_matrix,
    convert_response,
    read_config,
    validate_array_not_contains_nan,
    validate_input_exists,
    validate_lengths_match,
    verbose_context,
)
from interdetect.exceptions import InvalidValueError
from interdetect.screening.distance_metrics import DistanceMetrics
from interdetect.types import ScreeningResult

logger = logging.getLogger(__name__)


def dcsis(
    X: Sequence[Sequence[Number]],
    y: Sequence[Number],
    nsis: Optional[Number] = None,
    **kwargs,
) -> ScreeningResult:
    """
    Screen main effects by distance correlation with the response.

    Parameters
    ----------
    X : Sequence[Sequence[Number]]
        Row-major design matrix of shape ``(n, p)`` without missing values.
    y : Sequence[Number]
        Response of length ``n`` (or a ``(n, d)`` matrix).
    nsis : Number, optional
        Target screening size. Defaults to ``n / log(n)``. A fractional
        value is rounded down.
    batch_size : int, optional
        Observations processed per block in the distance computation, see
        :meth:`DistanceMetrics.distance_moments`.
    verbose : bool, default=False
        If True, log screening progress at INFO level.

    Returns
    -------
    ScreeningResult
        ``ranked_all`` (all column indices by decreasing distance
        correlation, ties in input order), ``ranked_nsis`` (its first
        ``min(p, nsis)`` entries) and ``scores`` (distance correlation per
        column, in column order).

    Raises
    ------
    MissingInputError
        If ``X`` or ``y`` is None.
    ShapeMismatchError
        If ``X`` and ``y`` have different numbers of rows.
    InvalidValueError
        If ``X``, ``y`` or ``nsis`` contains NaN, or ``nsis`` is negative.

    Examples
    --------
    >>> import numpy as np
    >>> from interdetect.screening import dcsis
    >>> rng = np.random.default_rng(0)
    >>> X = rng.normal(size=(100, 5))
    >>> y = X[:, 3] ** 2 + 0.1 * rng.normal(size=100)
    >>> dcsis(X, y, nsis=2).ranked_nsis[0]
    3
    """
    params = {"batch_size": None, "verbose": False, **kwargs}
    errors = read_config("messages")["errors"]

    validate_input_exists(X, errors["missing_input_f"].format("X"))
    validate_input_exists(y, errors["missing_input_f"].format("y"))
    X = convert_design_matrix(X)
    y = convert_response(y)
    validate_lengths_match(
        X, y, errors["rows_mismatch_f"].format("X", X.shape[0], "y", y.shape[0])
    )
    n, p = X.shape
    if nsis is None:
        with np.errstate(divide="ignore"):
            nsis = n / np.log(n)
    validate_array_not_contains_nan(X, errors["array_contains_nans_f"].format("X"))
    validate_array_not_contains_nan(y, errors["array_contains_nans_f"].format("y"))
    validate_array_not_contains_nan(nsis, errors["array_contains_nans_f"].format("nsis"))
    if nsis < 0:
        raise InvalidValueError(errors["invalid_nsis_f"].format(nsis))

    with verbose_context(logger, params["verbose"]):
        logger.info("DC-SIS screening of %d predictors over %d observations.", p, n)
        moments = DistanceMetrics.distance_moments(
            X, y, batch_size=params["batch_size"]
        )
        scores = moments["dcor"].to_numpy()
        ranked_all = np.argsort(-scores, kind="stable")
        size = int(min(p, np.floor(nsis)))
        logger.info(
            "Screening kept %d of %d predictors; strongest is column %d.",
            size,
            p,
            ranked_all[0] if p else -1,
        )
    return ScreeningResult(
        ranked_all=ranked_all, ranked_nsis=ranked_all[:size], scores=scores
    )
