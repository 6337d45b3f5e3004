"""
Distance covariance and distance correlation measures.

This module computes the empirical distance covariance, distance variances
and distance correlation between every column of a design matrix and a
(possibly multivariate) response. The measures are implemented as static
methods of the ``DistanceMetrics`` class and are the building block of the
DC-SIS screener in :mod:`interdetect.screening.dcsis`.

Main class
----------
DistanceMetrics
    A utility class containing static methods for computing distance-based
    dependence measures.

Notes
-----
For a column :math:`x` and response :math:`y` with pairwise distances
:math:`a_{ik} = |x_i - x_k|` and :math:`b_{ik} = \\lVert y_i - y_k \\rVert`,
the squared distance covariance is estimated as

.. math::

    \\mathrm{dCov}^2 = \\overline{a b} + \\bar{a}\\,\\bar{b}
    - 2\\,\\frac{1}{n}\\sum_i \\bar{a}_{i\\cdot}\\,\\bar{b}_{i\\cdot}

where bars denote means over the double index :math:`(i, k)` and
:math:`\\bar{a}_{i\\cdot}` the mean over :math:`k` for a fixed :math:`i`.
Distance variances use the same formula with :math:`b` replaced by
:math:`a` (resp. :math:`a` by :math:`b`), and

.. math::

    \\mathrm{dCor} = \\frac{\\mathrm{dCov}}
    {\\sqrt{\\mathrm{dVar}_x\\,\\mathrm{dVar}_y}}
"""

from numbers import Number
from typing import Optional, Sequence

import numpy as np
import pandas as pd
from scipy.spatial.distance import cdist

from interdetect._utils import (
    convert_design_matrix,
    convert_response,
    read_config,
    validate_array_not_contains_nan,
    validate_lengths_match,
)

# Upper bound on the number of floats held by one block of pairwise differences.
DEFAULT_BLOCK_ELEMENTS = 2**22


class DistanceMetrics:
    """
    Collection of distance-based dependence measures.

    Methods
    -------
    distance_moments(x, y, batch_size=None)
        Per-column distance covariance, distance variances and distance
        correlation between the columns of ``x`` and the response ``y``.
    distance_correlation(x, y)
        Distance correlation between a single variable and a response.

    Examples
    --------
    >>> from interdetect.screening import DistanceMetrics as dm
    >>> x = [1, 2, 3, 4, 5]
    >>> y = [2, 4, 6, 8, 10]
    >>> round(dm.distance_correlation(x, y), 6)
    1.0
    """

    _errors = read_config("messages")["errors"]

    @staticmethod
    def _row_moments(x: np.ndarray, y: np.ndarray, batch_size: int):
        """
        Per-observation means of the pairwise distance terms.

        Rows are processed in consecutive blocks of ``batch_size``
        observations, in increasing row order.
        """
        n, p = x.shape
        response = y.reshape(n, -1)
        sxy1 = np.empty((n, p))
        sxy2 = np.empty((n, p))
        sxx1 = np.empty((n, p))
        sxy3 = np.empty(n)
        syy1 = np.empty(n)
        for start in range(0, n, batch_size):
            stop = min(start + batch_size, n)
            # (block, n, p): |x[k, j] - x[i, j]| for every i in the block
            x_dist = np.abs(x[np.newaxis, :, :] - x[start:stop, np.newaxis, :])
            y_dist = cdist(response[start:stop], response, metric="euclidean")
            sxy1[start:stop] = np.einsum("ikj,ik->ij", x_dist, y_dist) / n
            sxy2[start:stop] = x_dist.mean(axis=1)
            sxx1[start:stop] = np.einsum("ikj,ikj->ij", x_dist, x_dist) / n
            sxy3[start:stop] = y_dist.mean(axis=1)
            syy1[start:stop] = (y_dist**2).mean(axis=1)
        return sxy1, sxy2, sxy3, sxx1, syy1

    @staticmethod
    def distance_moments(
        x: Sequence[Sequence[Number]],
        y: Sequence[Number],
        batch_size: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Computes distance covariance, distance variances and distance
        correlation between each column of ``x`` and the response ``y``.

        Parameters
        ----------
        x : Sequence[Sequence[Number]]
            Row-major matrix of shape ``(n, p)``; every column is screened
            separately.
        y : Sequence[Number]
            Response of length ``n``, or a ``(n, d)`` matrix for a
            multivariate response (Euclidean distance across its columns).
        batch_size : int, optional
            Number of observations whose pairwise distances are computed at
            once. Defaults to a block of about ``2**22`` floats. Results do
            not depend on this value.

        Returns
        -------
        pandas.DataFrame
            One row per column of ``x`` with columns ``dcov``, ``dvar_x``,
            ``dvar_y`` and ``dcor``.

        Raises
        ------
        ShapeMismatchError
            If ``x`` and ``y`` have different numbers of rows.
        InvalidValueError
            If ``x`` or ``y`` contains NaN values.

        Notes
        -----
        - Each radicand is clipped at zero before taking the square root,
          since rounding can make a theoretically non-negative moment
          slightly negative.
        - If the distance variance of a column or of the response is zero
          (constant input), the distance correlation is defined as 0.
        - Cost is :math:`O(n^2 p)` time and
          :math:`O(n p + \\text{batch\\_size} \\cdot n p)` memory.
        """
        errors = DistanceMetrics._errors
        x = convert_design_matrix(x, data_name="x")
        y = convert_response(y)
        validate_lengths_match(
            x, y, errors["rows_mismatch_f"].format("x", x.shape[0], "y", y.shape[0])
        )
        validate_array_not_contains_nan(x, errors["array_contains_nans_f"].format("x"))
        validate_array_not_contains_nan(y, errors["array_contains_nans_f"].format("y"))

        n, p = x.shape
        if batch_size is None:
            batch_size = max(1, DEFAULT_BLOCK_ELEMENTS // max(1, n * p))
        sxy1, sxy2, sxy3, sxx1, syy1 = DistanceMetrics._row_moments(
            x, y, int(batch_size)
        )

        mean_sxy2 = sxy2.mean(axis=0)
        mean_sxy3 = sxy3.mean()
        dcov_sq = (
            sxy1.mean(axis=0)
            + mean_sxy2 * mean_sxy3
            - 2 * (sxy2 * sxy3[:, np.newaxis]).mean(axis=0)
        )
        dvar_x_sq = sxx1.mean(axis=0) + mean_sxy2**2 - 2 * (sxy2**2).mean(axis=0)
        dvar_y_sq = syy1.mean() + mean_sxy3**2 - 2 * (sxy3**2).mean()

        dcov = np.sqrt(np.maximum(dcov_sq, 0))
        dvar_x = np.sqrt(np.maximum(dvar_x_sq, 0))
        dvar_y = np.sqrt(max(dvar_y_sq, 0))
        denominator = np.sqrt(dvar_x * dvar_y)
        dcor = np.divide(
            dcov, denominator, out=np.zeros(p), where=denominator > 0
        )
        return pd.DataFrame(
            {
                "dcov": dcov,
                "dvar_x": dvar_x,
                "dvar_y": np.full(p, dvar_y),
                "dcor": dcor,
            }
        )

    @staticmethod
    def distance_correlation(x: Sequence[Number], y: Sequence[Number]) -> float:
        """
        Calculates the distance correlation between a variable and a response.

        Distance correlation is zero (in the population) if and only if the
        two variables are independent, so it also detects non-linear and
        non-monotonic dependencies.

        Parameters
        ----------
        x : Sequence[Number]
            The explanatory variable.
        y : Sequence[Number]
            The response variable (a ``(n, d)`` matrix is accepted).

        Returns
        -------
        float
            Distance correlation in the range [0, 1]. Constant inputs
            give 0.

        Raises
        ------
        ShapeMismatchError
            If ``x`` and ``y`` have different lengths.
        InvalidValueError
            If any NaNs are present in ``x`` or ``y``.
        """
        x_column = convert_response(x, data_name="x").reshape(-1, 1)
        return float(DistanceMetrics.distance_moments(x_column, y)["dcor"].iloc[0])
