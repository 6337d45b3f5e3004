"""
Type utilities and result containers used throughout interdetect.

This module defines the shared types exchanged between the screening,
candidate-generation, ranking and plotting stages. They are lightweight
descriptors and containers; none of them carries analytical logic.

Classes
-------
Heredity
    Tagged variant of the heredity policies: ``Strong``, ``Weak`` and ``No``.
ScreeningResult
    Output of the DC-SIS screener: ranked column indices and raw scores.
SelectionResult
    Output of :func:`interdetect.select`: interaction ranking and the main
    effects it was computed for.
InteractionScorer
    Protocol of the external model-scoring criterion.
VisualizationResult
    Container object returned by all visualization functions.
NaturalNumber
    Type descriptor enabling `isinstance(x, NaturalNumber)` checks for
    positive integers (natural numbers).

Examples
--------
>>> from interdetect.types import Heredity, NaturalNumber
>>> Heredity("Weak") is Heredity.WEAK
True
>>> isinstance(5, NaturalNumber)
True
>>> isinstance(0, NaturalNumber)
False
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Optional, Protocol, Sequence, Union

import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure


class _NaturalNumberMeta(type):
    """Metaclass to enable isinstance checks for natural numbers."""

    def __instancecheck__(cls, instance):
        """Return True if instance is a positive integer."""
        return (
            isinstance(instance, Number) and instance > 0 and instance == int(instance)
        )

    def __repr__(cls):
        return "NaturalNumber"

    def __init__(cls, *_):
        cls.__name__ = "NaturalNumber"


# pylint: disable=R0903
class NaturalNumber(metaclass=_NaturalNumberMeta):
    """
    Type descriptor for natural numbers (positive integers).

    `isinstance(value, NaturalNumber)` returns True if and only if `value`
    is numeric, strictly greater than zero and a whole number. Floats are
    accepted only if they are exact integers, e.g. `3.0`. Used to validate
    model-size parameters such as ``r1``, ``r2`` and ``q``.

    Examples
    --------
    >>> isinstance(1.0, NaturalNumber)
    True
    >>> isinstance(3.14, NaturalNumber)
    False
    >>> isinstance("5", NaturalNumber)
    False
    """


class Heredity(str, Enum):
    """
    Heredity policy linking interaction candidates to selected main effects.

    - ``STRONG``: both parents of an interaction must be selected.
    - ``WEAK``: at least one parent must be selected.
    - ``NO``: every interaction is eligible.

    Members compare equal to their string values, so ``Heredity.STRONG ==
    "Strong"`` holds and the value can be passed on to scoring criteria
    expecting plain strings.
    """

    STRONG = "Strong"
    WEAK = "Weak"
    NO = "No"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class ScreeningResult:
    """
    Result of distance-correlation screening.

    Parameters
    ----------
    ranked_all : numpy.ndarray
        Permutation of the column indices of ``X``, from most to least
        dependent on the response. Ties keep their input order.
    ranked_nsis : numpy.ndarray
        The first ``min(p, floor(nsis))`` entries of ``ranked_all``.
    scores : numpy.ndarray
        Distance correlation of every column with the response, in the
        original column order.
    """

    ranked_all: np.ndarray
    ranked_nsis: np.ndarray
    scores: np.ndarray


@dataclass(frozen=True)
class SelectionResult:
    """
    Result of interaction selection.

    Parameters
    ----------
    ranking : pandas.DataFrame
        Two columns, ``interaction`` (absolute variable index, i.e.
        ``nmain_p`` + position in the interaction table) and ``score``,
        sorted ascending by score with undefined scores last.
    selected_mains : numpy.ndarray
        The top-``r1`` main effects every candidate was scored with.
    main_pool : numpy.ndarray
        All main effects, ranked by decreasing distance correlation.
    max_model_size : int
        ``r1 + r2``, the largest model the caller intends to fit.
    """

    ranking: pd.DataFrame
    selected_mains: np.ndarray
    main_pool: np.ndarray
    max_model_size: int


class InteractionScorer(Protocol):
    """
    Model-scoring criterion evaluating a candidate variable subset.

    Implementations return a scalar fitness, lower meaning better. ``NaN``
    is an acceptable answer and ranks last. ``sigma=None`` asks the
    criterion to estimate the noise scale itself. ``varind`` holds the
    selected main-effect indices followed by one absolute interaction index.
    """

    # pylint: disable=R0913
    def __call__(
        self,
        X: np.ndarray,
        y: np.ndarray,
        *,
        heredity: str,
        nmain_p: int,
        sigma: Optional[float],
        extract: str,
        varind: Sequence[int],
        interaction_ind: np.ndarray,
        pi1: float,
        pi2: float,
        pi3: float,
        lambda_: float,
    ) -> float: ...


@dataclass
class VisualizationResult:
    """
    Standardized container for the output of all visualization functions.

    Parameters
    ----------
    figure : matplotlib.figure.Figure or plotly.graph_objects.Figure
        The figure object produced by the visualization function.
    axes : matplotlib.axes.Axes or None, default=None
        The primary axes object when using Matplotlib.
        Plotly visualizations do not use axes and set this attribute to ``None``.
    engine : {'matplotlib', 'plotly'}
        Name of the plotting engine used to generate the visualization.
    width : int or None
        Width of the figure, inches for Matplotlib, pixels for Plotly.
    height : int or None
        Height of the figure, inches for Matplotlib, pixels for Plotly.
    title : str or None
        Title of the generated visualization.
    extra_info : dict or None
        Optional metadata, e.g. ``{'n_plotted': 50, 'n_total': 120}``.

    Examples
    --------
    >>> result = detect(X, y, scorer, nmain_p=4, r1=3, r2=3,
    ...                 interaction_ind=interaction_index_table(4))
    >>> result.figure        # Matplotlib Figure
    >>> result.engine
    'matplotlib'
    """

    figure: Union[Figure]
    axes: Optional[Axes] = None
    engine: str = "matplotlib"
    width: Optional[int] = None
    height: Optional[int] = None
    title: Optional[str] = None
    extra_info: dict = None
