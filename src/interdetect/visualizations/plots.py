"""
Plots of interaction rankings.

Functions
---------
interaction_scoreplot(ranking, top=50, engine="matplotlib", **kwargs)
    Point plot of the best-ranked candidate interactions and their scores.
"""

import logging
import warnings
from typing import Any, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import plotly.express as px

from interdetect._utils import (
    convert_from_alias,
    read_config,
    validate_natural_number,
    validate_string_flag,
)
from interdetect.interactions.ranking import RANKING_COLUMNS
from interdetect.types import SelectionResult, VisualizationResult
from ._utils import (
    DEFAULT_MPL_PLOT_PARAMS,
    get_empty_plot,
    resolve_plotly_palette,
    save_plot,
    temp_plot_theme,
)

logger = logging.getLogger(__name__)

WRN_MSG_EMPTY_DATA = read_config("messages")["warns"]["empty_ranking_f"]
ERR_MSG_UNSUPPORTED_METHOD = read_config("messages")["errors"]["unsupported_method_f"]
ERR_MSG_NOT_NATURAL_NUMBER = read_config("messages")["errors"]["not_natural_number_f"]

DEFAULT_PLOTLY_FIGSIZE = (800, 500)


def _ranking_frame(ranking: Any) -> pd.DataFrame:
    if isinstance(ranking, SelectionResult):
        ranking = ranking.ranking
    if isinstance(ranking, pd.DataFrame):
        missing = set(RANKING_COLUMNS) - set(ranking.columns)
        if missing:
            raise ValueError(
                f"Ranking is missing column(s) {sorted(missing)}; "
                f"expected {RANKING_COLUMNS}."
            )
        return ranking[RANKING_COLUMNS]
    return pd.DataFrame(list(ranking), columns=RANKING_COLUMNS)


def interaction_scoreplot(
    ranking: pd.DataFrame | SelectionResult | Sequence[Sequence],
    top: int = 50,
    engine: str = "matplotlib",
    **kwargs,
) -> VisualizationResult:
    """
    Plots candidate interactions against their scores.

    The first ``top`` rows of the ranking are plotted in the ranking's own
    order (best first), one point per interaction, labelled by its flat
    variable index. Rankings shorter than ``top`` are plotted entirely.

    Parameters
    ----------
    ranking : pandas.DataFrame or SelectionResult or Sequence[Sequence]
        Output of :func:`interdetect.select` (or its ``ranking`` frame), or
        a sequence of ``(interaction, score)`` records.
    top : int, default=50
        Maximum number of interactions to display.
    engine : {'matplotlib', 'plotly'}, default='matplotlib'
        Plotting backend. Aliases such as ``'mpl'`` and ``'px'`` are accepted.
    title : str, optional
        The title of the chart. Defaults to ``"Candidate interactions"``.
    xlabel : str, optional
        The label for the X-axis. Defaults to ``"Interaction"``.
    ylabel : str, optional
        The label for the Y-axis. Defaults to ``"Score"``.
    figsize : tuple[float, float], optional
        Figure size; inches for Matplotlib (default (10, 6)), pixels for
        Plotly (default (800, 500)).
    opacity : float, default=0.8
        Transparency of the points.
    palette : str or list, optional
        Seaborn palette (Matplotlib) or Plotly qualitative sequence.
    style : str, optional
        Seaborn style applied to a Matplotlib figure (e.g. 'whitegrid').
    plot_kws : dict, optional
        Keyword arguments passed to ``Axes.scatter`` or ``px.scatter``;
        they take precedence over internally generated defaults.
    directory : str, optional
        Path to save the plot to. If None (default), the plot is not saved.
    overwrite : bool, default=True
        Whether an existing file may be replaced.
    verbose : bool, default=False
        If True, log the saving process.

    Returns
    -------
    VisualizationResult
        Figure, axes (Matplotlib only), engine, size and title.
        ``extra_info`` holds ``n_plotted`` and ``n_total`` row counts.

    Raises
    ------
    ValueError
        If ``engine`` is unsupported or the ranking lacks the
        ``interaction``/``score`` columns.
    InvalidValueError
        If ``top`` is not a natural number.

    Warns
    -----
    UserWarning
        If there is nothing to plot; an empty placeholder figure is returned.

    Notes
    -----
    Rows whose score is undefined (NaN) are left out of the figure; they
    still count towards ``top`` because they occupy ranking positions.

    Examples
    --------
    >>> result = interaction_scoreplot(selection.ranking, top=20)
    >>> result.figure.savefig("interactions.png")
    """
    engine = convert_from_alias(engine, path="engine")
    validate_string_flag(
        engine,
        {"matplotlib", "plotly"},
        err_msg=ERR_MSG_UNSUPPORTED_METHOD.format(engine, {"matplotlib", "plotly"}),
    )
    validate_natural_number(top, ERR_MSG_NOT_NATURAL_NUMBER.format("top", top))
    params = {
        **DEFAULT_MPL_PLOT_PARAMS,
        "title": "Candidate interactions",
        "xlabel": "Interaction",
        "ylabel": "Score",
        "opacity": 0.8,
        **({"figsize": DEFAULT_PLOTLY_FIGSIZE} if engine == "plotly" else {}),
        **kwargs,
    }

    frame = _ranking_frame(ranking)
    shown = frame.head(int(top)).dropna(subset=["score"])
    labels = shown["interaction"].astype(int).astype(str).tolist()
    scores = shown["score"].astype(float).tolist()
    logger.debug("Plotting %d of %d ranked interactions.", len(shown), len(frame))

    if engine == "plotly":
        if shown.empty:
            fig = get_empty_plot(figsize=params["figsize"], engine="plotly")
            warnings.warn(WRN_MSG_EMPTY_DATA.format("interaction_scoreplot"))
        else:
            fig = px.scatter(
                x=labels,
                y=scores,
                **{
                    "opacity": params["opacity"],
                    "width": params["figsize"][0],
                    "height": params["figsize"][1],
                    "color_discrete_sequence": resolve_plotly_palette(
                        params["palette"]
                    ),
                    **(params["plot_kws"] or {}),
                },
            )
            fig.update_xaxes(type="category", tickangle=90)
        fig.update_layout(
            title=params["title"],
            xaxis_title=params["xlabel"],
            yaxis_title=params["ylabel"],
        )
        axes = None
    else:
        with temp_plot_theme(palette=params["palette"], style=params["style"]):
            if shown.empty:
                fig, axes = get_empty_plot(figsize=params["figsize"])
                warnings.warn(WRN_MSG_EMPTY_DATA.format("interaction_scoreplot"))
            else:
                fig, axes = plt.subplots(figsize=params["figsize"])
                axes.scatter(
                    labels,
                    scores,
                    **{"alpha": params["opacity"], **(params["plot_kws"] or {})},
                )
                axes.tick_params(axis="x", labelrotation=90)
            axes.set_title(params["title"])
            axes.set_xlabel(params["xlabel"])
            axes.set_ylabel(params["ylabel"])

    if params["directory"] is not None:
        save_plot(
            fig,
            directory=params["directory"],
            overwrite=params["overwrite"],
            plot_name="interaction_scoreplot",
            verbose=params["verbose"],
            engine=engine,
        )
    return VisualizationResult(
        figure=fig,
        axes=axes,
        engine=engine,
        width=params["figsize"][0],
        height=params["figsize"][1],
        title=params["title"],
        extra_info={"n_plotted": len(shown), "n_total": len(frame)},
    )
