"""
Internal utility module for the visualizations subpackage.

This module handles the concerns shared by plotting functions: saving
figures to disk, placeholder figures for empty inputs and temporary
Seaborn/Matplotlib styling.

Functions
---------
save_plot(fig, directory, overwrite, plot_name, verbose, engine)
    Saves a Matplotlib or Plotly figure to disk with file handling and logging.
get_empty_plot(message, figsize, engine)
    Generates a placeholder figure for instances where data is unavailable.
temp_plot_theme(palette, style)
    Context manager to temporarily set Seaborn styles and palettes.
resolve_plotly_palette(palette)
    Resolve a Plotly qualitative color sequence.

Notes
-----
This module is strictly for internal use within the package.
"""

import contextlib
import logging
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
import plotly.express as px
import seaborn as sns
from plotly.graph_objs import Figure as PxFigure

from interdetect._utils import temp_log_level

logger = logging.getLogger(__name__)

DEFAULT_MPL_PLOT_PARAMS = {
    "title": "",
    "xlabel": "",
    "ylabel": "",
    "style": None,
    "palette": None,
    "figsize": (10, 6),
    "directory": None,
    "overwrite": True,
    "verbose": False,
    "plot_kws": {},
}

SUPPORTED_FORMATS = {
    "matplotlib": {
        "png", "jpg", "jpeg", "svg", "pdf", "eps", "pgf", "ps",
        "raw", "rgba", "svgz", "tif", "tiff", "webp",
    },
    "plotly": {"html"},
}


def validate_file_format(ext: str, engine: str):
    """
    Validate that a given file extension is supported by the specified engine.

    Raises
    ------
    ValueError
        If the extension is not supported for the given engine.
    """
    if ext not in SUPPORTED_FORMATS[engine]:
        supported = ", ".join(sorted(SUPPORTED_FORMATS[engine]))
        raise ValueError(
            f"Unsupported file format '{ext}' for engine '{engine}'. "
            f"Supported formats are: {supported}."
        )


def resolve_plot_path(directory: str, plot_name: str, engine: str):
    """
    Resolve the absolute path and file extension for a plot file.

    A path without extension is treated as a directory and gets
    ``{plot_name}.png`` (Matplotlib) or ``{plot_name}.html`` (Plotly).

    Returns
    -------
    tuple[Path, str]
        Absolute file path and its extension without the leading dot.
    """
    path = Path(directory).absolute()
    if path.suffix == "":
        path = path / (f"{plot_name}.html" if engine == "plotly" else f"{plot_name}.png")
    return path, path.suffix.lower()[1:]


def save_plot(
    fig: plt.Figure | PxFigure,
    directory: str = ".",
    overwrite: bool = True,
    plot_name: str = "plot",
    **kwargs,
):
    """
    Save a Matplotlib or Plotly figure to disk.

    Parameters
    ----------
    fig : matplotlib.figure.Figure or plotly.graph_objs.Figure
        The figure object to save.
    directory : str, default="."
        Target file path or directory. Paths with an extension are used as
        the file name, other paths are treated as directories.
    overwrite : bool, default=True
        If False, an existing file is not replaced and FileExistsError is raised.
    plot_name : str, default="plot"
        Name used for logging and default filenames. Cannot be empty.
    verbose : bool, default=False
        If True, log the saved path at INFO level.
    engine : {'matplotlib', 'plotly'}, default='matplotlib'
        Engine that produced ``fig``; Plotly figures are written as HTML.

    Raises
    ------
    TypeError
        If ``fig`` is not a figure, or ``directory`` is not a string.
    ValueError
        If ``plot_name`` or ``directory`` is empty, or the format is unsupported.
    FileExistsError
        If the output file exists and ``overwrite`` is False.
    PermissionError
        If unable to write to the specified directory.
    """
    engine = kwargs.get("engine", "matplotlib")
    log_context = (
        temp_log_level(logger, logging.INFO)
        if kwargs.get("verbose", False)
        else contextlib.nullcontext()
    )
    if not isinstance(fig, (plt.Figure, PxFigure)):
        logger.error(
            "Failed to save '%s' to %s: expected a figure object, got %s.",
            plot_name,
            directory,
            type(fig).__name__,
        )
        raise TypeError(
            f"Expected matplotlib or plotly Figure object, got {type(fig).__name__}."
        )
    if not isinstance(directory, str):
        logger.error(
            "Invalid type for argument 'directory'. Expected str, but received %s.",
            type(directory).__name__,
        )
        raise TypeError(
            "Invalid type for argument 'directory'. Expected str, "
            f"but received {type(directory).__name__}."
        )
    if not directory.strip():
        err_msg = "Directory path must not be empty."
        logger.error(err_msg)
        raise ValueError(err_msg)
    if plot_name == "":
        err_msg = "The 'plot_name' cannot be empty."
        logger.error(err_msg)
        raise ValueError(err_msg)

    try:
        path, file_format = resolve_plot_path(directory, plot_name, engine)
        validate_file_format(file_format, engine)
        if not path.parent.exists():
            path.parent.mkdir(parents=True)
            logger.warning("Directory '%s' was created automatically.", path.parent)
        if path.exists() and not overwrite:
            logger.error(
                "Attempted to save plot to existing path without "
                "'overwrite=True'. Path: %s",
                path,
            )
            raise FileExistsError(
                f"Attempted to save plot to existing path without "
                f"'overwrite=True'. Path: {path}"
            )
        if engine == "plotly":
            fig.write_html(path)
        else:
            fig.savefig(path)
        with log_context:
            logger.info("'%s' saved to %s", plot_name, path)
    except PermissionError as e:
        logger.error("Permission denied saving '%s' to %s: %s", plot_name, directory, e)
        raise


def get_empty_plot(
    message: str = "No data available for visualization",
    figsize: Sequence[float] = (10, 6),
    engine: str = "matplotlib",
):
    """
    Generate a placeholder empty plot for Matplotlib or Plotly.

    Returns
    -------
    tuple or plotly.graph_objects.Figure
        ``(Figure, Axes)`` for Matplotlib, a Plotly figure with a centered
        annotation for Plotly.
    """
    if engine == "plotly":
        fig = PxFigure()
        fig.add_annotation(
            text=message,
            x=0.5,
            y=0.5,
            xref="paper",
            yref="paper",
            showarrow=False,
            font={"size": 16, "color": "gray"},
        )
        fig.update_layout(
            template="simple_white",
            xaxis={"visible": False},
            yaxis={"visible": False},
            width=figsize[0],
            height=figsize[1],
        )
        return fig
    fig, ax = plt.subplots(figsize=figsize)
    ax.text(
        0.5,
        0.5,
        message,
        ha="center",
        va="center",
        transform=ax.transAxes,
        fontsize=12,
        color="gray",
        style="italic",
    )
    return fig, ax


@contextmanager
def temp_plot_theme(palette: str = None, style: str = None):
    """
    Temporarily set the Seaborn style and color palette.

    Parameters
    ----------
    palette : str or list of colors, optional
        Name of a Seaborn color palette (e.g. "viridis") or a list of colors.
    style : str, optional
        Name of a Seaborn style (e.g. "whitegrid", "ticks").

    Examples
    --------
    >>> with temp_plot_theme(style="darkgrid", palette="Set2"):
    ...     fig, ax = plt.subplots()
    """
    contexts = []
    if style is not None:
        contexts.append(sns.axes_style(style))
    if palette is not None:
        contexts.append(sns.color_palette(palette))
    with ExitStack() as stack:
        for ctx in contexts:
            stack.enter_context(ctx)
        yield


def resolve_plotly_palette(palette: str | Sequence[str]):
    """
    Resolve a Plotly qualitative color sequence.

    ``None`` gives the default ``Plotly`` sequence, a string names a
    sequence in ``plotly.express.colors.qualitative`` and a sequence of
    color strings is returned unchanged.

    Raises
    ------
    ValueError
        If the named palette does not exist.
    """
    if palette is None:
        return px.colors.qualitative.Plotly
    if isinstance(palette, str):
        try:
            return getattr(px.colors.qualitative, palette)
        except AttributeError as exc:
            raise ValueError(f"Unknown categorical palette {palette} for Plotly") from exc
    return list(palette)
