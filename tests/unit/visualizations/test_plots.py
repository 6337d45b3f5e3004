import pytest
import numpy as np
import pandas as pd

from matplotlib import pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes
from plotly.graph_objs import Figure as PxFigure

from interdetect.exceptions import InvalidValueError
from interdetect.types import SelectionResult, VisualizationResult
from interdetect.visualizations import interaction_scoreplot


def make_ranking(size):
    return pd.DataFrame({
        "interaction": np.arange(10, 10 + size),
        "score": np.linspace(-5, 5, size),
    })


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


# API contracts tests

def test_interaction_scoreplot_returns_visualization_result():
    result = interaction_scoreplot(make_ranking(5))
    assert isinstance(result, VisualizationResult)
    assert isinstance(result.figure, Figure)
    assert isinstance(result.axes, Axes)
    assert result.engine == "matplotlib"
    assert (result.width, result.height) == (10, 6)

@pytest.mark.parametrize("size, expected", [(1, 1), (10, 10), (50, 50), (60, 50)])
def test_interaction_scoreplot_top_default(size, expected):
    result = interaction_scoreplot(make_ranking(size))
    assert result.extra_info == {"n_plotted": expected, "n_total": size}
    assert len(result.axes.collections[0].get_offsets()) == expected

def test_interaction_scoreplot_custom_top():
    result = interaction_scoreplot(make_ranking(20), top=7)
    assert result.extra_info["n_plotted"] == 7

def test_interaction_scoreplot_keeps_ranking_order():
    ranking = pd.DataFrame({"interaction": [12, 5, 30], "score": [0.1, 0.2, 0.3]})
    result = interaction_scoreplot(ranking)
    result.figure.canvas.draw()
    labels = [tick.get_text() for tick in result.axes.get_xticklabels()]
    assert labels == ["12", "5", "30"]

def test_interaction_scoreplot_rotated_labels():
    result = interaction_scoreplot(make_ranking(3))
    result.figure.canvas.draw()
    assert all(tick.get_rotation() == 90 for tick in result.axes.get_xticklabels())

def test_interaction_scoreplot_default_labels():
    result = interaction_scoreplot(make_ranking(3))
    assert result.title == "Candidate interactions"
    assert result.axes.get_title() == "Candidate interactions"
    assert result.axes.get_xlabel() == "Interaction"
    assert result.axes.get_ylabel() == "Score"

def test_interaction_scoreplot_custom_labels():
    result = interaction_scoreplot(make_ranking(3), title="Top pairs",
                                   xlabel="Pair", ylabel="BIC", figsize=(4, 3))
    assert result.axes.get_title() == "Top pairs"
    assert result.axes.get_xlabel() == "Pair"
    assert result.axes.get_ylabel() == "BIC"
    assert (result.width, result.height) == (4, 3)

def test_interaction_scoreplot_drops_undefined_scores():
    ranking = pd.DataFrame({"interaction": [4, 5, 6], "score": [1.0, 2.0, np.nan]})
    result = interaction_scoreplot(ranking)
    assert result.extra_info == {"n_plotted": 2, "n_total": 3}

@pytest.mark.parametrize("ranking", [
    [(4, 1.5), (7, 2.5)],
    SelectionResult(
        ranking=pd.DataFrame({"interaction": [4, 7], "score": [1.5, 2.5]}),
        selected_mains=np.array([0, 1]),
        main_pool=np.array([0, 1, 2]),
        max_model_size=3,
    ),
])
def test_interaction_scoreplot_input_types(ranking):
    result = interaction_scoreplot(ranking)
    assert result.extra_info["n_plotted"] == 2

# empty data

def test_interaction_scoreplot_empty_ranking_warns():
    empty = pd.DataFrame({"interaction": [], "score": []})
    with pytest.warns(UserWarning, match="'interaction_scoreplot' is empty"):
        result = interaction_scoreplot(empty)
    assert isinstance(result.figure, Figure)
    assert result.extra_info == {"n_plotted": 0, "n_total": 0}

def test_interaction_scoreplot_only_undefined_scores_warns():
    ranking = pd.DataFrame({"interaction": [4, 5], "score": [np.nan, np.nan]})
    with pytest.warns(UserWarning):
        interaction_scoreplot(ranking)

# plotly engine

@pytest.mark.parametrize("engine", ["plotly", "px"])
def test_interaction_scoreplot_plotly(engine):
    result = interaction_scoreplot(make_ranking(60), engine=engine)
    assert isinstance(result.figure, PxFigure)
    assert result.axes is None
    assert result.engine == "plotly"
    assert (result.width, result.height) == (800, 500)
    assert len(result.figure.data[0].x) == 50
    assert result.figure.layout.title.text == "Candidate interactions"

def test_interaction_scoreplot_plotly_empty_warns():
    with pytest.warns(UserWarning):
        result = interaction_scoreplot([], engine="plotly")
    assert isinstance(result.figure, PxFigure)

# saving

def test_interaction_scoreplot_saves_png(tmp_path):
    interaction_scoreplot(make_ranking(5), directory=str(tmp_path))
    assert (tmp_path / "interaction_scoreplot.png").exists()

def test_interaction_scoreplot_saves_named_file(tmp_path):
    path = tmp_path / "plots" / "ranking.svg"
    interaction_scoreplot(make_ranking(5), directory=str(path))
    assert path.exists()

def test_interaction_scoreplot_saves_html(tmp_path):
    interaction_scoreplot(make_ranking(5), engine="plotly", directory=str(tmp_path))
    assert (tmp_path / "interaction_scoreplot.html").exists()

def test_interaction_scoreplot_no_overwrite(tmp_path):
    interaction_scoreplot(make_ranking(5), directory=str(tmp_path))
    with pytest.raises(FileExistsError):
        interaction_scoreplot(make_ranking(5), directory=str(tmp_path), overwrite=False)

# error handling

def test_interaction_scoreplot_unsupported_engine():
    with pytest.raises(ValueError, match="Unsupported method 'bokeh'"):
        interaction_scoreplot(make_ranking(5), engine="bokeh")

@pytest.mark.parametrize("top", [0, -3, 2.5])
def test_interaction_scoreplot_invalid_top(top):
    with pytest.raises(InvalidValueError, match="'top' must be a natural number"):
        interaction_scoreplot(make_ranking(5), top=top)

def test_interaction_scoreplot_missing_columns():
    with pytest.raises(ValueError, match="missing column"):
        interaction_scoreplot(pd.DataFrame({"interaction": [1, 2]}))
