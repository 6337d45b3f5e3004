"""
interdetect: detection of two-way interaction effects for linear models.

Features include:
- Model-free screening of main effects by distance correlation (DC-SIS)
- Heredity-constrained interaction candidate pools (Strong, Weak, No)
- Ranking of candidate interactions by a pluggable scoring criterion
- Visualization of the ranked candidates
"""
import logging

from .exceptions import (
    ConsistencyError,
    InvalidValueError,
    MissingArtifactError,
    MissingInputError,
    ShapeMismatchError,
)
from .interactions import heredity_candidates, interaction_index_table
from .screening import dcsis
from .selection import detect, select
from .types import Heredity, SelectionResult, ScreeningResult

__version__ = "0.1.0"

__all__ = [
    "select",
    "detect",
    "dcsis",
    "heredity_candidates",
    "interaction_index_table",
    "Heredity",
    "SelectionResult",
    "ScreeningResult",
    "MissingInputError",
    "ShapeMismatchError",
    "InvalidValueError",
    "MissingArtifactError",
    "ConsistencyError",
]

logger = logging.getLogger("interdetect")
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)
