"""
Facade for interaction candidate generation and ranking.

Functions available at the top level include:
- interaction_index_table, validate_interaction_table, locate_interactions:
  the table mapping main-effect pairs to interaction variable indices
- resolve_heredity, select_main_effects, heredity_candidates: heredity
  constrained candidate pools
- rank_interactions: scoring and ordering of candidates
"""

from .heredity import (
    HEREDITY_POOLS,
    heredity_candidates,
    resolve_heredity,
    select_main_effects,
)
from .index_table import (
    interaction_index_table,
    locate_interactions,
    validate_interaction_table,
)
from .ranking import RANKING_COLUMNS, rank_interactions

__all__ = [
    "HEREDITY_POOLS",
    "RANKING_COLUMNS",
    "heredity_candidates",
    "interaction_index_table",
    "locate_interactions",
    "rank_interactions",
    "resolve_heredity",
    "select_main_effects",
    "validate_interaction_table",
]
