"""
Facade for creating visualizations.

Functions available at the top level include:
- interaction_scoreplot: point plot of ranked candidate interactions
"""

from .plots import interaction_scoreplot

__all__ = ["interaction_scoreplot"]
