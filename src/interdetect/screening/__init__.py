"""
Facade for model-free screening of main effects.

Functions available at the top level include:
- dcsis: distance-correlation sure independence screening
- distance_correlation, distance_moments: the underlying dependence measures
"""

from .dcsis import dcsis
from .distance_metrics import DistanceMetrics

distance_correlation = DistanceMetrics.distance_correlation
distance_moments = DistanceMetrics.distance_moments

__all__ = ["dcsis", "DistanceMetrics", "distance_correlation", "distance_moments"]
