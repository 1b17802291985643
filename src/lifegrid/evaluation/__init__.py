"""Metrics and derived views over grid snapshots."""

from .metrics import (
    population,
    team_counts,
    leading_team,
    hamming_distance,
    lineage,
    starving
)

__all__ = [
    'population',
    'team_counts',
    'leading_team',
    'hamming_distance',
    'lineage',
    'starving'
]
