"""
Package search and ranking.

This module provides concurrent search across the official repositories and
the AUR, with edit-distance based ranking of the merged results.
"""

from .aggregator import SearchAggregator
from .engine import PackageSearchEngine
from .fuzzy import description_hits, edit_distance
from .ranking import SearchRanker

__all__ = [
    'SearchAggregator',
    'PackageSearchEngine',
    'SearchRanker',
    'description_hits',
    'edit_distance'
]
