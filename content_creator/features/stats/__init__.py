"""
User Stats Feature
"""

from content_creator.features.stats.handler import StatsHandler, tally_content_types

__all__ = [
    "StatsHandler",
    "tally_content_types",
]
