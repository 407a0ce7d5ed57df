# Where: playrank.features.ranking.__init__
# What: Expose the aggregation stage and its summary type.
# Why: Provide a cohesive import surface for the pipeline and reporters.

from .usecases.aggregator import RankingSummary, aggregate

__all__ = ["RankingSummary", "aggregate"]
