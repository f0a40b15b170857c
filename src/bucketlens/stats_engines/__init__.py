from .summary_stats_engine import SUMMARY_QUANTILES, SummaryStatsEngine

__all__ = ["SUMMARY_QUANTILES", "SummaryStatsEngine"]
