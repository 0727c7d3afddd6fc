"""Aggregators for data collected across runs."""

from .side_data_aggregator import DEFAULT_SIDE_DATA_PATH, SideDataAggregator

__all__ = ["DEFAULT_SIDE_DATA_PATH", "SideDataAggregator"]
