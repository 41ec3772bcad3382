"""Aggregation helpers.

This package contains the collection-pipeline queries over LEGO set
records (counts, averages, distinct values, maxima, grouped frequency
tables), the report that prints them, and pandas/Dask tabular summaries.
"""
