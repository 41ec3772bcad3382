"""brickset_pipeline package.

Contains modules for loading the bundled Brickset LEGO set catalogue into
validated in-memory records, and the collection-pipeline aggregations
(filter, map, reduce, group, sort) computed over them.

Architecture:
- A record store loads `brickset.json` once and only ever hands it out
- Aggregations are pure functions over the full record sequence
- Pydantic models validate each record at load time
- pandas/Dask provide tabular summaries of the same records
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
