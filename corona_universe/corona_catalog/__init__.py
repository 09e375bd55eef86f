"""
corona_catalog: Catalog generation, persistence and CLI for coronas.

Provides:
- catalog: build/save/load catalogs, summary statistics
- cli: corona-catalog command-line driver
- utils: logging setup
"""

__all__ = [
    "catalog",
    "cli",
    "utils",
]
