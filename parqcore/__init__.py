"""Parquet format building blocks: schema types, statistics, dictionary pages and levels."""

__version__ = "0.1.0"