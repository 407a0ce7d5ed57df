"""Ingestion use cases: parsing, worker pool, accumulator and pipeline driver."""
