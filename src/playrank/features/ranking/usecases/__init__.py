"""Ranking use cases."""
