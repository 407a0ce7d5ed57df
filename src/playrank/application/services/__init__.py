"""Application service implementations."""
