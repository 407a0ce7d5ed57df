"""Configuration package for playrank."""
