"""User interfaces for playrank."""
