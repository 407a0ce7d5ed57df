"""Feature packages for playrank."""
