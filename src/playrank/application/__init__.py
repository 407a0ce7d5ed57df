"""Application services shared by every user interface."""
