"""Platform services (logging) shared by every feature."""
