"""Where: src/playrank/config/settings.py
What: Validated runtime settings derived from CLI flags and persisted configuration.
Why: Expose one precedence rule to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from playrank.config.config import EXTENSION_DEFAULT, JOBS_DEFAULT, Config

# Worker threads used when neither the CLI nor the config file say otherwise.
DEFAULT_JOBS: int = JOBS_DEFAULT

# Export files produced by the takeout are plain CSV.
DEFAULT_EXTENSION: str = EXTENSION_DEFAULT

# Thread name prefix for ingestion workers, visible in log records.
WORKER_THREAD_PREFIX: str = "playrank-ingest"


def resolve_jobs(cli_value: int | None, config: Config | None = None) -> int:
    """Return the worker count using CLI > config > default precedence.

    Raises:
        ValueError: If the CLI value is not a positive integer.
    """

    if cli_value is not None:
        if cli_value < 1:
            raise ValueError(f"Number of jobs must be a positive integer; received {cli_value}")
        return cli_value
    if config is not None:
        return config.jobs
    return DEFAULT_JOBS


def normalize_extension(value: str | None, config: Config | None = None) -> str:
    """Return a lower-case suffix with a leading dot."""

    raw = value if value else (config.extension if config is not None else DEFAULT_EXTENSION)
    cleaned = raw.strip().lower()
    if not cleaned.startswith("."):
        cleaned = f".{cleaned}"
    return cleaned


__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_JOBS",
    "WORKER_THREAD_PREFIX",
    "normalize_extension",
    "resolve_jobs",
]
