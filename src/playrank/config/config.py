"""Configuration management for playrank."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from playrank.config.file_ops import write_text_file
from playrank.config.paths import default_config_path
from playrank.platform.logging import logger

JOBS_DEFAULT: int = 8
EXTENSION_DEFAULT: str = ".csv"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Number of worker threads used to parse export files
    jobs: int = JOBS_DEFAULT

    # Filename suffix that marks an export file as eligible
    extension: str = EXTENSION_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and reset invalid values."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

        if isinstance(self.jobs, bool) or not isinstance(self.jobs, int) or self.jobs < 1:
            logger.warning(
                "Invalid jobs value in configuration (%r); using %d", self.jobs, JOBS_DEFAULT
            )
            self.jobs = JOBS_DEFAULT

        if not isinstance(self.extension, str) or not self.extension.strip():
            logger.warning(
                "Invalid extension value in configuration (%r); using %s",
                self.extension,
                EXTENSION_DEFAULT,
            )
            self.extension = EXTENSION_DEFAULT

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.debug("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# playrank Configuration File")
        lines.append("")

        lines.append("# Number of worker threads used to parse export files")
        lines.append("# Overridden by the --jobs command line option")
        lines.append(f"jobs = {self._format_toml_value(config['jobs'])}")
        lines.append("")

        lines.append("# Filename suffix of export files to read")
        lines.append(f"extension = {self._format_toml_value(config['extension'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/playrank.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written. An unreadable
        or malformed file is reported and also yields the defaults.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            cls._instance = cls()
            return cls._instance

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Failed to load configuration from %s: %s; using defaults", config_file, e)
            cls._instance = cls()
            return cls._instance

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        config_dict = {key: value for key, value in config_dict.items() if key in known}

        logger.debug("Configuration loaded from %s", config_file)
        cls._instance = cls(**config_dict)
        return cls._instance


__all__ = ["Config", "EXTENSION_DEFAULT", "JOBS_DEFAULT"]
