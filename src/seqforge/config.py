"""Configuration management for seqforge.

This module handles loading, validating, and providing access to
seqforge configuration settings. Configuration can come from:
- Default values
- YAML configuration files
- Command-line arguments

Example:
    >>> from seqforge.config import Config
    >>> config = Config.load("seqforge.yaml")
    >>> config.sequence.validate_on_construction
    False
"""

from pathlib import Path
from typing import Any

import attrs
import yaml

# =============================================================================
# Default Configuration Values
# =============================================================================

# Construction does not check symbols against the alphabet unless asked to
DEFAULT_VALIDATE_ON_CONSTRUCTION = False

# Logging defaults
DEFAULT_VERBOSITY = 1


# =============================================================================
# Configuration Classes
# =============================================================================


@attrs.define
class SequenceConfig:
    """Configuration for sequence construction.

    Attributes:
        validate_on_construction: Check initial data against the alphabet
            when a sequence is created.
    """

    validate_on_construction: bool = attrs.field(
        default=DEFAULT_VALIDATE_ON_CONSTRUCTION,
        validator=attrs.validators.instance_of(bool),
    )


@attrs.define
class LoggingConfig:
    """Configuration for logging.

    Attributes:
        verbosity: Verbosity level (0=warning, 1=info, 2=debug).
        log_file: Optional file to log to.
        use_rich: Use rich for console output.
    """

    verbosity: int = attrs.field(
        default=DEFAULT_VERBOSITY,
        validator=[attrs.validators.instance_of(int), attrs.validators.ge(0)],
    )
    log_file: str | None = None
    use_rich: bool = True


@attrs.define
class Config:
    """Main configuration container for seqforge.

    Attributes:
        sequence: Sequence construction configuration.
        logging: Logging configuration.
    """

    sequence: SequenceConfig = attrs.Factory(SequenceConfig)
    logging: LoggingConfig = attrs.Factory(LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build configuration from a nested dictionary.

        Args:
            data: Mapping with optional "sequence" and "logging" sections.

        Returns:
            Configuration object.

        Raises:
            ValueError: If a section or key is unknown or a value is invalid.
        """
        sections = {"sequence": SequenceConfig, "logging": LoggingConfig}

        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")

        kwargs = {}
        for name, section_cls in sections.items():
            values = data.get(name) or {}
            if not isinstance(values, dict):
                raise ValueError(f"Configuration section '{name}' must be a mapping")
            try:
                kwargs[name] = section_cls(**values)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid '{name}' configuration: {e}") from e

        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Path to YAML configuration file.
                  If None, returns default configuration.

        Returns:
            Loaded configuration object.

        Raises:
            FileNotFoundError: If configuration file doesn't exist.
            ValueError: If configuration file is invalid.
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse configuration file {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration.
        """
        return attrs.asdict(self)

    def save(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path to save configuration file.
        """
        Path(path).write_text(yaml.safe_dump(self.to_dict(), sort_keys=False))


# =============================================================================
# Active Configuration
# =============================================================================

_config = Config()


def get_config() -> Config:
    """Return the active configuration."""
    return _config


def set_config(config: Config) -> None:
    """Replace the active configuration.

    Args:
        config: Configuration to activate.
    """
    global _config
    _config = config
