"""Default configuration parameters for the contact directory."""

from dataclasses import dataclass

DEFAULT_CAPACITY = 10


@dataclass(frozen=True)
class DirectoryParams:
    """Directory sizing parameters."""
    default_capacity: int = DEFAULT_CAPACITY         # Used when no valid size is requested


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "WARNING"                           # Keeps operation events out of the menu
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    directory: DirectoryParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        directory=DirectoryParams(),
        logging=LoggingParams(),
    )
