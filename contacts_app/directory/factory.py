"""Directory construction at the application boundary."""

from typing import Any, Optional

from ..config.defaults import DEFAULT_CAPACITY
from ..logging.config import get_logger
from .store import Directory

logger = get_logger(__name__)


def resolve_capacity(requested: Optional[int], default: int = DEFAULT_CAPACITY) -> int:
    """Use the requested capacity when it is a positive integer, else the default."""
    if isinstance(requested, int) and not isinstance(requested, bool) and requested > 0:
        return requested

    if requested is not None:
        logger.info(
            "Requested capacity rejected, using default",
            requested=requested,
            default=default
        )
    return default


def create_directory(
    requested: Optional[int] = None,
    config: Optional[dict[str, Any]] = None
) -> Directory:
    """
    Build a directory sized from the request or the configured default.

    Args:
        requested: Capacity asked for by the operator, if any
        config: Merged configuration; its directory.default_capacity
            replaces the built-in default

    Returns:
        An empty Directory
    """
    default = DEFAULT_CAPACITY
    if config:
        default = config.get("directory", {}).get("default_capacity", DEFAULT_CAPACITY)

    capacity = resolve_capacity(requested, default)
    logger.info("Directory created", capacity=capacity)
    return Directory(capacity)
