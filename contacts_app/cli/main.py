"""
Command-line entry point for the contact directory.

Usage:
    contacts-app
    contacts-app --capacity 25 --log-level INFO
    python -m contacts_app --config-dir ./config
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from ..config.loader import ConfigLoader
from ..directory import create_directory
from ..errors import ConfigurationError
from ..logging.config import configure_logging, get_logger
from .menu import MenuSession, choose_directory

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contacts-app",
        description="Interactive in-memory contact directory"
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory containing contacts.yaml",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Directory capacity; skips the startup prompt (non-positive uses the default)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit JSON log lines",
    )
    return parser


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command-line options into configuration overrides."""
    logging_overrides: dict[str, Any] = {}
    if args.log_level is not None:
        logging_overrides["level"] = args.log_level
    if args.log_json:
        logging_overrides["format_json"] = True

    return {"logging": logging_overrides} if logging_overrides else {}


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ConfigLoader.create(args.config_dir).load(cli_overrides(args))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    log_config = config["logging"]
    configure_logging(
        level=log_config["level"],
        format_json=log_config["format_json"],
        include_timestamp=log_config["include_timestamp"],
    )

    print("==============================")
    print("   WELCOME TO THE DIRECTORY   ")
    print("==============================")
    print()

    if args.capacity is not None:
        directory = create_directory(args.capacity, config)
    else:
        directory = choose_directory(config=config)
    print()

    try:
        MenuSession(directory).run()
    except KeyboardInterrupt:
        logger.info("Session interrupted")
        print()
        return 130

    return 0
