"""Environment variable loading from .env files with precedence support."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_environment_variables(dotenv_path: Path | str | None = None) -> None:
    """
    Load environment variables from .env file with automatic detection.

    Environment variables from system environment take precedence over .env file values
    (python-dotenv's load_dotenv() with override=False).

    Args:
        dotenv_path: Optional path to .env file. If None, searches for .env file in:
                     - Current working directory
                     - Parent directories (up to 2 levels)
    """
    if dotenv_path is None:
        current = Path.cwd()
        search_paths = [
            current / ".env",
            current.parent / ".env",
            current.parent.parent / ".env",
        ]

        for path in search_paths:
            if path.exists():
                dotenv_path = path
                logger.debug(f"Loading .env file from: {path}")
                break

        if dotenv_path is None:
            load_dotenv(override=False)
            return

    dotenv_path = Path(dotenv_path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded .env file from: {dotenv_path}")
    else:
        logger.debug(f".env file not found at: {dotenv_path}")


def get_env(key: str, default: str | None = None) -> str | None:
    """
    Get environment variable value.

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_env_float(key: str, default: float | None = None) -> float | None:
    """
    Get float environment variable.

    Unparseable values are logged and ignored (default returned).
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring {key}={value!r}: not a number")
        return default
