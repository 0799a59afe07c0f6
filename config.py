"""
Configuration module for the GitHub portfolio server.
Handles environment variable loading, default settings, and logging.
"""

import os
import pathlib
import logging
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

# Configure logging to output to stderr
logging.basicConfig(
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stderr)],
    format="%(asctime)s [portfolio] %(message)s"
)

logger = logging.getLogger(__name__)

# Load environment variables from the project-level .env file (if any)
script_dir = pathlib.Path(__file__).parent
load_dotenv(script_dir / ".env")

DEFAULT_USERNAME = "patel-aum"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8081
GITHUB_API_URL = "https://api.github.com"
# Seconds allowed for each page request to the GitHub API
REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    username: str = DEFAULT_USERNAME
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    api_url: str = GITHUB_API_URL
    timeout: float = REQUEST_TIMEOUT


def get_default_username():
    """Returns the GitHub username whose repositories are shown on the home page."""
    return os.getenv("PORTFOLIO_USERNAME") or DEFAULT_USERNAME


def get_host():
    return os.getenv("PORTFOLIO_HOST") or DEFAULT_HOST


def get_port():
    """Returns the listening port. Raises ValueError for a non-numeric value."""
    return int(os.getenv("PORTFOLIO_PORT") or DEFAULT_PORT)


def get_api_url():
    return (os.getenv("GITHUB_API_URL") or GITHUB_API_URL).rstrip("/")


def get_request_timeout():
    return float(os.getenv("GITHUB_TIMEOUT") or REQUEST_TIMEOUT)


def load_settings(**overrides):
    """
    Build the process settings from the environment.

    Keyword arguments that are not None (typically CLI flags) take
    precedence over environment variables and defaults.
    """
    values = {
        "username": get_default_username(),
        "host": get_host(),
        "port": get_port(),
        "api_url": get_api_url(),
        "timeout": get_request_timeout(),
    }
    for key, value in overrides.items():
        if key not in values:
            raise TypeError(f"Unknown setting: {key}")
        if value is not None:
            values[key] = value
    values["api_url"] = values["api_url"].rstrip("/")
    return Settings(**values)
