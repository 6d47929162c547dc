"""
Suite configuration module.

This module defines configuration classes for the environments the board
suite runs in (local, ci). Values are loaded from environment variables
with sensible defaults so the same suite can target another deployment
without code changes.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default."""
    value = os.environ.get(name)
    return int(value) if value else default


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get(
        "BOARD_BASE_URL", "https://animated-gingersnap-8cf7f2.netlify.app/"
    )
    TEST_DATA_PATH: Path = Path(
        os.environ.get("BOARD_TEST_DATA", BASE_DIR / "tests" / "data" / "test_data.json")
    )

    # Credentials override the loginCredentials block of the data file
    LOGIN_USERNAME: str | None = os.environ.get("BOARD_USERNAME")
    LOGIN_PASSWORD: str | None = os.environ.get("BOARD_PASSWORD")

    # Board layout, left to right
    COLUMNS: tuple[str, ...] = ("To Do", "In Progress", "Review", "Done")
    CANDIDATE_TAGS: tuple[str, ...] = ("Feature", "Bug", "Design", "High Priority")

    # Timeouts in milliseconds
    NAVIGATION_TIMEOUT_MS: int = _env_int("BOARD_NAVIGATION_TIMEOUT_MS", 30_000)
    ACTION_TIMEOUT_MS: int = _env_int("BOARD_ACTION_TIMEOUT_MS", 15_000)
    VISIBILITY_TIMEOUT_MS: int = 10_000
    TAG_TIMEOUT_MS: int = 5_000
    PROJECT_LOAD_WAIT_MS: int = 1_500
    LOGIN_SETTLE_MS: int = 2_000
    CLICK_SETTLE_MS: int = 500
    HIGHLIGHT_PAUSE_MS: int = 300

    VIEWPORT: dict = {"width": 1920, "height": 1080}

    # Seconds to poll the board URL before e2e tests are skipped
    REACHABILITY_TIMEOUT_S: int = _env_int("BOARD_REACHABILITY_TIMEOUT_S", 15)

    HIGHLIGHT_TAGS: bool = False


class LocalConfig(Config):
    """Local run configuration, typically headed for demos."""

    HIGHLIGHT_TAGS: bool = True


class CIConfig(Config):
    """CI configuration."""

    HIGHLIGHT_TAGS: bool = False
    REACHABILITY_TIMEOUT_S: int = _env_int("BOARD_REACHABILITY_TIMEOUT_S", 60)


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses BOARD_ENV, or "ci" when the CI variable is set.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("BOARD_ENV") or ("ci" if os.environ.get("CI") else "local")
    return config.get(env, config["default"])
