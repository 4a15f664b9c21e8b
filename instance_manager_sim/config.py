"""
Simulator configuration using pydantic-settings
"""

import logging
from typing import Optional

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(levelname)s:\t %(name)s - %(message)s"


class Settings(BaseSettings):
    """Simulator settings"""

    app_name: str = "Instance Manager Simulator"
    debug: bool = False
    log_level: str = "INFO"

    # Raise UnknownFixtureKeyError for unrecognized target/command ids
    # instead of answering with an empty response
    strict_fixture_keys: bool = False

    # Record every call on the simulated client for test assertions
    record_calls: bool = False

    class Config:
        env_prefix = "IMS_"
        env_file = ".env"
        # Unrelated keys in a shared .env must not break import
        extra = "ignore"


settings = Settings()


def setup_logging(level: Optional[str] = None):
    """Configure root logging for scripts and test sessions.

    Importing the package never configures logging; call this from an entry
    point or a conftest.
    """
    resolved = (level or settings.log_level).upper()
    if settings.debug and level is None:
        resolved = "DEBUG"
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=LOG_FORMAT)
