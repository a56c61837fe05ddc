"""Settings and logging setup for the address book service.

Settings are read from ``ADDRESSBOOK_*`` environment variables (or a
``.env`` file). ``setup_logging`` configures the root logger once.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ADDRESSBOOK_", env_file=".env", extra="ignore")

    project_name: str = "Address Book API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    base_url: Optional[str] = Field(
        default=None,
        description="Public base URI for contact links. Defaults to the request's base URL.",
    )
    host: str = "127.0.0.1"
    port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing if the root logger already has handlers, so repeated
    ``create_app`` calls in tests don't stack handlers.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
