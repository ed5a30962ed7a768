"""
Runtime settings and logging setup.

Values come from environment variables, optionally loaded from a .env
file in the working directory.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler

QUIET_LOGGERS = ("httpx", "httpcore", "multipart")


class Settings(BaseModel):
    log_level: str = "INFO"
    output_dir: Path = Path("data/properties")
    contact: str = "Eiendomsspar"
    image_root: str = "/images/plaace"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    env = {
        "log_level": os.getenv("REPORT_LOG_LEVEL"),
        "output_dir": os.getenv("REPORT_OUTPUT_DIR"),
        "contact": os.getenv("REPORT_CONTACT"),
        "image_root": os.getenv("REPORT_IMAGE_ROOT"),
    }
    return Settings(**{k: v for k, v in env.items() if v is not None})


def configure_logging(level: str | None = None) -> None:
    """
    Send log records to stderr through rich.

    Raises ValueError for an unknown level name. Calling it again replaces
    the handler instead of adding a second one.
    """
    level = (level or get_settings().log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
