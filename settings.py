"""Runtime settings for the converter page.

• CONVERTER_PAGE_TITLE – browser tab / page title.
• CONVERTER_LAYOUT     – Streamlit layout, "centered" or "wide".
• CONVERTER_LOG_LEVEL  – root log level name.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()

LAYOUTS = ("centered", "wide")


@dataclass(frozen=True)
class Settings:
    """Immutable container for page parameters."""

    page_title: str = "Unit Converter"
    layout: str = "centered"
    log_level: int = logging.WARNING


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def load_settings() -> Settings:
    layout = os.getenv("CONVERTER_LAYOUT", "centered").strip().lower()
    return Settings(
        page_title=os.getenv("CONVERTER_PAGE_TITLE", "Unit Converter"),
        layout=layout if layout in LAYOUTS else "centered",
        log_level=_log_level(os.getenv("CONVERTER_LOG_LEVEL", "WARNING")),
    )
