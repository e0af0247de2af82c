"""Centralised settings for the SuprNews content core.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP fetching
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    fallback_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FALLBACK_TIMEOUT", "15.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "10"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SUPRNEWS_USER_AGENT",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
        )
    )

    # ------------------------------------------------------------------
    # Encoding / corruption heuristics
    # ------------------------------------------------------------------
    meta_scan_bytes: int = field(
        default_factory=lambda: int(os.environ.get("META_SCAN_BYTES", "4096"))
    )
    garble_threshold: float = field(
        default_factory=lambda: float(os.environ.get("GARBLE_THRESHOLD", "0.20"))
    )
    non_ascii_run_length: int = field(
        default_factory=lambda: int(os.environ.get("NON_ASCII_RUN_LENGTH", "4"))
    )

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    min_selector_length: int = field(
        default_factory=lambda: int(os.environ.get("MIN_SELECTOR_LENGTH", "200"))
    )

    # ------------------------------------------------------------------
    # Categorizer (NLTK tagger data)
    # ------------------------------------------------------------------
    nltk_data_dir: Optional[Path] = field(
        default_factory=lambda: (
            Path(os.environ["NLTK_DATA_DIR"]) if os.environ.get("NLTK_DATA_DIR") else None
        )
    )
    nltk_auto_download: bool = field(
        default_factory=lambda: _env_bool("NLTK_AUTO_DOWNLOAD", "true")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton: import this everywhere:
#   from suprnews.config import settings
settings = Settings()
