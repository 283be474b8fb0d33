from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    title: str = "Sleep or Cram API"
    version: str = "1.0.0"
    log_level: str = os.getenv("SLEEP_OR_CRAM_LOG_LEVEL", "INFO").upper()


DEFAULT_APP_CONFIG = AppConfig()
