from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    session_secret: str = os.getenv("SESSION_SECRET", "recipehub-secret-change-in-production")
    default_limit: int = 18
    max_limit: int = 50
    similar_limit: int = 10
    cache_ttl: float = float(os.getenv("RECIPEHUB_CACHE_TTL", "300"))


DEFAULT_APP_CONFIG = AppConfig()
