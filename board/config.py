"""Application configuration constants."""

from __future__ import annotations

import os
from dotenv import load_dotenv

load_dotenv()

from datetime import timezone
from typing import List, Optional

TIMEZONE = timezone.utc

# Environment
APP_ENV: str = os.getenv("APP_ENV", "development").strip().lower()
IS_PRODUCTION: bool = APP_ENV == "production"

# Auth
API_TOKEN: Optional[str] = os.getenv("API_TOKEN") or None

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# CORS
CORS_ORIGINS: List[str] = os.getenv("CORS_ORIGINS", "*").split(",")

# API Server
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_RELOAD = os.getenv("API_RELOAD", "True").lower() in ("true", "1", "yes")
