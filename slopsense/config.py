"""
SlopSense Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Server ---
    HOST: str = os.getenv("SLOPSENSE_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("SLOPSENSE_PORT", "8000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("SLOPSENSE_CORS_ORIGINS", "*")

    # --- Batch ---
    MAX_BATCH_ITEMS: int = int(os.getenv("SLOPSENSE_MAX_BATCH_ITEMS", "50"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("SLOPSENSE_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("SLOPSENSE_LOG_FORMAT", "json")  # "json" or "text"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
