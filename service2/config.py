"""Application settings loaded from environment variables."""

import logging
import os

from pydantic import field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    # Listener
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Service metadata
    service_name: str = "Service 2"
    version: str = "1.0.0"

    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, value):
        """Use the default port when PORT is missing, blank or not a valid port number."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PORT
        try:
            port = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid PORT value {value!r}, falling back to {DEFAULT_PORT}")
            return DEFAULT_PORT
        if not 0 <= port <= 65535:
            logger.warning(f"PORT {port} out of range, falling back to {DEFAULT_PORT}")
            return DEFAULT_PORT
        return port


# Configure logging before settings are built so PORT warnings are formatted
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "info").upper(),
    format=LOG_FORMAT,
)

settings = Settings()
