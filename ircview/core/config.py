# file: ircview/core/config.py

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Centralized application configuration.
    Values are loaded from environment variables prefixed with IRCVIEW_
    (e.g., IRCVIEW_DB_PATH) or from a .env file.
    """
    model_config = SettingsConfigDict(
        env_prefix="IRCVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Archive Database ---
    DB_PATH: str = "./db/archive.sqlite3"
    SCHEMA_FILE: Optional[str] = None  # Optional SQL script run by `init` instead of the built-in DDL

    # --- Web Server ---
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8080
    SERVER_ROOT: str = ""  # Path prefix when served behind a reverse proxy

    # --- Log Import ---
    LOG_ENCODING: str = "utf-8"
    LOG_DECODE_ERRORS: str = "replace"

    # --- Search ---
    NGRAM_SIZE: int = 2
    SEARCH_LIMIT: int = 100
    SNIPPET_MATCH_LIMIT: int = 10   # Refinement stops once matches exceed this
    PREVIEW_CHARS: int = 256        # Fallback snippet length in code points
    LOW_PRECISION_MAX_CHARS: int = 2

    LOG_LEVEL: str = "INFO"

# Create a single settings instance to be used by the entry points
settings = Settings()
