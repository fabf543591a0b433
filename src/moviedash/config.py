"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MOVIEDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Radarr API
    radarr_host: str = "radarr"
    radarr_port: int = 7878
    radarr_key: str = ""

    # Server settings
    serve_host: str = "0.0.0.0"
    serve_port: int = 7879

    # Raw Radarr response is kept for an hour
    cache_ttl_seconds: int = 3600

    # Bundled assets
    templates_dir: Path = PACKAGE_DIR / "templates"
    icons_dir: Path = PACKAGE_DIR / "icons"

    log_level: str = "INFO"


# Global settings instance
settings = Settings()
