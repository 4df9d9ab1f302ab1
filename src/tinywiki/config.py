"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

TEMPLATES_PATH = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    template_dir: Path = TEMPLATES_PATH
    page_suffix: str = ".txt"
    debug: bool = False
    app_title: str = "TinyWiki"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TINYWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
