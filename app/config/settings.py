from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3001
    cors_allow_origins: list[str] = ["*"]

    pdf_engine: str = "pdfplumber"

    grouping_mode: Literal["strict", "lenient"] = "strict"
    naming_mode: Literal["composite", "name_only"] = "composite"
    reference_fallback: Literal["identifier", "absent"] = "identifier"
    name_source_order: Literal["attachment_first", "main_first"] = "attachment_first"
    title_scan_chars: int = 2500
    fail_fast: bool = False

    archive_filename: str = "pdf_merger_risultati.zip"
