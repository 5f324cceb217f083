"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgmodel_env: str = "development"
    svgmodel_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Documents
    default_xmlns: str = "http://www.w3.org/2000/svg"

    # Text output
    indent: str = "  "
    xml_declaration: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
