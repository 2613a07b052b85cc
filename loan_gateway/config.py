"""Configuration management using Pydantic Settings"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001

    # HTTP
    api_prefix: str = "/api/loans"
    cors_allow_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]


settings = Settings()
