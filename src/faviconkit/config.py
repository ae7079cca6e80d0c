from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FAVICONKIT_", env_file=".env", extra="ignore")

    max_upload_bytes: int = 8 * 1024 * 1024  # uploads above this are rejected before decoding
    base_size: int = 1024  # edge of the canonical composite every size is derived from
    export_workers: int = 6  # threads for per-size export. 1 = sequential.
    zip_compress_level: int = 9
    archive_filename: str = "faviconkit.zip"
    log_rss: bool = True  # log rss before/after the pipeline for memory debugging
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
