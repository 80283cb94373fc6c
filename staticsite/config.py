"""Application settings loaded from environment variables."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)

    # Content (relative paths resolve against root_dir)
    root_dir: str = "."
    public_dir: str = "public"
    index_file: str = "index.html"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_ignore_empty = True

    @property
    def public_path(self) -> Path:
        return Path(self.root_dir).resolve() / self.public_dir

    @property
    def index_path(self) -> Path:
        return Path(self.root_dir).resolve() / self.index_file


settings = Settings()
