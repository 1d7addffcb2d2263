from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.sizes import parse_size


class Settings(BaseSettings):
    """Application configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix='MEDIA_DROP_',
        env_file='backend/.env',
        env_file_encoding='utf-8',
        extra='ignore',
        frozen=True,
    )

    app_name: str = Field(default='Media Drop')
    environment: str = Field(default='local')
    api_version: str = Field(default='0.1.0')

    address: str = Field(default=':9090', description='Listen address.')
    storage_dir: str = Field(default='media', description='Where uploaded files are stored.')
    public_dir: str = Field(default='public', description='Static web UI directory.')
    max_file_size: str = Field(default='50M', description='Max request body size.')

    username: str = Field(default='user')
    password: str = Field(default='pass')
    enable_auth: bool = Field(default=False, description='Protect /api with basic auth.')

    enable_csrf: bool = Field(default=True)
    gzip_level: int = Field(default=5, ge=1, le=9)
    log_level: str = Field(default='INFO')

    @field_validator('max_file_size')
    @classmethod
    def _check_size(cls, value: str) -> str:
        parse_size(value)
        return value

    @property
    def max_body_bytes(self) -> int:
        return parse_size(self.max_file_size)


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance for dependency injection."""
    return Settings()
