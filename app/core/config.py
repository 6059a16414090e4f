from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    APP_NAME: str = "teamdojoApp"
    API_PREFIX: str = "/api"

    DATABASE_URL: str = "sqlite+aiosqlite:///./teamdojo.db"
    DB_ECHO: bool = False

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 2000

    # Byte responses of the image content endpoints
    IMAGE_CACHE_MAX_AGE_DAYS: int = 30

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    CORS_ORIGINS: str = "*"

    @property
    def cors_origins_list(self) -> List[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(",") if item.strip()]

    @property
    def image_cache_max_age_seconds(self) -> int:
        return self.IMAGE_CACHE_MAX_AGE_DAYS * 24 * 60 * 60


settings = Settings()
