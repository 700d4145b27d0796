from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    # Настройки базы данных
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASS: str = "postgres"
    DB_NAME: str = "catalog_db"

    # Полный URL (например sqlite:///catalog.db) имеет приоритет над DB_*
    DATABASE_URL: Optional[str] = None

    # Настройки приложения
    APP_NAME: str = "Catalog API"
    APP_DESCRIPTION: str = "API каталога товаров, отделов и категорий"
    DEBUG: bool = False
    API_VERSION: str = "1.0.0"

    # Пагинация и выдача списков
    DEFAULT_PAGE_LIMIT: int = 20
    DEFAULT_DESCRIPTION_LENGTH: int = 200

    # Инициализация БД
    INIT_DB_ON_STARTUP: bool = False
    SEED_DATA_DIR: str = "data"

    @property
    def DATABASE_URL_psycopg(self):
        """URL подключения для psycopg"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f'postgresql+psycopg://{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}'

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow"
    )


@lru_cache()
def get_settings() -> Settings:
    """Получение настроек приложения с кэшированием"""
    return Settings()
