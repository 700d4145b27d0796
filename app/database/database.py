from sqlmodel import Session, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool
from typing import Generator
from .config import get_settings
import logging

logger = logging.getLogger(__name__)


def get_database_engine() -> Engine:
    """
    Создание и настройка движка SQLAlchemy.

    Returns:
        Engine: Настроенный движок SQLAlchemy
    """
    settings = get_settings()
    url = settings.DATABASE_URL_psycopg

    if url.startswith("sqlite"):
        # SQLite используется для локального запуска и не поддерживает пул
        return create_engine(
            url=url,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False}
        )

    if settings.DEBUG:
        # В режиме отладки используем NullPool (без пулинга)
        engine = create_engine(
            url=url,
            echo=True,
            poolclass=NullPool
        )
    else:
        engine = create_engine(
            url=url,
            echo=False,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600
        )

    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


engine = get_database_engine()


def get_session() -> Generator[Session, None, None]:
    """Получение сессии базы данных"""
    with Session(engine) as session:
        yield session
