import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# 1. Импорт Базы и Моделей
from app.db.base import Base
from app.models.image import Image
from app.models.skill import Skill
from app.models.training import Training

# 2. Импорт зависимости
from app.db.session import get_db

# 3. Импорт роутеров и обработчиков ошибок
from app.api.api import router as api_router
from app.core.error_handlers import register_exception_handlers

# Используем SQLite в памяти (одно соединение на весь тест)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Создает изолированную сессию БД для каждого теста."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    
    async with async_session() as session:
        yield session
        
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
def app_overrides(db_session):
    """Фикстура для подмены зависимости get_db."""
    async def override_get_db():
        yield db_session
    return override_get_db


@pytest_asyncio.fixture(scope="function")
async def client(app_overrides):
    """
    Создает тестовый клиент FastAPI с теми же роутерами и обработчиками ошибок, что и main.py.
    """
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    # --- Переопределение БД ---
    app.dependency_overrides[get_db] = app_overrides

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test/api") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def sample_image(db_session):
    """Изображение с LARGE и MEDIUM вариантами и пустым SMALL."""
    image = Image(
        id=7,
        name="logo",
        large=bytes.fromhex("AABB"),
        large_content_type="image/png",
        medium=bytes.fromhex("CC"),
        medium_content_type="image/jpeg",
        small=None,
        small_content_type=None,
    )
    db_session.add(image)
    await db_session.commit()
    await db_session.refresh(image)
    return image


@pytest_asyncio.fixture(scope="function")
async def sample_skills(db_session):
    """Два навыка для связей many-to-many тренинга."""
    skills = [
        Skill(title="Continuous Delivery", description="Deploy on every commit"),
        Skill(title="Pair Programming"),
    ]
    db_session.add_all(skills)
    await db_session.commit()
    for skill in skills:
        await db_session.refresh(skill)
    return skills
