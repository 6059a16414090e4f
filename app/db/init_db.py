from app.db.base import Base
from app.db.session import engine
# Модели должны быть импортированы до create_all
from app.models import image, skill, training

async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
