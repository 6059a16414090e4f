from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.api import router as api_router
from app.core.config import settings
from app.core.error_handlers import register_exception_handlers
from app.db.init_db import init_db
from contextlib import asynccontextmanager
import logging

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info(f"{settings.APP_NAME} started, database: {settings.DATABASE_URL}")
    yield
    
app = FastAPI(title="TeamDojo API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    # Заголовки пагинации и уведомлений читает клиент
    expose_headers=[
        "Location",
        "Link",
        "X-Total-Count",
        f"X-{settings.APP_NAME}-alert",
        f"X-{settings.APP_NAME}-error",
        f"X-{settings.APP_NAME}-params",
    ]
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME}!"}

import uvicorn
if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
