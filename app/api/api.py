from fastapi import APIRouter
from app.api.endpoints.image import api as ImageApi
from app.api.endpoints.training import api as TrainingApi

router = APIRouter()

router.include_router(ImageApi.router)
router.include_router(TrainingApi.router)
