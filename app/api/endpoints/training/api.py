from fastapi import APIRouter
from app.api.endpoints.training import create_training, update_training,\
get_trainings, remove_training


router = APIRouter()

router.include_router(create_training.router, prefix="/trainings", tags=["training"])
router.include_router(update_training.router, prefix="/trainings", tags=["training"])
router.include_router(get_trainings.router, prefix="/trainings", tags=["training"])
router.include_router(remove_training.router, prefix="/trainings", tags=["training"])
