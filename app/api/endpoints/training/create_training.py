from fastapi import APIRouter, Depends, HTTPException, Response
from app.api.deps import get_training_service
from app.core.config import settings
from app.core.exceptions import BadRequestAlertException
from app.core.header_util import create_entity_creation_alert
from app.schemas.training import TrainingDTO
from app.service.IO.training_service import TrainingService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

ENTITY_NAME = "training"

@router.post("", response_model=TrainingDTO, status_code=201)
async def create_training(
    training_dto: TrainingDTO,
    response: Response,
    training_service: TrainingService = Depends(get_training_service)
):
    """Создание нового тренинга"""
    logger.debug(f"REST request to save Training : {training_dto.title}")
    if training_dto.id is not None:
        raise BadRequestAlertException("A new training cannot already have an ID", ENTITY_NAME, "idexists")

    try:
        result = await training_service.save(training_dto)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error in create_training endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail="Unexpected error occurred")

    response.headers["Location"] = f"{settings.API_PREFIX}/trainings/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result
