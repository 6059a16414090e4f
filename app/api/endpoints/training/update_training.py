from fastapi import APIRouter, Depends, HTTPException, Response
from app.api.deps import get_training_service
from app.core.exceptions import BadRequestAlertException
from app.core.header_util import create_entity_update_alert
from app.schemas.training import TrainingDTO
from app.service.IO.training_service import TrainingService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

ENTITY_NAME = "training"

@router.put("", response_model=TrainingDTO)
async def update_training(
    training_dto: TrainingDTO,
    response: Response,
    training_service: TrainingService = Depends(get_training_service)
):
    """Обновление существующего тренинга"""
    logger.debug(f"REST request to update Training : {training_dto.id}")
    if training_dto.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")

    try:
        result = await training_service.save(training_dto)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error in update_training endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail="Unexpected error occurred")

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(training_dto.id)))
    return result
