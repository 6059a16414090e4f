from typing import List
from fastapi import APIRouter, Depends, Query, Request, Response
from app.api.deps import get_page_request, get_training_service
from app.core.config import settings
from app.core.exceptions import ResourceNotFoundError
from app.core.pagination import generate_pagination_headers
from app.schemas.pagination import PageRequest
from app.schemas.training import TrainingDTO
from app.service.IO.training_service import TrainingService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[TrainingDTO])
async def get_all_trainings(
    request: Request,
    response: Response,
    eagerload: bool = Query(False, description="Загружать связанные навыки"),
    page_request: PageRequest = Depends(get_page_request),
    training_service: TrainingService = Depends(get_training_service)
):
    """Список тренингов с пагинацией"""
    logger.debug(f"REST request to get a page of Trainings, eagerload: {eagerload}")
    if eagerload:
        page = await training_service.find_all_with_eager_relationships(page_request)
    else:
        page = await training_service.find_all(page_request)

    response.headers.update(generate_pagination_headers(
        page,
        f"{settings.API_PREFIX}/trainings",
        request.query_params.multi_items()
    ))
    return page.items

@router.get("/{training_id}", response_model=TrainingDTO)
async def get_training(
    training_id: int,
    training_service: TrainingService = Depends(get_training_service)
):
    """Тренинг по ID"""
    logger.debug(f"REST request to get Training : {training_id}")
    training_dto = await training_service.find_one(training_id)
    if training_dto is None:
        raise ResourceNotFoundError(f"Training with id {training_id} not found")
    return training_dto
