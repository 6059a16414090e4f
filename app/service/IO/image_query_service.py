from sqlalchemy import select, func
import logging

from app.models.image import Image
from app.schemas.criteria import ImageCriteria
from app.schemas.image import ImageDTO
from app.schemas.pagination import Page, PageRequest
from app.service.IO.base_service import BaseService
from app.service.IO.image_service import SORT_MAPPING

logger = logging.getLogger(__name__)

class ImageQueryService(BaseService):
    """Выборка изображений по критериям"""

    def _build_conditions(self, criteria: ImageCriteria) -> list:
        conditions = []
        if criteria.id is not None:
            conditions.extend(criteria.id.to_conditions(Image.id))
        if criteria.name is not None:
            conditions.extend(criteria.name.to_conditions(Image.name))
        if criteria.hash is not None:
            conditions.extend(criteria.hash.to_conditions(Image.hash))
        return conditions

    async def find_by_criteria(self, criteria: ImageCriteria, page_request: PageRequest) -> Page[ImageDTO]:
        """Страница изображений, подходящих под критерии"""
        logger.debug(f"find by criteria : {criteria}, page: {page_request}")
        conditions = self._build_conditions(criteria)

        # Подсчет общего количества
        total_count = await self.count_by_criteria(criteria)

        images_query = select(Image)\
            .where(*conditions)\
            .order_by(*self.prepare_order_by(page_request, SORT_MAPPING, Image.id))\
            .offset(page_request.offset)\
            .limit(page_request.size)
        images_result = await self.db.execute(images_query)
        images = images_result.scalars().all()

        return Page[ImageDTO](
            items=[ImageDTO.model_validate(image) for image in images],
            total=total_count,
            page=page_request.page,
            size=page_request.size
        )

    async def count_by_criteria(self, criteria: ImageCriteria) -> int:
        """Количество изображений, подходящих под критерии"""
        logger.debug(f"count by criteria : {criteria}")
        count_query = select(func.count(Image.id)).where(*self._build_conditions(criteria))
        count_result = await self.db.execute(count_query)
        return count_result.scalar()
