from typing import Optional, Tuple
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.models.image import Image
from app.schemas.image import ImageDTO, ImageSize
from app.service.IO.base_service import BaseService

logger = logging.getLogger(__name__)

# Размер -> (колонка с байтами, колонка с MIME-типом)
VARIANT_FIELDS = {
    ImageSize.SMALL: ("small", "small_content_type"),
    ImageSize.MEDIUM: ("medium", "medium_content_type"),
    ImageSize.LARGE: ("large", "large_content_type"),
}

SORT_MAPPING = {
    "id": Image.id,
    "name": Image.name,
    "hash": Image.hash,
}

class ImageService(BaseService):
    """Сервис для работы с изображениями"""
    
    async def get_image_by_id(self, image_id: int) -> Optional[Image]:
        """Получение изображения по ID"""
        image_query = select(Image).where(Image.id == image_id)
        result = await self.db.execute(image_query)
        return result.scalar_one_or_none()

    async def get_image_by_name(self, name: str) -> Optional[Image]:
        """Получение изображения по уникальному имени"""
        image_query = select(Image).where(Image.name == name)
        result = await self.db.execute(image_query)
        return result.scalar_one_or_none()

    async def find_one(self, image_id: int) -> Optional[ImageDTO]:
        image = await self.get_image_by_id(image_id)
        return ImageDTO.model_validate(image) if image else None

    async def save(self, image_dto: ImageDTO) -> ImageDTO:
        """
        Создание (id отсутствует) или обновление (id задан) изображения.
        Обновление несуществующей записи завершается NoResultFound.
        """
        data = image_dto.model_dump(exclude={"id"})
        try:
            if image_dto.id is None:
                image = Image(**data)
                self.db.add(image)
            else:
                result = await self.db.execute(select(Image).where(Image.id == image_dto.id))
                image = result.scalar_one()
                for key, value in data.items():
                    setattr(image, key, value)

            await self.db.commit()
            await self.db.refresh(image)
            logger.info(f"Saved image: {image.id} - {image.name}")
            return ImageDTO.model_validate(image)
        except SQLAlchemyError as e:
            await self.rollback_db()
            logger.error(f"Error saving image '{image_dto.name}': {str(e)}")
            raise
    
    async def delete(self, image_id: int) -> None:
        """Удаление изображения из БД; отсутствие записи ошибкой не считается"""
        try:
            await self.db.execute(delete(Image).where(Image.id == image_id))
            await self.db.commit()
            logger.info(f"Deleted image: {image_id}")
        except SQLAlchemyError as e:
            await self.rollback_db()
            logger.error(f"Error deleting image {image_id}: {str(e)}")
            raise

    @staticmethod
    def get_image_variant(image: Image, size: ImageSize) -> Tuple[bytes, Optional[str]]:
        """
        Байты и MIME-тип выбранного размера.
        Пустой вариант отдается как b"" без подмены другим размером.
        """
        blob_field, type_field = VARIANT_FIELDS[size]
        return getattr(image, blob_field) or b"", getattr(image, type_field)
