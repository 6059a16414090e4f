from abc import ABC
from typing import Dict
from sqlalchemy import asc, desc
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException
import logging

from app.schemas.pagination import PageRequest, SortDirection

logger = logging.getLogger(__name__)

class BaseService(ABC):
    """Базовый класс для сервисов с обработкой ошибок"""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def rollback_db(self):
        """Откат транзакции БД"""
        try:
            await self.db.rollback()
            logger.info("Database transaction rolled back")
        except Exception as e:
            logger.error(f"Error during database rollback: {str(e)}")

    def prepare_order_by(self, page_request: PageRequest, sort_mapping: Dict[str, object], default_column) -> list:
        """Подготовка параметров сортировки"""
        order_by = []
        for sort_order in page_request.sort:
            # Получаем колонку для сортировки
            sort_column = sort_mapping.get(sort_order.field)
            if sort_column is None:
                raise HTTPException(status_code=400, detail=f"Invalid sort field: {sort_order.field}")
            
            # Применяем направление сортировки
            if sort_order.direction == SortDirection.DESC:
                order_by.append(desc(sort_column))
            else:
                order_by.append(asc(sort_column))

        # Стабильный порядок страниц
        if not any(sort_order.field == "id" for sort_order in page_request.sort):
            order_by.append(asc(default_column))
        return order_by
