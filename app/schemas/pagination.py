import math
from enum import Enum
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

from app.core.config import settings

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, value: str) -> "SortOrder":
        """Разбор параметра sort вида "name" или "name,desc" """
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            raise ValueError("Empty sort parameter")
        if len(parts) == 1:
            return cls(field=parts[0])
        if len(parts) == 2:
            return cls(field=parts[0], direction=SortDirection(parts[1].lower()))
        raise ValueError(f"Invalid sort parameter: {value}")


class PageRequest(BaseModel):
    page: int = Field(0, ge=0, description="Номер страницы (с нуля)")
    size: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы")
    sort: List[SortOrder] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0
