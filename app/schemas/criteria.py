"""
Критерии фильтрации для списков сущностей.

Каждое поле критерия - необязательный фильтр; незаданный фильтр не ограничивает выборку,
заданные фильтры объединяются через AND. В query string фильтр задается как
<поле>.<операция>=значение, например name.contains=logo или id.in=1,2.
"""
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy import func

LIST_OPERATIONS = ("in",)


class BaseFilter(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="forbid")

    def to_conditions(self, column) -> list:
        """Условия SQLAlchemy для заданных операций фильтра"""
        conditions = []
        if self.equals is not None:
            conditions.append(column == self.equals)
        if self.not_equals is not None:
            conditions.append(column != self.not_equals)
        if self.in_ is not None:
            conditions.append(column.in_(self.in_))
        if self.specified is not None:
            conditions.append(column.is_not(None) if self.specified else column.is_(None))
        return conditions


class LongFilter(BaseFilter):
    equals: Optional[int] = None
    not_equals: Optional[int] = None
    in_: Optional[List[int]] = Field(None, alias="in")
    specified: Optional[bool] = None
    greater_than: Optional[int] = None
    less_than: Optional[int] = None
    greater_than_or_equal: Optional[int] = Field(None, alias="greaterOrEqualThan")
    less_than_or_equal: Optional[int] = Field(None, alias="lessOrEqualThan")

    def to_conditions(self, column) -> list:
        conditions = super().to_conditions(column)
        if self.greater_than is not None:
            conditions.append(column > self.greater_than)
        if self.less_than is not None:
            conditions.append(column < self.less_than)
        if self.greater_than_or_equal is not None:
            conditions.append(column >= self.greater_than_or_equal)
        if self.less_than_or_equal is not None:
            conditions.append(column <= self.less_than_or_equal)
        return conditions


class StringFilter(BaseFilter):
    equals: Optional[str] = None
    not_equals: Optional[str] = None
    in_: Optional[List[str]] = Field(None, alias="in")
    specified: Optional[bool] = None
    contains: Optional[str] = None

    def to_conditions(self, column) -> list:
        conditions = super().to_conditions(column)
        if self.contains is not None:
            # contains без учета регистра
            conditions.append(func.upper(column).contains(self.contains.upper(), autoescape=True))
        return conditions


class Criteria(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_query_params(cls, query_params: Iterable[Tuple[str, str]]):
        """Сборка критерия из пар query string; параметры без точки (page, size, sort) пропускаются"""
        data = {}
        for key, value in query_params:
            if "." not in key:
                continue
            field_name, operation = key.split(".", 1)
            if field_name not in cls.model_fields:
                continue
            filter_data = data.setdefault(field_name, {})
            if operation in LIST_OPERATIONS:
                values = filter_data.setdefault(operation, [])
                values.extend(item.strip() for item in value.split(",") if item.strip())
            else:
                filter_data[operation] = value
        return cls.model_validate(data)


class ImageCriteria(Criteria):
    id: Optional[LongFilter] = None
    name: Optional[StringFilter] = None
    hash: Optional[StringFilter] = None
