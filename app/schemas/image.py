import base64
import binascii
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ImageSize(str, Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"

    @classmethod
    def resolve(cls, value: Optional[str], default: Optional["ImageSize"] = None) -> "ImageSize":
        """
        Параметр size -> вариант размера.
        Регистр не важен; отсутствующее или неизвестное значение даёт default (LARGE).
        """
        if default is None:
            default = cls.LARGE
        if value is None:
            return default
        try:
            return cls(value.upper())
        except ValueError:
            return default


class ImageDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=255)
    hash: Optional[str] = Field(None, max_length=32)
    small: Optional[bytes] = None
    small_content_type: Optional[str] = Field(None, max_length=255)
    medium: Optional[bytes] = None
    medium_content_type: Optional[str] = Field(None, max_length=255)
    large: Optional[bytes] = None
    large_content_type: Optional[str] = Field(None, max_length=255)

    @field_validator("small", "medium", "large", mode="before")
    @classmethod
    def decode_base64(cls, value):
        # В JSON бинарные поля приходят строкой base64, из ORM - уже байтами
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except (binascii.Error, ValueError):
                raise ValueError("must be a base64 encoded string")
        return value

    @field_serializer("small", "medium", "large", when_used="json-unless-none")
    def encode_base64(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")

    @model_validator(mode="before")
    @classmethod
    def check_content_types(cls, data):
        # Проверяется только входящий JSON; записи из БД отдаются как есть.
        # Пустой blob (b"" / "") с MIME-типом допустим
        if not isinstance(data, dict):
            return data
        for size in ImageSize:
            blob_field = size.value.lower()
            type_field = f"{blob_field}_content_type"
            blob = data.get(blob_field)
            content_type = data.get(to_camel(type_field), data.get(type_field))
            if (blob is None) != (content_type is None):
                raise ValueError(f"{blob_field} and {to_camel(type_field)} must be set together")
        return data
