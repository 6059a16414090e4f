from typing import List, Optional
import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SkillDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: int
    title: Optional[str] = None


class TrainingDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True, alias_generator=to_camel)

    id: Optional[int] = None
    title: str = Field(min_length=1, max_length=80)
    description: Optional[str] = Field(None, max_length=4096)
    contact: Optional[str] = Field(None, max_length=255)
    link: Optional[str] = Field(None, max_length=255)
    valid_until: Optional[datetime.datetime] = None
    is_official: bool = False
    suggested_by: Optional[str] = Field(None, max_length=255)
    skills: List[SkillDTO] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, training, include_skills: bool = True) -> "TrainingDTO":
        """
        Сборка DTO из сущности.
        При include_skills=False связь skills не трогается (в async-сессии она не загружена).
        """
        skills = [SkillDTO.model_validate(skill) for skill in training.skills] if include_skills else []
        return cls(
            id=training.id,
            title=training.title,
            description=training.description,
            contact=training.contact,
            link=training.link,
            valid_until=training.valid_until,
            is_official=bool(training.is_official),
            suggested_by=training.suggested_by,
            skills=skills,
        )
