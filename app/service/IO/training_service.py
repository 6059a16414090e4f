from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
import logging

from app.core.exceptions import BadRequestAlertException
from app.models.skill import Skill
from app.models.training import Training
from app.schemas.pagination import Page, PageRequest
from app.schemas.training import SkillDTO, TrainingDTO
from app.service.IO.base_service import BaseService

logger = logging.getLogger(__name__)

ENTITY_NAME = "training"

SORT_MAPPING = {
    "id": Training.id,
    "title": Training.title,
    "contact": Training.contact,
    "validUntil": Training.valid_until,
    "isOfficial": Training.is_official,
    "suggestedBy": Training.suggested_by,
}


class TrainingService(ABC):
    """Контракт сервиса тренингов"""

    @abstractmethod
    async def save(self, training_dto: TrainingDTO) -> TrainingDTO:
        """Сохранение тренинга; новому тренингу назначается id"""

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page[TrainingDTO]:
        """Страница тренингов без загрузки связей many-to-many"""

    @abstractmethod
    async def find_all_with_eager_relationships(self, page_request: PageRequest) -> Page[TrainingDTO]:
        """Страница тренингов с загруженными связями many-to-many"""

    @abstractmethod
    async def find_one(self, training_id: int) -> Optional[TrainingDTO]:
        """Тренинг по id или None"""

    @abstractmethod
    async def delete(self, training_id: int) -> None:
        """Идемпотентное удаление тренинга"""


class SqlTrainingService(BaseService, TrainingService):
    """Реализация TrainingService поверх SQLAlchemy"""

    async def _resolve_skills(self, skill_dtos: List[SkillDTO]) -> List[Skill]:
        skill_ids = {skill.id for skill in skill_dtos}
        if not skill_ids:
            return []
        result = await self.db.execute(select(Skill).where(Skill.id.in_(skill_ids)))
        skills = list(result.scalars().all())
        if len(skills) != len(skill_ids):
            missing = sorted(skill_ids - {skill.id for skill in skills})
            raise BadRequestAlertException(f"Unknown skills: {missing}", ENTITY_NAME, "skillnotfound")
        return skills

    async def save(self, training_dto: TrainingDTO) -> TrainingDTO:
        skills = await self._resolve_skills(training_dto.skills)
        try:
            if training_dto.id is None:
                training = Training()
                self.db.add(training)
            else:
                result = await self.db.execute(
                    select(Training)
                    .options(selectinload(Training.skills))
                    .where(Training.id == training_dto.id)
                )
                training = result.scalar_one()

            for key, value in training_dto.model_dump(exclude={"id", "skills"}).items():
                setattr(training, key, value)
            training.skills = skills

            # refresh не вызываем: он сбрасывает загруженную связь skills
            await self.db.commit()
            logger.info(f"Saved training: {training.id} - {training.title}")
            return TrainingDTO.from_entity(training)
        except SQLAlchemyError as e:
            await self.rollback_db()
            logger.error(f"Error saving training '{training_dto.title}': {str(e)}")
            raise

    async def _find_page(self, page_request: PageRequest, eager: bool) -> Page[TrainingDTO]:
        # Подсчет общего количества
        count_result = await self.db.execute(select(func.count(Training.id)))
        total_count = count_result.scalar()

        trainings_query = select(Training)\
            .order_by(*self.prepare_order_by(page_request, SORT_MAPPING, Training.id))\
            .offset(page_request.offset)\
            .limit(page_request.size)
        if eager:
            trainings_query = trainings_query.options(selectinload(Training.skills))

        trainings_result = await self.db.execute(trainings_query)
        trainings = trainings_result.scalars().all()

        return Page[TrainingDTO](
            items=[TrainingDTO.from_entity(training, include_skills=eager) for training in trainings],
            total=total_count,
            page=page_request.page,
            size=page_request.size
        )

    async def find_all(self, page_request: PageRequest) -> Page[TrainingDTO]:
        logger.debug("Request to get all Trainings")
        return await self._find_page(page_request, eager=False)

    async def find_all_with_eager_relationships(self, page_request: PageRequest) -> Page[TrainingDTO]:
        logger.debug("Request to get all Trainings with eager relationships")
        return await self._find_page(page_request, eager=True)

    async def find_one(self, training_id: int) -> Optional[TrainingDTO]:
        logger.debug(f"Request to get Training : {training_id}")
        result = await self.db.execute(
            select(Training)
            .options(selectinload(Training.skills))
            .where(Training.id == training_id)
        )
        training = result.scalar_one_or_none()
        return TrainingDTO.from_entity(training) if training else None

    async def delete(self, training_id: int) -> None:
        try:
            result = await self.db.execute(
                select(Training)
                .options(selectinload(Training.skills))
                .where(Training.id == training_id)
            )
            training = result.scalar_one_or_none()
            if training is None:
                return
            # Удаление через ORM чистит и таблицу связей training_skill
            await self.db.delete(training)
            await self.db.commit()
            logger.info(f"Deleted training: {training_id}")
        except SQLAlchemyError as e:
            await self.rollback_db()
            logger.error(f"Error deleting training {training_id}: {str(e)}")
            raise
