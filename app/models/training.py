from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from app.db.base import Base
from app.models.skill import Skill

training_skill = Table(
    "training_skill",
    Base.metadata,
    Column("trainings_id", Integer, ForeignKey("trainings.id", ondelete="CASCADE"), primary_key=True),
    Column("skills_id", Integer, ForeignKey("skills.id", ondelete="CASCADE"), primary_key=True),
)

class Training(Base):
    __tablename__ = "trainings"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(80), nullable=False)
    description = Column(String(4096))
    contact = Column(String(255))
    link = Column(String(255))
    valid_until = Column(DateTime(timezone=True))
    is_official = Column(Boolean, nullable=False, default=False)
    suggested_by = Column(String(255))

    # Ленивая связь: в async-сессии её нужно подгружать явно (selectinload)
    skills = relationship(Skill, secondary=training_skill)
