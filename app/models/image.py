from sqlalchemy import Column, Integer, String, LargeBinary
from app.db.base import Base

class Image(Base):
    __tablename__ = "images"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    hash = Column(String(32))
    # Три заранее подготовленных размера, каждый со своим MIME-типом
    small = Column(LargeBinary)
    small_content_type = Column(String(255))
    medium = Column(LargeBinary)
    medium_content_type = Column(String(255))
    large = Column(LargeBinary)
    large_content_type = Column(String(255))
