from sqlalchemy import Column, DateTime, Float, Integer, String, func

from database import Base


class Media(Base):
    __tablename__ = "media"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(512), nullable=False, unique=True)
    url = Column(String(512), nullable=False)
    alt = Column(String(512), nullable=True)
    label = Column(String(256), nullable=True)
    mime_type = Column(String(128), nullable=False)
    filesize = Column(Integer, nullable=True)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    focal_x = Column(Float, nullable=True)
    focal_y = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
