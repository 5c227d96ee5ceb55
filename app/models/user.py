# User 모델

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.models.base import Base


class User(Base):
    """사용자 테이블. 비밀번호는 bcrypt 해시만 저장."""

    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    name = Column("nombre", String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column("password", String(255), nullable=False)
    created_at = Column("creado_en", DateTime(timezone=True), server_default=func.now())

    points = relationship("RecyclingPoint", back_populates="owner")
    comments = relationship("Comment", back_populates="author")
