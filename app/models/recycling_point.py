# RecyclingPoint 모델: 재활용 수거 지점

from sqlalchemy import Column, Float, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.models.base import Base


class RecyclingPoint(Base):
    """재활용 지점 테이블. 소유자(usuario_id)는 생성 후 바뀌지 않음."""

    __tablename__ = "puntos_reciclaje"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column("usuario_id", Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column("nombre", String(150), nullable=False)
    waste_type = Column("tipo_residuo", String(100), nullable=False)  # 자유 텍스트 (예: Vidrio, Papel)
    address = Column("direccion", Text, nullable=True)
    lat = Column(Float, nullable=True)  # WGS84
    lon = Column(Float, nullable=True)
    created_at = Column("creado_en", DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="points")
    # 지점 삭제 시 댓글은 DB의 ON DELETE CASCADE로 정리 (ORM은 개입하지 않음)
    comments = relationship(
        "Comment",
        back_populates="point",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
