# Comment 모델: 지점에 대한 댓글 + 평점

from sqlalchemy import CheckConstraint, Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.models.base import Base

RATING_MIN = 1
RATING_MAX = 5


class Comment(Base):
    """댓글 테이블. calificacion은 항상 1~5 (DB CHECK 제약으로도 보장)."""

    __tablename__ = "comentarios"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column("usuario_id", Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    point_id = Column("punto_id", Integer, ForeignKey("puntos_reciclaje.id", ondelete="CASCADE"), nullable=False, index=True)
    body = Column("comentario", Text, nullable=True)
    rating = Column("calificacion", Integer, nullable=False)
    created_at = Column("creado_en", DateTime(timezone=True), server_default=func.now())

    author = relationship("User", back_populates="comments")
    point = relationship("RecyclingPoint", back_populates="comments")

    __table_args__ = (
        CheckConstraint(
            f"calificacion BETWEEN {RATING_MIN} AND {RATING_MAX}",
            name="ck_comentarios_calificacion_rango",
        ),
    )
