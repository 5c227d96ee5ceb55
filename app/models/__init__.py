# 모델 import 시 메타데이터(Base.metadata)에 모든 테이블이 등록되도록 함

from app.models.base import Base
from app.models.user import User
from app.models.recycling_point import RecyclingPoint
from app.models.comment import Comment

__all__ = ["Base", "User", "RecyclingPoint", "Comment"]
