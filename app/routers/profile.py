# 프로필 API: 내 정보 + 내 지점, 내 댓글

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.crud.comment_crud import list_comments_by_user
from app.crud.point_crud import list_points_by_owner
from app.crud.user_crud import get_user
from app.database import get_db
from app.errors import NotFoundError
from app.routers.points import points_to_response
from app.schemas.auth import TokenClaims, UserPublic
from app.schemas.comment import UserCommentResponse
from app.schemas.profile import ProfileResponse
from app.services.auth_service import get_current_user

router = APIRouter(tags=["Profile"])


@router.get("/me", response_model=ProfileResponse)
def get_me(
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> ProfileResponse:
    """토큰 발급 이후 사용자가 사라졌으면 빈 결과가 아니라 404."""
    user = get_user(db, current_user.user_id)
    if user is None:
        raise NotFoundError("User not found")
    points = list_points_by_owner(db, user.id)
    return ProfileResponse(
        user=UserPublic.model_validate(user),
        points=points_to_response(db, points),
    )


@router.get("/mis-comentarios", response_model=List[UserCommentResponse])
def get_my_comments(
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> List[UserCommentResponse]:
    return [
        UserCommentResponse(
            id=c.id,
            point_id=c.point_id,
            user_id=c.user_id,
            body=c.body,
            rating=c.rating,
            created_at=c.created_at,
            point_name=c.point.name,
        )
        for c in list_comments_by_user(db, current_user.user_id)
    ]
