# 댓글/평점 작성·조회·삭제 API

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.crud.comment_crud import create_comment, delete_comment, list_comments_for_point
from app.database import get_db
from app.errors import EcoMapError
from app.models.comment import Comment
from app.schemas.auth import TokenClaims
from app.schemas.comment import CommentCreate, CommentCreated, CommentDeleted, CommentResponse
from app.services.auth_service import get_current_user

router = APIRouter(prefix="/comentarios", tags=["Comments"])


def comment_to_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        point_id=comment.point_id,
        user_id=comment.user_id,
        body=comment.body,
        rating=comment.rating,
        created_at=comment.created_at,
        author_name=comment.author.name,
    )


@router.get("/{point_id}", response_model=List[CommentResponse])
def get_point_comments(point_id: int, db: Session = Depends(get_db)) -> List[CommentResponse]:
    """지점의 댓글 최신순. 지점이 없으면 404."""
    return [comment_to_response(c) for c in list_comments_for_point(db, point_id)]


@router.post("", response_model=CommentCreated, status_code=201)
def post_comment(
    body: CommentCreate,
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> CommentCreated:
    """댓글 작성. 응답에 방금 작성분까지 반영된 평점 집계 포함."""
    try:
        comment, summary = create_comment(
            db,
            author_id=current_user.user_id,
            point_id=body.point_id,
            rating=body.rating,
            body=body.body,
        )
        response = CommentCreated(comment=comment_to_response(comment), rating=summary)
        db.commit()  # ✅ 트랜잭션 소유권: 라우터
    except EcoMapError:
        db.rollback()
        raise
    return response


@router.delete("/{comment_id}", response_model=CommentDeleted)
def delete_comment_route(
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: TokenClaims = Depends(get_current_user),
) -> CommentDeleted:
    """본인 댓글 삭제. 삭제 후 해당 지점의 평점 집계 반환."""
    try:
        point_id, summary = delete_comment(db, comment_id, current_user.user_id)
        db.commit()
    except EcoMapError:
        db.rollback()
        raise
    return CommentDeleted(message="Comment deleted", point_id=point_id, rating=summary)
