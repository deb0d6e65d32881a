import logging

from fastapi import APIRouter, HTTPException, Depends, Query, status
from sqlalchemy.orm import Session

from .. import database, models
from ..schemas import (
    LikeRequest,
    MessageEnvelope,
    PostCreate,
    PostEnvelope,
    PostListEnvelope,
    PostOut,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_post_or_404(db: Session, post_id: str) -> models.Post:
    post = db.query(models.Post).filter(models.Post.id == post_id).first()
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


def lock_post_query(db: Session, post_id: str):
    # Trava a linha: curtidas simultâneas no mesmo post não podem se sobrescrever.
    return db.query(models.Post).filter(models.Post.id == post_id).with_for_update()


@router.get("", response_model=PostListEnvelope)
def list_posts(db: Session = Depends(database.get_db)):
    """
    Retorna todos os posts, do mais recente ao mais antigo
    """
    posts = db.query(models.Post)\
        .order_by(models.Post.created_at.desc())\
        .all()
    return PostListEnvelope(success=True, data=[PostOut.model_validate(p) for p in posts])


@router.post("", response_model=PostEnvelope, status_code=status.HTTP_201_CREATED)
def create_post(post: PostCreate, db: Session = Depends(database.get_db)):
    user = db.query(models.User).filter(models.User.id == post.user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    db_post = models.Post(
        user_id=post.user_id,
        title=post.title,
        caption=post.caption,
        image=post.image,
        likes=[],
        likes_count=0,
    )
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    logger.info("Post %s created by user %s", db_post.id, post.user_id)
    return PostEnvelope(success=True, data=PostOut.model_validate(db_post), message="Post created")


@router.get("/{post_id}", response_model=PostEnvelope)
def get_post(post_id: str, db: Session = Depends(database.get_db)):
    post = get_post_or_404(db, post_id)
    return PostEnvelope(success=True, data=PostOut.model_validate(post))


@router.put("/{post_id}/like", response_model=PostEnvelope)
def toggle_like(post_id: str, like: LikeRequest, db: Session = Depends(database.get_db)):
    post = lock_post_query(db, post_id).first()
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    user = db.query(models.User).filter(models.User.id == like.user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    liked = post.toggle_like(like.user_id)
    db.commit()
    db.refresh(post)
    return PostEnvelope(
        success=True,
        data=PostOut.model_validate(post),
        message="Post liked" if liked else "Post unliked",
    )


@router.delete("/{post_id}", response_model=MessageEnvelope)
def delete_post(post_id: str, user_id: str = Query(..., alias="userId"),
                db: Session = Depends(database.get_db)):
    post = get_post_or_404(db, post_id)
    if post.user_id != user_id:
        raise HTTPException(status_code=403, detail="You can only delete your own posts")

    db.delete(post)
    db.commit()
    logger.info("Post %s deleted by user %s", post_id, user_id)
    return MessageEnvelope(success=True, message="Post deleted")
