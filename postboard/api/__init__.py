from fastapi import APIRouter
from .posts import router as posts_router
from .users import router as users_router

router = APIRouter()

router.include_router(posts_router, prefix="/posts", tags=["posts"])
router.include_router(users_router, prefix="/users", tags=["users"])
