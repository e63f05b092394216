# kforum/routes/posts.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from kforum.models.post_model import PostCategory
from kforum.schemas.post_schema import (
    CommentCreateRequest,
    CommentResponse,
    CreatePostResponse,
    PostCreateRequest,
    PostResponse,
    ReactionRequest,
    ReactionResponse,
)
from kforum.controllers.post_controller import (
    add_comment,
    create_post,
    get_post,
    list_comments,
    list_posts,
    react_to_post,
)
from kforum.utils.auth_utils import get_current_user

router = APIRouter(prefix="/posts", tags=["Posts"])


# Unsafe posts are stored as PENDING_REVIEW and only the author sees them until approved
@router.post("", response_model=CreatePostResponse, status_code=201, summary="Create a post")
async def create(data: PostCreateRequest, current_user: dict = Depends(get_current_user)):
    return await create_post(data, current_user)


@router.get("", response_model=List[PostResponse], summary="Published posts, newest first")
async def feed(
    category: Optional[PostCategory] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
):
    return await list_posts(current_user, category, skip, limit)


@router.get("/{post_id}", response_model=PostResponse, summary="Get a post")
async def read(post_id: str, current_user: dict = Depends(get_current_user)):
    return await get_post(post_id, current_user)


@router.post("/{post_id}/react", response_model=ReactionResponse, summary="Toggle or change a reaction")
async def react(post_id: str, body: ReactionRequest, current_user: dict = Depends(get_current_user)):
    return await react_to_post(post_id, body.type, current_user)


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=201, summary="Comment on a post")
async def comment(post_id: str, body: CommentCreateRequest, current_user: dict = Depends(get_current_user)):
    return await add_comment(post_id, body, current_user)


@router.get("/{post_id}/comments", response_model=List[CommentResponse], summary="Published comments")
async def comments(
    post_id: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
):
    return await list_comments(post_id, skip, limit)
