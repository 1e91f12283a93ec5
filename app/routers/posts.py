import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from app import dependencies as deps
from app.schemas.blog import PostCreate, PostOut, PostUpdate
from app.services.posts_service import PostNotFoundError, PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=List[PostOut])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/{post_id}", response_model=PostOut)
def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by id."""
    try:
        return service.get_post(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.post("", response_model=PostOut, status_code=201)
def create_post(
    payload: PostCreate,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        return service.create_post(payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating post: {e}")
        raise HTTPException(status_code=500, detail="Failed to create post")


@router.put("/{post_id}", response_model=PostOut, status_code=201)
def update_post(
    post_id: str,
    payload: PostUpdate,
    service: PostsService = Depends(deps.get_posts_service),
):
    if payload.id is not None and payload.id != post_id:
        logger.warning(f"Path id {post_id} does not match body id {payload.id}")
        raise HTTPException(
            status_code=400,
            detail="Request path id and request body id values must match",
        )

    try:
        return service.update_post(post_id, payload)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error updating post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update post")


@router.delete("/{post_id}", status_code=204)
def delete_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Delete a post. Unknown ids are treated as already deleted."""
    try:
        service.delete_post(post_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error deleting post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete post")
    return Response(status_code=204)
