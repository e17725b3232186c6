import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import ArchiveYear, PostDetail, PostSummary
from app.services.posts_service import PostParseError, PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    category: Optional[str] = None,
    tag: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts(category=category, tag=tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug:path}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except PostParseError as e:
        logger.warning(f"Invalid post {slug}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/categories", response_model=Dict[str, int])
def list_categories(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.list_categories()
    except Exception as e:
        logger.error(f"Unexpected error listing categories: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve categories")


@router.get("/tags", response_model=Dict[str, int])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.list_tags()
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/archives", response_model=List[ArchiveYear])
def get_archives(service: PostsService = Depends(deps.get_posts_service)):
    """Posts grouped by publication year."""
    try:
        return service.archives()
    except Exception as e:
        logger.error(f"Unexpected error building archives: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve archives")
