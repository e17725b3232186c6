import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app import dependencies as deps
from app.services.image_service import get_image

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/images/{image_path:path}")
async def get_image_route(image_path: str, parser=Depends(deps.get_public_parser)):
    """
    Serve images from the public directory
    """
    image_data, content_type = get_image(f"images/{image_path}", parser=parser)

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    # Set proper content length header
    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
