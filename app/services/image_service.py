import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def get_image(image_path: str, parser) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read a static asset (logo, avatar, cover) through the public ContentParser
    """
    image_data = parser.get_binary_content({"path": image_path})

    if not image_data:
        logger.warning(f"No image data found for: {image_path}")
        return None, None

    content_type = get_content_type_from_filename(image_path)

    return image_data, content_type


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    elif filename.endswith(".ico"):
        return "image/x-icon"
    else:
        return "application/octet-stream"


def resolve_asset_url(path: Optional[str], base_url: str) -> Optional[str]:
    """
    Prefix a local asset path with the deployment base path.

    Absolute URLs are returned untouched, so covers hosted elsewhere keep working.
    """
    if not path:
        return path
    if path.startswith(("http://", "https://", "//", "data:")):
        return path
    base = base_url.rstrip("/")
    relative = path.removeprefix("./").lstrip("/")
    return f"{base}/{relative}"
