import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from app.routers import images, posts, site
from app.security import get_api_key
from app.services.validation import check_site
from app.settings import settings
from app.site_config import site_config

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="gmaisse.dev API", description="Posts and site configuration")


@asynccontextmanager
async def lifespan(app: FastAPI):
    report = check_site(site_config)
    for issue in report.issues:
        logger.warning(str(issue))
    if not report.ok:
        raise RuntimeError(
            f"Site configuration has {len(report.errors)} error(s), refusing to start"
        )
    logger.info(f"Serving content from {settings.CONTENT_DIR}")

    yield


app.router.lifespan_context = lifespan

app.include_router(images.router)
app.include_router(site.public_router)
app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(site.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "gmaisse.dev API is running"}
