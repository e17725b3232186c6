import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from app import dependencies as deps
from app.schemas.build import BuildConfig
from app.schemas.site import Author, LayoutContext, SiteSummary
from app.services import site_service
from app.services.robots import render_robots

logger = logging.getLogger(__name__)

router = APIRouter()

# served without the API key
public_router = APIRouter()


@router.get("/site", response_model=SiteSummary)
def get_site(
    site=Depends(deps.get_site_config),
    build=Depends(deps.get_build_config),
):
    """Site configuration with the menu evaluated."""
    return site_service.summarize_site(site, build)


@router.get("/build", response_model=BuildConfig)
def get_build(build=Depends(deps.get_build_config)):
    return build


@router.get("/authors", response_model=List[Author])
def list_authors(
    site=Depends(deps.get_site_config),
    build=Depends(deps.get_build_config),
):
    return site_service.list_authors(site, build)


@router.get("/authors/{username}", response_model=Author)
def get_author(
    username: str,
    site=Depends(deps.get_site_config),
    build=Depends(deps.get_build_config),
):
    author = site_service.get_author(site, username)
    if author is None:
        raise HTTPException(status_code=404, detail="Author not found")
    return site_service.with_asset_urls(author, build)


@router.get("/layout", response_model=LayoutContext)
def get_layout(
    site=Depends(deps.get_site_config),
    build=Depends(deps.get_build_config),
):
    """Everything the page chrome needs: menu, socials, feature blocks."""
    return site_service.build_layout(site, build)


@public_router.get("/robots.txt", response_class=PlainTextResponse)
def get_robots(site=Depends(deps.get_site_config)):
    sitemap = f"{site.url.rstrip('/')}/sitemap.xml" if site.url else None
    return render_robots(site.robots, sitemap=sitemap)
