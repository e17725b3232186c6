from fastapi import Depends

from app.repos.posts_repo import FilesystemPostsRepo
from app.services.content_parser import ContentParser
from app.services.posts_service import PostsService
from app.settings import settings
from app.site_config import build_config, site_config


def get_site_config():
    return site_config


def get_build_config():
    return build_config


def get_content_parser():
    return ContentParser(settings.content_path)


def get_public_parser():
    return ContentParser(settings.public_path)


def get_posts_repo():
    return FilesystemPostsRepo(settings.content_path, settings.BLOG_PREFIX)


def get_posts_service(
    repo=Depends(get_posts_repo),
    parser=Depends(get_content_parser),
    site=Depends(get_site_config),
    build=Depends(get_build_config),
):
    return PostsService(
        repo=repo,
        parser=parser,
        site=site,
        build=build,
        strict=settings.STRICT_CONTENT,
    )
