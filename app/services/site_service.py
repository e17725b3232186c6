import logging
from typing import List, Optional

from app.schemas.build import BuildConfig
from app.schemas.site import (
    Author,
    LayoutContext,
    MenuEntry,
    SiteConfig,
    SiteSummary,
    SocialLinks,
)
from app.services.image_service import resolve_asset_url

logger = logging.getLogger(__name__)


class AuthorNotFoundError(LookupError):
    pass


def get_default_author(site: SiteConfig) -> Optional[Author]:
    return next((author for author in site.authors if author.default), None)


def get_author(site: SiteConfig, username: str) -> Optional[Author]:
    return next((a for a in site.authors if a.username == username), None)


def resolve_author(site: SiteConfig, username: Optional[str] = None) -> Author:
    """
    Pick the author of a post: the one it names, else the default author.

    Naming an unknown author is an error rather than a silent fallback.
    """
    if username:
        author = get_author(site, username)
        if author is None:
            raise AuthorNotFoundError(f"unknown author '{username}'")
        return author

    author = get_default_author(site)
    if author is None:
        raise AuthorNotFoundError("no author given and no default author configured")
    return author


def get_menu(site: SiteConfig) -> List[MenuEntry]:
    return [MenuEntry.model_validate(entry) for entry in site.menu()]


def newsletter_enabled(site: SiteConfig) -> bool:
    newsletter = site.newsletter
    return bool(
        newsletter.enabled
        and newsletter.form_action.strip()
        and newsletter.provider.strip()
    )


def comments_enabled(site: SiteConfig) -> bool:
    return site.comments.enabled


def table_of_contents_enabled(site: SiteConfig) -> bool:
    return site.table_of_contents


def with_asset_urls(author: Author, build: BuildConfig) -> Author:
    """Copy of the author with its avatar under the deployment base path."""
    return author.model_copy(
        update={"avatar": resolve_asset_url(author.avatar, build.base_url)}
    )


def list_authors(site: SiteConfig, build: BuildConfig) -> List[Author]:
    return [with_asset_urls(author, build) for author in site.authors]


def summarize_site(site: SiteConfig, build: BuildConfig) -> SiteSummary:
    data = site.model_dump(exclude={"menu", "authors"}, by_alias=True)
    data["logo"] = resolve_asset_url(site.logo, build.base_url)
    data["avatar"] = resolve_asset_url(site.avatar, build.base_url)
    return SiteSummary(
        **data, authors=list_authors(site, build), menu=get_menu(site)
    )


def build_layout(site: SiteConfig, build: BuildConfig) -> LayoutContext:
    default_author = get_default_author(site)
    if default_author is not None:
        default_author = with_asset_urls(default_author, build)

    if site.newsletter.enabled and not newsletter_enabled(site):
        logger.warning("Newsletter is enabled but form_action or provider is empty")

    socials = SocialLinks(**site.socials.model_dump(exclude={"sharing_networks"}))

    return LayoutContext(
        name=site.name,
        description=site.description,
        url=site.url,
        theme=site.theme,
        logo=resolve_asset_url(site.logo, build.base_url),
        menu=get_menu(site),
        socials=socials,
        sharing_networks=site.socials.sharing_networks,
        default_author=default_author,
        newsletter=site.newsletter if newsletter_enabled(site) else None,
        comments=site.comments if comments_enabled(site) else None,
        table_of_contents=table_of_contents_enabled(site),
    )
