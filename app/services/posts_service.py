import logging
import math
from collections import Counter
from typing import Dict, List, Optional

import frontmatter
from pydantic import ValidationError

from app.models.post import PostFrontmatter
from app.schemas.blog import ArchiveYear, PostDetail, PostSummary
from app.schemas.build import BuildConfig
from app.schemas.site import SiteConfig
from app.services.image_service import resolve_asset_url
from app.services.site_service import AuthorNotFoundError, resolve_author

logger = logging.getLogger(__name__)


class PostParseError(ValueError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class PostsService:
    def __init__(
        self, repo, parser, site: SiteConfig, build: BuildConfig, strict=False
    ):
        self.repo = repo
        self.parser = parser
        self.site = site
        self.build = build
        self.strict = strict

    def list_posts(
        self, category: Optional[str] = None, tag: Optional[str] = None
    ) -> List[PostSummary]:
        posts = []
        for doc in self.repo.list_blog_docs():
            slug = self.repo.slug_for(doc)
            try:
                post_data = parse_post_data(
                    doc,
                    slug,
                    include_content=False,
                    parser=self.parser,
                    site=self.site,
                    build=self.build,
                )
            except PostParseError as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping post: {e}")
                continue
            if post_data:
                posts.append(post_data)

        if category:
            posts = [p for p in posts if category in p["categories"]]
        if tag:
            posts = [p for p in posts if tag in p["tags"]]

        posts.sort(key=lambda p: p["slug"])
        posts.sort(key=lambda p: p["date"], reverse=True)
        return [PostSummary(**p) for p in posts]

    def get_post(self, slug: str) -> Optional[PostDetail]:
        doc = self.repo.get_blog_doc(slug)
        if not doc:
            return None
        post_data = parse_post_data(
            doc,
            slug,
            include_content=True,
            parser=self.parser,
            site=self.site,
            build=self.build,
        )
        if not post_data:
            return None
        return PostDetail(**post_data)

    def list_categories(self) -> Dict[str, int]:
        return _count_terms(p.categories for p in self.list_posts())

    def list_tags(self) -> Dict[str, int]:
        return _count_terms(p.tags for p in self.list_posts())

    def archives(self) -> List[ArchiveYear]:
        by_year: Dict[int, List[PostSummary]] = {}
        for post in self.list_posts():
            year = int(post.date[:4])
            by_year.setdefault(year, []).append(post)
        return [
            ArchiveYear(year=year, posts=by_year[year])
            for year in sorted(by_year, reverse=True)
        ]


def parse_post_data(
    doc: dict,
    slug: str,
    include_content: bool = False,
    *,
    parser,
    site: SiteConfig,
    build: BuildConfig,
) -> Optional[dict]:
    """Parse frontmatter and return standardized post data"""
    path = doc.get("path") or doc.get("_id", slug)

    markdown = parser.get_markdown_content(doc)
    if not markdown:
        logger.warning(f"No markdown content found for post {path}")
        return None

    try:
        parsed = frontmatter.loads(markdown)
    except Exception as e:
        # python-frontmatter surfaces yaml errors untouched
        raise PostParseError(path, f"unreadable frontmatter ({e})")

    try:
        meta = PostFrontmatter.model_validate(parsed.metadata or {})
    except ValidationError as e:
        raise PostParseError(path, _describe_errors(e))

    try:
        author = resolve_author(site, meta.author)
    except AuthorNotFoundError as e:
        raise PostParseError(path, str(e))

    post_data = {
        "id": doc.get("_id", path),
        "slug": slug,
        "title": meta.title,
        "description": meta.description,
        "date": meta.date.isoformat(),
        "categories": meta.categories,
        "tags": meta.tags,
        "cover": resolve_asset_url(meta.cover, build.base_url),
        "author": author.username,
        "readingTime": calculate_reading_time(parsed.content),
        "draft": meta.draft,
    }

    if include_content:
        post_data["content"] = parsed.content

    return post_data


def _describe_errors(error: ValidationError) -> str:
    reasons = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "frontmatter"
        if err["type"] == "missing":
            reasons.append(f"missing required key '{field}'")
        else:
            reasons.append(f"invalid '{field}': {err['msg']}")
    return "; ".join(reasons)


def _count_terms(groups) -> Dict[str, int]:
    counts = Counter(term for terms in groups for term in terms)
    return dict(sorted(counts.items()))


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
