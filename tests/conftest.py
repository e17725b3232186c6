import datetime
import textwrap

import pytest

from app.schemas.build import BuildConfig
from app.schemas.site import Author, MenuEntry, Newsletter, SiteConfig


def make_site(**overrides) -> SiteConfig:
    """Small but complete site configuration for tests."""
    data = dict(
        logo="/images/logo.svg",
        url="https://example.test/blog/",
        theme="mistral",
        name="example.test",
        description="A test blog",
        socials={"github": "https://github.com", "sharing_networks": ["twitter"]},
        newsletter=Newsletter(
            enabled=True,
            form_action="rssfeedpulse",
            provider="https://rssfeedpulse.test/subscribe",
        ),
        authors=[
            Author(username="gmaisse", default=True, name="Gaetan Maisse"),
            Author(username="guest", name="Guest Writer", avatar="/images/guest.png"),
        ],
        menu=lambda: [
            MenuEntry(name="Home", path="/"),
            MenuEntry(name="Archives", path="/archives"),
        ],
        robots=[{"UserAgent": "*", "Allow": ["/"]}],
    )
    data.update(overrides)
    return SiteConfig(**data)


def make_build(**overrides) -> BuildConfig:
    data = dict(
        extends=["@bloggrify/core", "@bloggrify/mistral"],
        base_url="/blog/",
        compatibility_date=datetime.date(2024, 7, 3),
    )
    data.update(overrides)
    return BuildConfig(**data)


@pytest.fixture
def site():
    return make_site()


@pytest.fixture
def build():
    return make_build()


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, docs, prefix="blog/"):
        self.docs = docs
        self.prefix = prefix

    def list_blog_docs(self):
        return list(self.docs)

    def get_blog_doc(self, slug):
        doc_id = f"{self.prefix}{slug}.md"
        for doc in self.docs:
            if doc.get("_id") == doc_id or doc.get("path") == doc_id:
                return doc
        return None

    def slug_for(self, doc):
        return doc.get("path", "").removeprefix(self.prefix).removesuffix(".md")


def blog_doc(name: str) -> dict:
    return {"_id": f"blog/{name}.md", "path": f"blog/{name}.md"}


class FakeParser:
    """
    Minimal markdown/content parser stand-in.
    """

    def __init__(self, content_by_id: dict[str, str]):
        self.content_by_id = content_by_id

    def get_markdown_content(self, doc: dict) -> str | None:
        raw = self.content_by_id.get(doc.get("_id"))
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        categories=None,
        tags=None,
        archives=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._categories = categories or {}
        self._tags = tags or {}
        self._archives = archives or []
        self.list_calls = []

    def list_posts(self, category=None, tag=None):
        self.list_calls.append({"category": category, "tag": tag})
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return

    def list_categories(self):
        return self._categories

    def list_tags(self):
        return self._tags

    def archives(self):
        return self._archives
