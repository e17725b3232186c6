"""Integrity checks run before a build.

Every problem is collected into one report instead of stopping at the first.
"""

import logging
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from app.schemas.build import BuildConfig
from app.schemas.site import SiteConfig
from app.services.posts_service import PostParseError, parse_post_data
from app.services.site_service import get_default_author, get_menu

logger = logging.getLogger(__name__)

SITE_SOURCE = "site_config"


class IssueLevel(str, Enum):
    WARNING = "warning"
    ERROR = "error"


class Issue(BaseModel):
    level: IssueLevel
    source: str
    message: str

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.source}: {self.message}"


class ContentReport(BaseModel):
    issues: List[Issue] = Field(default_factory=list)
    checked_posts: int = 0

    @property
    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.level == IssueLevel.ERROR]

    @property
    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.level == IssueLevel.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, level: IssueLevel, source: str, message: str) -> None:
        self.issues.append(Issue(level=level, source=source, message=message))


def check_site(site: SiteConfig, report: ContentReport | None = None) -> ContentReport:
    report = report or ContentReport()

    if site.authors and get_default_author(site) is None:
        report.add(
            IssueLevel.WARNING,
            SITE_SOURCE,
            "no default author: every post must name its author",
        )

    newsletter = site.newsletter
    if newsletter.enabled and not (
        newsletter.form_action.strip() and newsletter.provider.strip()
    ):
        report.add(
            IssueLevel.ERROR,
            SITE_SOURCE,
            "newsletter is enabled but form_action or provider is empty",
        )

    if site.comments.enabled and site.comments.hyvor_talk is None:
        report.add(
            IssueLevel.WARNING,
            SITE_SOURCE,
            "comments are enabled but no comments provider is configured",
        )

    try:
        menu = get_menu(site)
    except Exception as e:
        report.add(IssueLevel.ERROR, SITE_SOURCE, f"menu could not be built: {e}")
        menu = []

    seen = set()
    for entry in menu:
        if not entry.path.startswith("/"):
            report.add(
                IssueLevel.ERROR,
                SITE_SOURCE,
                f"menu entry '{entry.name}' has a relative path '{entry.path}'",
            )
        if entry.path in seen:
            report.add(
                IssueLevel.WARNING,
                SITE_SOURCE,
                f"menu path '{entry.path}' appears more than once",
            )
        seen.add(entry.path)

    return report


def check_posts(
    repo,
    parser,
    site: SiteConfig,
    build: BuildConfig,
    report: ContentReport | None = None,
) -> ContentReport:
    report = report or ContentReport()

    for doc in repo.list_blog_docs():
        path = doc.get("path") or doc.get("_id")
        report.checked_posts += 1
        try:
            post_data = parse_post_data(
                doc, repo.slug_for(doc), parser=parser, site=site, build=build
            )
        except PostParseError as e:
            report.add(IssueLevel.ERROR, e.path, e.reason)
            continue
        if post_data is None:
            report.add(IssueLevel.ERROR, path, "file is empty or unreadable")

    return report


def run_checks(repo, parser, site: SiteConfig, build: BuildConfig) -> ContentReport:
    report = check_site(site)
    check_posts(repo, parser, site, build, report=report)
    logger.info(
        f"Checked site config and {report.checked_posts} posts: "
        f"{len(report.errors)} errors, {len(report.warnings)} warnings"
    )
    return report
