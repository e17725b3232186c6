import logging
import sys

from app.repos.posts_repo import FilesystemPostsRepo
from app.services.content_parser import ContentParser
from app.services.validation import IssueLevel, run_checks
from app.settings import settings
from app.site_config import build_config, site_config

logger = logging.getLogger(__name__)


def main() -> int:
    repo = FilesystemPostsRepo(settings.content_path, settings.BLOG_PREFIX)
    parser = ContentParser(settings.content_path)

    report = run_checks(repo, parser, site_config, build_config)
    for issue in report.issues:
        log = logger.error if issue.level == IssueLevel.ERROR else logger.warning
        log(str(issue))

    if not report.ok:
        logger.error(f"Content check failed with {len(report.errors)} error(s)")
        return 1
    logger.info("Content check passed")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())
