from typing import Iterable, Optional

from app.schemas.site import RobotsRule


def render_robots(rules: Iterable[RobotsRule], sitemap: Optional[str] = None) -> str:
    """Render robots directives as a robots.txt body."""
    groups = []
    for rule in rules:
        lines = [f"User-agent: {rule.user_agent}"]
        lines += [f"Allow: {path}" for path in rule.allow]
        lines += [f"Disallow: {path}" for path in rule.disallow]
        groups.append("\n".join(lines))

    body = "\n\n".join(groups)
    if sitemap:
        body = f"{body}\n\nSitemap: {sitemap}" if body else f"Sitemap: {sitemap}"
    return f"{body}\n" if body else ""
