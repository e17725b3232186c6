import datetime

import pytest
from pydantic import ValidationError

from app.models.post import PostFrontmatter
from app.schemas.build import BuildConfig
from app.schemas.site import Author, SharingNetwork, SiteSocials
from tests.conftest import make_site


def test_multiple_default_authors_are_rejected():
    with pytest.raises(ValidationError, match="only one author can be the default"):
        make_site(
            authors=[
                Author(username="a", default=True, name="A"),
                Author(username="b", default=True, name="B"),
            ]
        )


def test_duplicate_usernames_are_rejected():
    with pytest.raises(ValidationError, match="duplicate author usernames: a"):
        make_site(
            authors=[
                Author(username="a", default=True, name="A"),
                Author(username="a", name="A again"),
            ]
        )


def test_empty_author_list_is_allowed():
    assert make_site(authors=[]).authors == []


def test_sharing_networks_are_limited_to_supported_values():
    socials = SiteSocials(sharing_networks=["facebook", "email", "skype"])
    assert socials.sharing_networks == [
        SharingNetwork.FACEBOOK,
        SharingNetwork.EMAIL,
        SharingNetwork.SKYPE,
    ]

    with pytest.raises(ValidationError):
        SiteSocials(sharing_networks=["myspace"])


def test_unknown_social_platform_is_rejected():
    with pytest.raises(ValidationError):
        SiteSocials(friendster="https://friendster.com")


def test_robots_rule_accepts_capitalized_keys():
    site = make_site(robots=[{"UserAgent": "*", "Allow": ["/"], "Disallow": ["/x"]}])

    assert site.robots[0].user_agent == "*"
    assert site.robots[0].disallow == ["/x"]


def test_analytics_keeps_provider_block():
    site = make_site(analytics={"provider": "pirsch", "pirsch": {"code": "abc"}})

    assert site.analytics.provider == "pirsch"
    assert site.analytics.model_dump()["pirsch"] == {"code": "abc"}


@pytest.mark.parametrize("base_url", ["gmaisse.dev/", "/gmaisse.dev", ""])
def test_build_base_url_must_be_slash_delimited(base_url):
    with pytest.raises(ValidationError):
        BuildConfig(base_url=base_url, compatibility_date=datetime.date(2024, 7, 3))


def test_frontmatter_ignores_unknown_keys():
    meta = PostFrontmatter.model_validate(
        {"title": "T", "date": "2024-07-03", "layout": "post", "hidden": True}
    )

    assert meta.date == datetime.date(2024, 7, 3)
    assert not hasattr(meta, "layout")
