import datetime

from app.schemas.build import BuildConfig
from app.schemas.site import (
    Author,
    Comments,
    MenuEntry,
    Newsletter,
    RobotsRule,
    SiteConfig,
    SiteSocials,
    SocialLinks,
)


def menu():
    return [
        MenuEntry(name="Home", path="/"),
        MenuEntry(name="Documentation", path="/about"),
        MenuEntry(name="Archives", path="/archives"),
    ]


site_config = SiteConfig(
    logo="/images/logo.svg",
    url="https://gaetanmaisse.github.io/gmaisse.dev/",
    theme="mistral",
    # The name of the blog itself
    name="gmaisse.dev",
    description=(
        "lorem ipsum dolor sit amet, consectetur adipiscing elit. Ut elit tellus, "
        "luctus nec ullamcorper mattis, pulvinar dapibus leo."
    ),
    socials=SiteSocials(
        twitter="https://twitter.com",
        youtube="https://youtube.com",
        linkedin="https://linkedin.com",
        facebook="https://facebook.com",
        instagram="https://instagram.com",
        github="https://github.com",
        sharing_networks=[
            "facebook",
            "twitter",
            "linkedin",
            "email",
            "pinterest",
            "reddit",
            "pocket",
            "whatsapp",
            "telegram",
            "skype",
        ],
    ),
    newsletter=Newsletter(
        enabled=True,
        form_action="rssfeedpulse",
        provider="https://rssfeedpulse.com/api/campaign/996539cf-73e4-47b5-8d7c-2d7450174467/subscribe",
    ),
    comments=Comments(enabled=False),
    table_of_contents=False,
    # the default author is used for every post that does not name one,
    # and on the home page
    authors=[
        Author(
            username="gmaisse",
            default=True,
            name="Gaetan Maisse",
            description="",
            avatar="/images/portrait.svg",
            socials=SocialLinks(
                twitter="https://twitter.com/gaetanmaisse",
                twitter_username="gaetanmaisse",
                linkedin="https://www.linkedin.com/in/gaetanmaisse/",
                github="https://github.com/gaetanmaisse",
            ),
        ),
    ],
    menu=menu,
    robots=[RobotsRule(UserAgent="*", Allow=["/"])],
)

build_config = BuildConfig(
    extends=["@bloggrify/core", "@bloggrify/mistral"],
    base_url="/gmaisse.dev/",
    compatibility_date=datetime.date(2024, 7, 3),
)
