from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SharingNetwork(str, Enum):
    """Networks the social sharing buttons know how to target."""

    FACEBOOK = "facebook"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    EMAIL = "email"
    PINTEREST = "pinterest"
    REDDIT = "reddit"
    POCKET = "pocket"
    WHATSAPP = "whatsapp"
    TELEGRAM = "telegram"
    SKYPE = "skype"


class SocialLinks(BaseModel):
    model_config = ConfigDict(extra="forbid")

    twitter: Optional[str] = None
    twitter_username: Optional[str] = None
    mastodon: Optional[str] = None
    youtube: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    github: Optional[str] = None


class SiteSocials(SocialLinks):
    sharing_networks: List[SharingNetwork] = Field(default_factory=list)


class Newsletter(BaseModel):
    enabled: bool = False
    form_action: str = ""
    provider: str = ""


class HyvorTalk(BaseModel):
    website_id: str


class Comments(BaseModel):
    enabled: bool = False
    hyvor_talk: Optional[HyvorTalk] = None


class Analytics(BaseModel):
    # provider specific blocks (pirsch, plausible, ...) are kept as extras
    model_config = ConfigDict(extra="allow")

    provider: str


class Author(BaseModel):
    username: str
    default: bool = False
    name: str
    description: str = ""
    avatar: Optional[str] = None
    socials: SocialLinks = Field(default_factory=SocialLinks)


class MenuEntry(BaseModel):
    name: str
    path: str


class RobotsRule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_agent: str = Field(alias="UserAgent")
    allow: List[str] = Field(default_factory=list, alias="Allow")
    disallow: List[str] = Field(default_factory=list, alias="Disallow")


def _no_menu() -> List[MenuEntry]:
    return []


class SiteConfig(BaseModel):
    logo: Optional[str] = None
    url: str
    theme: str
    name: str
    description: str = ""
    avatar: Optional[str] = None
    analytics: Optional[Analytics] = None
    socials: SiteSocials = Field(default_factory=SiteSocials)
    newsletter: Newsletter = Field(default_factory=Newsletter)
    comments: Comments = Field(default_factory=Comments)
    table_of_contents: bool = False
    authors: List[Author] = Field(default_factory=list)
    menu: Callable[[], List[MenuEntry]] = Field(default=_no_menu, exclude=True)
    robots: List[RobotsRule] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_authors(self) -> "SiteConfig":
        usernames = [author.username for author in self.authors]
        duplicates = sorted({u for u in usernames if usernames.count(u) > 1})
        if duplicates:
            raise ValueError(f"duplicate author usernames: {', '.join(duplicates)}")

        defaults = [author.username for author in self.authors if author.default]
        if len(defaults) > 1:
            raise ValueError(
                f"only one author can be the default, got: {', '.join(defaults)}"
            )
        return self


class SiteSummary(BaseModel):
    """Serializable view of the site configuration with the menu evaluated."""

    logo: Optional[str] = None
    url: str
    theme: str
    name: str
    description: str = ""
    avatar: Optional[str] = None
    analytics: Optional[Analytics] = None
    socials: SiteSocials
    newsletter: Newsletter
    comments: Comments
    table_of_contents: bool
    authors: List[Author]
    menu: List[MenuEntry]
    robots: List[RobotsRule]


class LayoutContext(BaseModel):
    """What the page chrome needs to render: header, footer, sidebars."""

    name: str
    description: str = ""
    url: str
    theme: str
    logo: Optional[str] = None
    menu: List[MenuEntry]
    socials: SocialLinks
    sharing_networks: List[SharingNetwork] = Field(default_factory=list)
    default_author: Optional[Author] = None
    newsletter: Optional[Newsletter] = None
    comments: Optional[Comments] = None
    table_of_contents: bool = False
