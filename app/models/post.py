import datetime
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# YYYY-MM-DD, optionally followed by a time and offset
ISO_CALENDAR_DATE = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ].+)?$")


class PostFrontmatter(BaseModel):
    """Metadata block at the top of a post. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    date: datetime.date
    description: str = ""
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    cover: Optional[str] = None
    author: Optional[str] = None
    draft: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        # YAML already turns bare dates into date objects; only strings need work
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value
        if isinstance(value, str):
            text = value.strip()
            if ISO_CALENDAR_DATE.match(text):
                try:
                    return datetime.datetime.fromisoformat(text).date()
                except ValueError:
                    pass
            raise ValueError(f"'{value}' is not an ISO-8601 date")
        raise ValueError(f"expected an ISO-8601 date, got {type(value).__name__}")

    @field_validator("description", mode="before")
    @classmethod
    def empty_description(cls, value):
        return "" if value is None else value

    @field_validator("categories", "tags", mode="before")
    @classmethod
    def normalize_terms(cls, value) -> List[str]:
        if not value:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            value = [value]
        terms = []
        for item in value:
            term = str(item).strip() if item is not None else ""
            if term and term not in terms:
                terms.append(term)
        return terms

    @field_validator("cover", "author", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

