import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator


class BuildConfig(BaseModel):
    """Framework layers the site extends and where it is deployed."""

    extends: List[str] = Field(default_factory=list)
    base_url: str = "/"
    compatibility_date: datetime.date

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, value: str) -> str:
        if not (value.startswith("/") and value.endswith("/")):
            raise ValueError("base_url must start and end with '/'")
        return value
