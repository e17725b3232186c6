from typing import List, Optional

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    id: str
    slug: str
    title: str
    description: str = ""
    date: str
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    cover: Optional[str] = None
    author: Optional[str] = None
    readingTime: Optional[str] = None
    draft: bool = False


class PostDetail(PostSummary):
    content: str


class ArchiveYear(BaseModel):
    year: int
    posts: List[PostSummary]

