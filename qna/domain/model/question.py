"""Question aggregate root."""

from datetime import datetime

from pydantic import Field, field_validator

from qna.domain.model.vote import Votable
from qna.domain.value import QuestionId, TagName


class Question(Votable):
    """Question aggregate root.

    Business rules:
    - Title 5-200 characters, description at least 10 characters
    - 1-5 tags, lowercase, duplicates dropped keeping first occurrence
    - ``author_id`` never changes after creation
    - ``answer_count`` is a cached count kept in step with answer
      creation and deletion
    - ``score`` equals upvotes minus downvotes in ``votes``
    """

    id: QuestionId
    title: str = Field(min_length=5, max_length=200)
    description: str = Field(min_length=10, max_length=30000)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    view_count: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags", mode="before")
    @classmethod
    def dedupe_tags(cls, v):
        """Drop repeated tags, comparing normalized names."""
        if not isinstance(v, list):
            return v
        seen: set[str] = set()
        unique = []
        for tag in v:
            name = tag.root if isinstance(tag, TagName) else TagName(tag).root
            if name not in seen:
                seen.add(name)
                unique.append(name)
        return unique

    @property
    def tag_names(self) -> list[str]:
        return [tag.root for tag in self.tags]
