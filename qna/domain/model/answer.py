"""Answer entity.

Answers belong to exactly one question and carry their own vote ledger and
an embedded list of short comments.
"""

from datetime import datetime

from pydantic import Field, field_validator

from qna.domain.model.common import DomainModel
from qna.domain.model.vote import Votable
from qna.domain.value import AnswerId, CommentId, QuestionId, UserId


class AnswerComment(DomainModel):
    """Short comment embedded in an answer."""

    id: CommentId
    author_id: UserId
    content: str = Field(min_length=1, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v):
        return v.strip() if isinstance(v, str) else v


class Answer(Votable):
    """Answer entity.

    Business rules:
    - Content at least 10 characters
    - ``question_id`` never changes after creation
    - At most one answer per question has ``is_accepted`` set; the
      acceptance service and a deferred exclusion constraint enforce this
    """

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=10, max_length=30000)
    is_accepted: bool = False
    comments: list[AnswerComment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v):
        return v.strip() if isinstance(v, str) else v
