"""Response pieces shared by several use cases."""

import math
from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from qna.domain.model import Answer, AnswerComment, Question, User
from qna.domain.value import UserId


class PageRequest(BaseModel):
    """One-based page number and page size."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    """Pagination block returned with every list."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


class AuthorSummary(BaseModel):
    """Populated author reference."""

    id: str
    username: Optional[str]
    avatar_url: Optional[str]


def author_summary(author_id: UserId, authors: dict[UserId, User]) -> AuthorSummary:
    """Build the author block, tolerating users that no longer resolve."""
    user = authors.get(author_id)
    return AuthorSummary(
        id=str(author_id),
        username=user.username.root if user else None,
        avatar_url=user.avatar_url if user else None,
    )


class QuestionItem(BaseModel):
    """Question as it appears in lists and detail views."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorSummary
    score: int
    upvotes: int
    downvotes: int
    view_count: int
    answer_count: int
    created_at: datetime
    updated_at: datetime


def question_item(question: Question, authors: dict[UserId, User]) -> QuestionItem:
    return QuestionItem(
        id=str(question.id),
        title=question.title,
        description=question.description,
        tags=question.tag_names,
        author=author_summary(question.author_id, authors),
        score=question.score,
        upvotes=question.upvotes,
        downvotes=question.downvotes,
        view_count=question.view_count,
        answer_count=question.answer_count,
        created_at=question.created_at,
        updated_at=question.updated_at,
    )


class CommentItem(BaseModel):
    """Comment embedded in an answer response."""

    id: str
    author: AuthorSummary
    content: str
    created_at: datetime


def comment_item(comment: AnswerComment, authors: dict[UserId, User]) -> CommentItem:
    return CommentItem(
        id=str(comment.id),
        author=author_summary(comment.author_id, authors),
        content=comment.content,
        created_at=comment.created_at,
    )


class AnswerItem(BaseModel):
    """Answer as it appears in lists and detail views."""

    id: str
    question_id: str
    content: str
    author: AuthorSummary
    score: int
    upvotes: int
    downvotes: int
    is_accepted: bool
    comments: list[CommentItem]
    created_at: datetime
    updated_at: datetime


def answer_item(answer: Answer, authors: dict[UserId, User]) -> AnswerItem:
    return AnswerItem(
        id=str(answer.id),
        question_id=str(answer.question_id),
        content=answer.content,
        author=author_summary(answer.author_id, authors),
        score=answer.score,
        upvotes=answer.upvotes,
        downvotes=answer.downvotes,
        is_accepted=answer.is_accepted,
        comments=[comment_item(c, authors) for c in answer.comments],
        created_at=answer.created_at,
        updated_at=answer.updated_at,
    )


def referenced_users(
    questions: Iterable[Question] = (), answers: Iterable[Answer] = ()
) -> list[UserId]:
    """Every user ID a set of questions and answers needs populated."""
    ids: list[UserId] = [q.author_id for q in questions]
    for answer in answers:
        ids.append(answer.author_id)
        ids.extend(c.author_id for c in answer.comments)
    return ids
