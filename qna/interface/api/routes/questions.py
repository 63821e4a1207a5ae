"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.common import QuestionItem
from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qna.config import AuthSettings, PaginationSettings
from qna.domain.value import QuestionSortOrder
from qna.interface.api.dependencies import bearer_token, require_user, resolve_limit
from qna.util.jwt import JWTError

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    description: str
    tags: list[str]
    author_id: UUID | None = None  # Only honored when body authorship is enabled


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question."""

    title: str | None = None
    description: str | None = None
    tags: list[str] | None = None


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    search: str | None = None,
    tags: str | None = Query(default=None, description="Comma separated tag names"),
    sort: QuestionSortOrder = QuestionSortOrder.LATEST,
) -> ListQuestionsResponse:
    """List questions, newest first by default.

    Example:
        GET /questions?tags=python,asyncio&sort=most-votes&page=2
    """
    tag_names = [t for t in (tags or "").split(",") if t.strip()]
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            page=page,
            limit=resolve_limit(limit, pagination),
            search=search,
            tags=tag_names or None,
            sort=sort,
        )
    )


@router.post("", response_model=QuestionItem, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    authorization: str | None = Header(default=None),
) -> QuestionItem:
    """Ask a question.

    The author is the bearer of the token. When ``AUTH__ALLOW_BODY_AUTHOR``
    is set and no token is sent, ``author_id`` from the body is used instead.
    """
    if bearer_token(authorization) or not auth_settings.allow_body_author:
        user = await require_user(get_current_user_use_case, authorization)
        author_id = user.user_id
    elif request.author_id is not None:
        author_id = str(request.author_id)
    else:
        raise JWTError("Authentication required")

    return await create_question_use_case.execute(
        CreateQuestionRequest(
            author_id=author_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    pagination: FromDishka[PaginationSettings],
    answers_page: int = Query(default=1, ge=1),
    answers_limit: int | None = Query(default=None, ge=1),
    include_answers: bool = True,
) -> GetQuestionResponse:
    """Get a question with a page of its answers. Counts as a view."""
    return await get_question_use_case.execute(
        GetQuestionRequest(
            question_id=str(question_id),
            include_answers=include_answers,
            answers_page=answers_page,
            answers_limit=resolve_limit(answers_limit, pagination),
        )
    )


@router.put("/{question_id}", response_model=QuestionItem)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> QuestionItem:
    """Edit a question. Only the author can edit."""
    user = await require_user(get_current_user_use_case, authorization)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            user_id=user.user_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> DeleteQuestionResponse:
    """Delete a question and all of its answers. Only the author can delete."""
    user = await require_user(get_current_user_use_case, authorization)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), user_id=user.user_id)
    )
