"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel

from qna.application.usecase.answer import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    UpdateAnswerRequest,
    UpdateAnswerUseCase,
)
from qna.application.usecase.auth import GetCurrentUserUseCase
from qna.application.usecase.common import AnswerItem
from qna.config import PaginationSettings
from qna.domain.value import AnswerSortOrder
from qna.interface.api.dependencies import require_user, resolve_limit

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    question_id: UUID
    content: str


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer and/or its accepted flag."""

    content: str | None = None
    is_accepted: bool | None = None


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    content: str


@router.get("", response_model=ListAnswersResponse)
async def list_answers(
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    pagination: FromDishka[PaginationSettings],
    question_id: UUID = Query(...),
    sort: AnswerSortOrder = AnswerSortOrder.VOTES,
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListAnswersResponse:
    """List a question's answers."""
    return await list_answers_use_case.execute(
        ListAnswersRequest(
            question_id=str(question_id),
            sort=sort,
            page=page,
            limit=resolve_limit(limit, pagination),
        )
    )


@router.post("", response_model=AnswerItem, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AnswerItem:
    """Answer a question. The question's author is notified."""
    user = await require_user(get_current_user_use_case, authorization)
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(request.question_id),
            user_id=user.user_id,
            content=request.content,
        )
    )


@router.put("/{answer_id}", response_model=AnswerItem)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    update_answer_use_case: FromDishka[UpdateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AnswerItem:
    """Edit an answer's content and/or accept or unaccept it.

    Content edits need the answer's author, acceptance needs the question's
    author.
    """
    user = await require_user(get_current_user_use_case, authorization)
    return await update_answer_use_case.execute(
        UpdateAnswerRequest(
            answer_id=str(answer_id),
            user_id=user.user_id,
            content=request.content,
            is_accepted=request.is_accepted,
        )
    )


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer. Only the answer's author can delete."""
    user = await require_user(get_current_user_use_case, authorization)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=str(answer_id), user_id=user.user_id)
    )


@router.post(
    "/{answer_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    answer_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AddCommentResponse:
    """Comment on an answer."""
    user = await require_user(get_current_user_use_case, authorization)
    return await add_comment_use_case.execute(
        AddCommentRequest(
            answer_id=str(answer_id), user_id=user.user_id, content=request.content
        )
    )
