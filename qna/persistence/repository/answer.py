"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import case, delete, func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import NotFoundError
from qna.domain.model import Answer, AnswerComment, ContentStats, Vote
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, AnswerSortOrder, QuestionId, UserId
from qna.persistence.mappers import (
    answer_to_dict,
    comment_to_json,
    row_to_answer,
    votes_to_json,
)
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID, optionally taking a row lock."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_answer(dict(row)) if row else None

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        accepted_first: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
            accepted_first=accepted_first,
        ):
            stmt = select(answers_table).where(
                answers_table.c.question_id == question_id
            )

            ordering = []
            if accepted_first:
                ordering.append(answers_table.c.is_accepted.desc())
            if sort == AnswerSortOrder.NEWEST:
                ordering.append(answers_table.c.created_at.desc())
            elif sort == AnswerSortOrder.OLDEST:
                ordering.append(answers_table.c.created_at.asc())
            else:
                ordering.extend(
                    [answers_table.c.score.desc(), answers_table.c.created_at.desc()]
                )

            stmt = stmt.order_by(*ordering).limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        stmt = (
            select(answers_table)
            .where(answers_table.c.author_id == author_id)
            .order_by(answers_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer, or update the content of an existing one."""
        existing = await self.find_by_id(answer.id)

        if existing:
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(content=answer.content, updated_at=answer.updated_at)
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
            return row_to_answer(dict(row)) if row else answer

        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> bool:
        stmt = delete(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer of a question.

        Returns:
            Number of answers deleted
        """
        with logfire.span(
            "answer_repository.delete_by_question", question_id=str(question_id)
        ):
            stmt = delete(answers_table).where(
                answers_table.c.question_id == question_id
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount  # type: ignore[attr-defined]

    async def save_votes(
        self, answer_id: AnswerId, votes: List[Vote], score_delta: int
    ) -> int:
        """Write the new ledger and shift the cached score together."""
        with logfire.span(
            "answer_repository.save_votes",
            answer_id=str(answer_id),
            score_delta=score_delta,
        ):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer_id)
                .values(
                    votes=votes_to_json(votes),
                    score=answers_table.c.score + score_delta,
                )
                .returning(answers_table.c.score)
            )
            result = await self.session.execute(stmt)
            score = result.scalar()
            await self.session.flush()
            if score is None:
                raise NotFoundError("Answer", str(answer_id))
            return score

    async def mark_accepted(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Answer]:
        """Set is_accepted to ``id = answer_id`` across the whole question.

        The exclusion constraint is deferred to commit, so moving the flag
        between two answers in one statement never trips it.
        """
        with logfire.span(
            "answer_repository.mark_accepted",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            stmt = (
                update(answers_table)
                .where(answers_table.c.question_id == question_id)
                .values(is_accepted=answers_table.c.id == answer_id)
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
            await self.session.flush()

            for row in rows:
                answer = row_to_answer(dict(row))
                if answer.id == answer_id:
                    return answer
            return None

    async def unmark_accepted(self, answer_id: AnswerId) -> Optional[Answer]:
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=False)
            .returning(answers_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_answer(dict(row)) if row else None

    async def add_comment(
        self, answer_id: AnswerId, comment: AnswerComment
    ) -> Optional[Answer]:
        """Append to the JSONB comment array in place."""
        appended = answers_table.c.comments.op("||", return_type=JSONB)(
            literal([comment_to_json(comment)], type_=JSONB)
        )
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(comments=appended)
            .returning(answers_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_answer(dict(row)) if row else None

    async def author_stats(self, author_id: UserId) -> ContentStats:
        stmt = select(
            func.count(),
            func.coalesce(func.sum(answers_table.c.score), 0),
            func.coalesce(
                func.sum(case((answers_table.c.is_accepted, 1), else_=0)), 0
            ),
        ).where(answers_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        count, total_score, accepted = result.one()
        return ContentStats(count=count, total_score=total_score, accepted=accepted)
