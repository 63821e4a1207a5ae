"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.error import NotFoundError
from qna.domain.model import ContentStats, Question, TagStatistics, TagUsage, Vote
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, QuestionSortOrder, TagName, UserId
from qna.persistence.mappers import question_to_dict, row_to_question, votes_to_json
from qna.persistence.tables import questions_table


def like_pattern(search: str) -> str:
    """Build an ILIKE pattern matching ``search`` as a literal substring."""
    escaped = (
        search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )
    return f"%{escaped}%"


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository.

    Tags live in a text array on the question row and the vote ledger in a
    JSONB column next to the cached score.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(
        self,
        stmt: Select,
        search: Optional[str],
        tags: Optional[List[TagName]],
    ) -> Select:
        if search:
            pattern = like_pattern(search)
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape="\\"),
                    questions_table.c.description.ilike(pattern, escape="\\"),
                )
            )
        if tags:
            stmt = stmt.where(
                questions_table.c.tags.overlap([tag.root for tag in tags])
            )
        return stmt

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID, optionally taking a row lock."""
        with logfire.span(
            "question_repository.find_by_id",
            question_id=str(question_id),
            for_update=for_update,
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_question(dict(row)) if row else None

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            search=search,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(questions_table), search, tags)

            created_at = questions_table.c.created_at
            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(created_at.asc())
            elif sort == QuestionSortOrder.MOST_ANSWERS:
                stmt = stmt.order_by(
                    questions_table.c.answer_count.desc(), created_at.desc()
                )
            elif sort == QuestionSortOrder.MOST_VOTES:
                stmt = stmt.order_by(questions_table.c.score.desc(), created_at.desc())
            else:
                stmt = stmt.order_by(created_at.desc())

            stmt = stmt.limit(limit).offset(offset)
            result = await self.session.execute(stmt)
            return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def count(
        self,
        search: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(questions_table), search, tags
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        stmt = (
            select(questions_table)
            .where(questions_table.c.author_id == author_id)
            .order_by(questions_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def find_by_tag(self, tag: TagName, limit: int = 10) -> List[Question]:
        stmt = (
            select(questions_table)
            .where(questions_table.c.tags.contains([tag.root]))
            .order_by(questions_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_question(dict(row)) for row in result.mappings().all()]

    async def save(self, question: Question) -> Question:
        """Insert a new question, or update title, description and tags."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            existing = await self.find_by_id(question.id)

            if existing:
                stmt = (
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(
                        title=question.title,
                        description=question.description,
                        tags=question.tag_names,
                        updated_at=question.updated_at,
                    )
                    .returning(questions_table)
                )
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                await self.session.flush()
                return row_to_question(dict(row)) if row else question

            stmt = insert(questions_table).values(**question_to_dict(question))
            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def delete(self, question_id: QuestionId) -> bool:
        stmt = delete(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def save_votes(
        self, question_id: QuestionId, votes: List[Vote], score_delta: int
    ) -> int:
        """Write the new ledger and shift the cached score together."""
        with logfire.span(
            "question_repository.save_votes",
            question_id=str(question_id),
            score_delta=score_delta,
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .values(
                    votes=votes_to_json(votes),
                    score=questions_table.c.score + score_delta,
                )
                .returning(questions_table.c.score)
            )
            result = await self.session.execute(stmt)
            score = result.scalar()
            await self.session.flush()
            if score is None:
                raise NotFoundError("Question", str(question_id))
            return score

    async def increment_views(self, question_id: QuestionId) -> None:
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(view_count=questions_table.c.view_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(answer_count=questions_table.c.answer_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        """Atomically decrement answer_count by 1 (minimum 0)."""
        stmt = (
            update(questions_table)
            .where(
                questions_table.c.id == question_id,
                questions_table.c.answer_count > 0,
            )
            .values(answer_count=questions_table.c.answer_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def author_stats(self, author_id: UserId) -> ContentStats:
        stmt = select(
            func.count(),
            func.coalesce(func.sum(questions_table.c.score), 0),
        ).where(questions_table.c.author_id == author_id)
        result = await self.session.execute(stmt)
        count, total_score = result.one()
        return ContentStats(count=count, total_score=total_score)

    async def aggregate_tags(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 50
    ) -> List[TagUsage]:
        """Unnest tag arrays and count questions per tag."""
        with logfire.span(
            "question_repository.aggregate_tags", search=search, popular=popular
        ):
            tagged = select(
                func.unnest(questions_table.c.tags).label("name"),
                questions_table.c.created_at,
            ).subquery()

            stmt = select(
                tagged.c.name,
                func.count().label("count"),
                func.max(tagged.c.created_at).label("last_used"),
            ).group_by(tagged.c.name)

            if search:
                stmt = stmt.where(
                    tagged.c.name.ilike(like_pattern(search.strip()), escape="\\")
                )

            if popular:
                stmt = stmt.order_by(func.count().desc(), tagged.c.name.asc())
            else:
                stmt = stmt.order_by(tagged.c.name.asc())

            result = await self.session.execute(stmt.limit(limit))
            return [
                TagUsage(name=row.name, count=row.count, last_used=row.last_used)
                for row in result.fetchall()
            ]

    async def tag_statistics(self, tag: TagName) -> TagStatistics:
        stmt = select(
            func.count(),
            func.coalesce(func.sum(questions_table.c.score), 0),
            func.coalesce(func.sum(questions_table.c.view_count), 0),
            func.coalesce(func.sum(questions_table.c.answer_count), 0),
        ).where(questions_table.c.tags.contains([tag.root]))
        result = await self.session.execute(stmt)
        total_questions, total_votes, total_views, total_answers = result.one()
        return TagStatistics(
            total_questions=total_questions,
            total_votes=total_votes,
            total_views=total_views,
            total_answers=total_answers,
        )
