"""In-memory question repository for testing."""

from typing import List, Optional

from qna.domain.error import NotFoundError
from qna.domain.model import ContentStats, Question, TagStatistics, TagUsage, Vote
from qna.domain.repository import QuestionRepository
from qna.domain.value import QuestionId, QuestionSortOrder, TagName, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _filtered(
        self, search: Optional[str], tags: Optional[List[TagName]]
    ) -> List[Question]:
        questions = list(self._questions.values())

        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.description.lower()
            ]

        if tags:
            wanted = {tag.root for tag in tags}
            questions = [q for q in questions if wanted & set(q.tag_names)]

        return questions

    def _replace(self, question_id: QuestionId, **changes) -> Optional[Question]:
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(update=changes)
        self._questions[question_id] = updated
        return updated

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        return self._questions.get(question_id)

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
        sort: QuestionSortOrder = QuestionSortOrder.LATEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        questions = self._filtered(search, tags)

        if sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.MOST_ANSWERS:
            questions.sort(key=lambda q: (q.answer_count, q.created_at), reverse=True)
        elif sort == QuestionSortOrder.MOST_VOTES:
            questions.sort(key=lambda q: (q.score, q.created_at), reverse=True)
        else:
            questions.sort(key=lambda q: q.created_at, reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self,
        search: Optional[str] = None,
        tags: Optional[List[TagName]] = None,
    ) -> int:
        return len(self._filtered(search, tags))

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        questions = [q for q in self._questions.values() if q.author_id == author_id]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def find_by_tag(self, tag: TagName, limit: int = 10) -> List[Question]:
        questions = [q for q in self._questions.values() if tag in q.tags]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[:limit]

    async def save(self, question: Question) -> Question:
        existing = self._questions.get(question.id)
        if existing is None:
            self._questions[question.id] = question
            return question

        updated = existing.model_copy(
            update={
                "title": question.title,
                "description": question.description,
                "tags": question.tags,
                "updated_at": question.updated_at,
            }
        )
        self._questions[question.id] = updated
        return updated

    async def delete(self, question_id: QuestionId) -> bool:
        return self._questions.pop(question_id, None) is not None

    async def save_votes(
        self, question_id: QuestionId, votes: List[Vote], score_delta: int
    ) -> int:
        question = self._questions.get(question_id)
        if question is None:
            raise NotFoundError("Question", str(question_id))
        updated = self._replace(
            question_id, votes=list(votes), score=question.score + score_delta
        )
        return updated.score if updated else 0

    async def increment_views(self, question_id: QuestionId) -> None:
        question = self._questions.get(question_id)
        if question:
            self._replace(question_id, view_count=question.view_count + 1)

    async def increment_answer_count(self, question_id: QuestionId) -> None:
        question = self._questions.get(question_id)
        if question:
            self._replace(question_id, answer_count=question.answer_count + 1)

    async def decrement_answer_count(self, question_id: QuestionId) -> None:
        question = self._questions.get(question_id)
        if question:
            self._replace(question_id, answer_count=max(0, question.answer_count - 1))

    async def author_stats(self, author_id: UserId) -> ContentStats:
        questions = [q for q in self._questions.values() if q.author_id == author_id]
        return ContentStats(
            count=len(questions), total_score=sum(q.score for q in questions)
        )

    async def aggregate_tags(
        self, search: Optional[str] = None, popular: bool = False, limit: int = 50
    ) -> List[TagUsage]:
        usage: dict[str, TagUsage] = {}
        for question in self._questions.values():
            for name in question.tag_names:
                current = usage.get(name)
                if current is None:
                    usage[name] = TagUsage(
                        name=name, count=1, last_used=question.created_at
                    )
                else:
                    usage[name] = TagUsage(
                        name=name,
                        count=current.count + 1,
                        last_used=max(current.last_used, question.created_at),
                    )

        tags = list(usage.values())
        if search:
            needle = search.strip().lower()
            tags = [t for t in tags if needle in t.name]

        if popular:
            tags.sort(key=lambda t: (-t.count, t.name))
        else:
            tags.sort(key=lambda t: t.name)
        return tags[:limit]

    async def tag_statistics(self, tag: TagName) -> TagStatistics:
        questions = [q for q in self._questions.values() if tag in q.tags]
        return TagStatistics(
            total_questions=len(questions),
            total_votes=sum(q.score for q in questions),
            total_views=sum(q.view_count for q in questions),
            total_answers=sum(q.answer_count for q in questions),
        )
