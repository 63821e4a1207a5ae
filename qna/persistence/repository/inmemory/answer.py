"""In-memory answer repository for testing."""

from typing import List, Optional

from qna.domain.error import NotFoundError
from qna.domain.model import Answer, AnswerComment, ContentStats, Vote
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, AnswerSortOrder, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    def _replace(self, answer_id: AnswerId, **changes) -> Optional[Answer]:
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        updated = answer.model_copy(update=changes)
        self._answers[answer_id] = updated
        return updated

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        accepted_first: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Answer]:
        answers = [a for a in self._answers.values() if a.question_id == question_id]

        if sort == AnswerSortOrder.NEWEST:
            answers.sort(key=lambda a: a.created_at, reverse=True)
        elif sort == AnswerSortOrder.OLDEST:
            answers.sort(key=lambda a: a.created_at)
        else:
            answers.sort(key=lambda a: (a.score, a.created_at), reverse=True)

        if accepted_first:
            # Stable sort keeps the order above within each group
            answers.sort(key=lambda a: not a.is_accepted)

        return answers[offset : offset + limit]

    async def count_by_question(self, question_id: QuestionId) -> int:
        return sum(1 for a in self._answers.values() if a.question_id == question_id)

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def save(self, answer: Answer) -> Answer:
        existing = self._answers.get(answer.id)
        if existing is None:
            self._answers[answer.id] = answer
            return answer

        updated = existing.model_copy(
            update={"content": answer.content, "updated_at": answer.updated_at}
        )
        self._answers[answer.id] = updated
        return updated

    async def delete(self, answer_id: AnswerId) -> bool:
        return self._answers.pop(answer_id, None) is not None

    async def delete_by_question(self, question_id: QuestionId) -> int:
        doomed = [
            aid for aid, a in self._answers.items() if a.question_id == question_id
        ]
        for answer_id in doomed:
            del self._answers[answer_id]
        return len(doomed)

    async def save_votes(
        self, answer_id: AnswerId, votes: List[Vote], score_delta: int
    ) -> int:
        answer = self._answers.get(answer_id)
        if answer is None:
            raise NotFoundError("Answer", str(answer_id))
        updated = self._replace(
            answer_id, votes=list(votes), score=answer.score + score_delta
        )
        return updated.score if updated else 0

    async def mark_accepted(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Answer]:
        for answer in list(self._answers.values()):
            if answer.question_id == question_id:
                self._replace(answer.id, is_accepted=answer.id == answer_id)

        accepted = self._answers.get(answer_id)
        if accepted is None or accepted.question_id != question_id:
            return None
        return accepted

    async def unmark_accepted(self, answer_id: AnswerId) -> Optional[Answer]:
        return self._replace(answer_id, is_accepted=False)

    async def add_comment(
        self, answer_id: AnswerId, comment: AnswerComment
    ) -> Optional[Answer]:
        answer = self._answers.get(answer_id)
        if answer is None:
            return None
        return self._replace(answer_id, comments=[*answer.comments, comment])

    async def author_stats(self, author_id: UserId) -> ContentStats:
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        return ContentStats(
            count=len(answers),
            total_score=sum(a.score for a in answers),
            accepted=sum(1 for a in answers if a.is_accepted),
        )
