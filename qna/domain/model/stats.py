"""Read models produced by aggregate queries."""

from datetime import datetime
from typing import Optional

from qna.domain.model.common import DomainModel


class ContentStats(DomainModel):
    """Totals over one author's questions or answers."""

    count: int = 0
    total_score: int = 0
    accepted: int = 0  # Only meaningful for answers


class TagUsage(DomainModel):
    """How often a tag is used across questions."""

    name: str
    count: int
    last_used: Optional[datetime] = None


class TagStatistics(DomainModel):
    """Aggregate numbers for questions carrying one tag."""

    total_questions: int = 0
    total_votes: int = 0
    total_views: int = 0
    total_answers: int = 0

    @property
    def avg_votes(self) -> float:
        return self.total_votes / self.total_questions if self.total_questions else 0.0

    @property
    def avg_views(self) -> float:
        return self.total_views / self.total_questions if self.total_questions else 0.0

    @property
    def avg_answers(self) -> float:
        return (
            self.total_answers / self.total_questions if self.total_questions else 0.0
        )
