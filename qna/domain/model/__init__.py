"""Domain model entities for the forum."""

from qna.domain.model.answer import Answer, AnswerComment
from qna.domain.model.notification import Notification
from qna.domain.model.question import Question
from qna.domain.model.stats import ContentStats, TagStatistics, TagUsage
from qna.domain.model.user import User
from qna.domain.model.vote import Votable, Vote, VoteChange, cast_vote, tally

__all__ = [
    "User",
    "Question",
    "Answer",
    "AnswerComment",
    "Notification",
    "ContentStats",
    "TagStatistics",
    "TagUsage",
    "Votable",
    "Vote",
    "VoteChange",
    "cast_vote",
    "tally",
]
