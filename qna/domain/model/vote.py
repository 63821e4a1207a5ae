"""Vote ledger.

Questions and answers each carry an embedded ledger of votes plus a cached
score. A user holds at most one vote per target, and the cached score always
equals upvotes minus downvotes.
"""

from datetime import datetime
from typing import Optional, Sequence

from pydantic import Field, model_validator

from qna.domain.model.common import DomainModel
from qna.domain.value import UserId, VoteAction, VoteDirection


class Vote(DomainModel):
    """A single voter's entry in a target's ledger."""

    voter_id: UserId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)


class VoteChange(DomainModel):
    """Outcome of applying one vote request to a ledger.

    ``delta`` is the change to apply to the cached score, ``direction`` is
    the voter's resulting direction (None once the vote is toggled off).
    """

    votes: list[Vote]
    delta: int
    direction: Optional[VoteDirection]
    action: VoteAction


def tally(votes: Sequence[Vote]) -> int:
    """Score of a ledger: upvotes minus downvotes."""
    return sum(vote.direction.weight for vote in votes)


def find_vote(votes: Sequence[Vote], voter_id: UserId) -> Optional[Vote]:
    """Return the voter's entry in the ledger, if any."""
    return next((vote for vote in votes if vote.voter_id == voter_id), None)


def cast_vote(
    votes: Sequence[Vote],
    voter_id: UserId,
    direction: VoteDirection,
    now: Optional[datetime] = None,
) -> VoteChange:
    """Apply toggle semantics for one voter and return the new ledger.

    - No existing vote: append it, delta is the direction's weight (+1/-1).
    - Same direction again: remove it, delta reverses the original.
    - Opposite direction: flip in place, delta is twice the new weight (+2/-2).

    The input ledger is not modified.
    """
    existing = find_vote(votes, voter_id)

    if existing is None:
        new_votes = [
            *votes,
            Vote(
                voter_id=voter_id,
                direction=direction,
                created_at=now or datetime.now(),
            ),
        ]
        return VoteChange(
            votes=new_votes,
            delta=direction.weight,
            direction=direction,
            action=VoteAction.ADDED,
        )

    if existing.direction == direction:
        new_votes = [vote for vote in votes if vote.voter_id != voter_id]
        return VoteChange(
            votes=new_votes,
            delta=-direction.weight,
            direction=None,
            action=VoteAction.REMOVED,
        )

    new_votes = [
        vote.model_copy(update={"direction": direction})
        if vote.voter_id == voter_id
        else vote
        for vote in votes
    ]
    return VoteChange(
        votes=new_votes,
        delta=2 * direction.weight,
        direction=direction,
        action=VoteAction.SWITCHED,
    )


class Votable(DomainModel):
    """Base for entities that carry a vote ledger."""

    author_id: UserId
    votes: list[Vote] = Field(default_factory=list)
    score: int = 0

    @model_validator(mode="after")
    def validate_ledger(self) -> "Votable":
        """Ledger holds one vote per voter and agrees with the cached score."""
        voters = [vote.voter_id for vote in self.votes]
        if len(voters) != len(set(voters)):
            raise ValueError("A user can only vote once per question or answer")
        if self.score != tally(self.votes):
            raise ValueError(
                f"Score {self.score} does not match vote ledger ({tally(self.votes)})"
            )
        return self

    def direction_of(self, voter_id: UserId) -> Optional[VoteDirection]:
        """The voter's current direction on this target, if they voted."""
        vote = find_vote(self.votes, voter_id)
        return vote.direction if vote else None

    @property
    def upvotes(self) -> int:
        return sum(1 for vote in self.votes if vote.direction is VoteDirection.UP)

    @property
    def downvotes(self) -> int:
        return sum(1 for vote in self.votes if vote.direction is VoteDirection.DOWN)
