"""Unit tests for TagService."""

from datetime import datetime
from uuid import uuid4

import pytest

from qna.domain.repository import QuestionRepository
from qna.domain.service import TagService
from qna.domain.value import TagName, UserId
from tests.conftest import make_question
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(question_repo):
    author = UserId(uuid4())
    for day, tags in enumerate(
        [["python", "asyncio"], ["python"], ["rust"], ["python", "django"]],
        start=1,
    ):
        await question_repo.save(
            make_question(author, tags=tags, created_at=datetime(2024, 1, day))
        )


class TestListTags:
    """Tests for list_tags."""

    @pytest.mark.asyncio
    async def test_alphabetical_by_default(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        await _seed(await unit_env.get(QuestionRepository))

        # Act
        tags = await tag_service.list_tags()

        # Assert
        assert [t.name for t in tags] == ["asyncio", "django", "python", "rust"]

    @pytest.mark.asyncio
    async def test_popular_orders_by_usage(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        await _seed(await unit_env.get(QuestionRepository))

        # Act
        tags = await tag_service.list_tags(popular=True, limit=2)

        # Assert
        assert [(t.name, t.count) for t in tags] == [("python", 3), ("asyncio", 1)]
        assert tags[0].last_used == datetime(2024, 1, 4)

    @pytest.mark.asyncio
    async def test_search_filters_names(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        await _seed(await unit_env.get(QuestionRepository))

        # Act
        tags = await tag_service.list_tags(search="PY")

        # Assert
        assert [t.name for t in tags] == ["python"]


class TestTagStatistics:
    """Tests for get_tag_statistics."""

    @pytest.mark.asyncio
    async def test_totals_and_recent_questions(self, unit_env):
        # Arrange
        tag_service = await unit_env.get(TagService)
        question_repo = await unit_env.get(QuestionRepository)
        await _seed(question_repo)

        # Act
        stats, recent = await tag_service.get_tag_statistics(
            TagName("python"), recent_limit=2
        )

        # Assert
        assert stats.total_questions == 3
        assert stats.total_votes == 0
        assert stats.avg_answers == 0.0
        assert [q.created_at for q in recent] == [
            datetime(2024, 1, 4),
            datetime(2024, 1, 2),
        ]
