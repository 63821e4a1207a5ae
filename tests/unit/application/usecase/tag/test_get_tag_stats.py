"""Unit tests for tag use cases."""

import pytest

from qna.application.usecase.tag import (
    GetTagStatsRequest,
    GetTagStatsUseCase,
    ListTagsRequest,
    ListTagsUseCase,
)
from qna.domain.error import NotFoundError
from qna.domain.repository import QuestionRepository
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetTagStatsUseCase:
    """Tests for GetTagStatsUseCase."""

    @pytest.mark.asyncio
    async def test_averages_are_rounded(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetTagStatsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user().id
        for views in (1, 1, 0):
            await question_repo.save(
                make_question(author, tags=["python"], view_count=views)
            )

        # Act
        result = await use_case.execute(GetTagStatsRequest(name="Python"))

        # Assert
        assert result.name == "python"
        assert result.total_questions == 3
        assert result.total_views == 2
        assert result.avg_views == 0.67
        assert len(result.recent_questions) == 3

    @pytest.mark.asyncio
    async def test_unused_tag_not_found(self, unit_env):
        use_case = await unit_env.get(GetTagStatsUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetTagStatsRequest(name="cobol"))

    @pytest.mark.asyncio
    async def test_invalid_tag_name_not_found(self, unit_env):
        use_case = await unit_env.get(GetTagStatsUseCase)
        with pytest.raises(NotFoundError):
            await use_case.execute(GetTagStatsRequest(name="no spaces allowed"))


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_usage_counts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListTagsUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user().id
        await question_repo.save(make_question(author, tags=["go", "http"]))
        await question_repo.save(make_question(author, tags=["go"]))

        # Act
        result = await use_case.execute(ListTagsRequest(popular=True))

        # Assert
        assert [(t.name, t.count) for t in result.tags] == [("go", 2), ("http", 1)]
