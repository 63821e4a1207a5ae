"""Unit tests for question and answer validation."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from qna.domain.value import TagName, UserId, Username
from tests.conftest import make_answer, make_question


class TestQuestionTags:
    """Tests for tag normalization on questions."""

    def test_tags_are_lowercased_and_deduplicated(self):
        """Duplicates are dropped after normalization, keeping first order."""
        # Act
        question = make_question(
            UserId(uuid4()), tags=["Python", "django", "PYTHON", " Django "]
        )

        # Assert
        assert question.tag_names == ["python", "django"]

    def test_symbols_allowed_in_tag_names(self):
        """Names like c++ and node.js are valid."""
        # Act
        question = make_question(UserId(uuid4()), tags=["c++", "node.js", "c#"])

        # Assert
        assert question.tag_names == ["c++", "node.js", "c#"]

    def test_at_least_one_tag_required(self):
        """A question needs one to five tags."""
        with pytest.raises(ValidationError):
            make_question(UserId(uuid4()), tags=[])

    def test_at_most_five_tags(self):
        with pytest.raises(ValidationError):
            make_question(UserId(uuid4()), tags=["a", "b", "c", "d", "e", "f"])

    def test_invalid_tag_name_rejected(self):
        with pytest.raises(ValueError):
            TagName("has space")


class TestContentRules:
    """Tests for text length rules."""

    def test_short_title_rejected(self):
        """Titles need at least five characters after trimming."""
        with pytest.raises(ValidationError):
            make_question(UserId(uuid4()), title="  Why  ")

    def test_short_answer_rejected(self):
        """Answers need at least ten characters."""
        question = make_question(UserId(uuid4()))
        with pytest.raises(ValidationError):
            make_answer(question.id, UserId(uuid4()), content="Too short")

    def test_username_format(self):
        """Usernames are 3-30 URL safe characters."""
        assert Username(" bob_smith ").root == "bob_smith"
        with pytest.raises(ValueError):
            Username("ab")
