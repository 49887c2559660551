"""Tests for CreateCommentUseCase."""

import pytest

from board.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsUseCase,
)
from board.domain.error import ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_content_is_sanitized(self, unit_env, alice):
        use_case = await unit_env.get(CreateCommentUseCase)

        response = await use_case.execute(
            CreateCommentRequest(author=alice, content="<b>hi</b><script>x</script>")
        )

        assert response.content == "<b>hi</b>&lt;script&gt;x&lt;/script&gt;"
        assert response.score == 0
        assert response.replies == []

    @pytest.mark.asyncio
    async def test_escaping_can_push_content_over_limit(self, unit_env, alice):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateCommentRequest(author=alice, content="<" * 900))

    @pytest.mark.asyncio
    async def test_reply_appears_under_parent(self, unit_env, alice, bob):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        parent = await create.execute(CreateCommentRequest(author=alice, content="parent"))

        # Act
        reply = await create.execute(
            CreateCommentRequest(
                author=bob, content="reply", parent_id=parent.id, replying_to="alice"
            )
        )
        threads = await list_comments.execute()

        # Assert
        assert len(threads) == 1
        assert threads[0].replies[0].id == reply.id
        assert threads[0].replies[0].replying_to == "alice"
