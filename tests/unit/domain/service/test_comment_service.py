"""Unit tests for CommentService."""

import pytest

from board.domain.error import ForbiddenError, NotFoundError, ValidationError
from board.domain.repository import CommentRepository, UnitOfWork
from board.domain.service import CacheBackend, CommentService
from board.domain.service.cache_service import ALL_COMMENTS_KEY, comment_key
from board.domain.value import CommentId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for creating comments and replies."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env, alice):
        """A new comment starts at score zero without a parent."""
        service = await unit_env.get(CommentService)

        comment = await service.create_comment(alice, "hello")

        assert comment.id == 1
        assert comment.content == "hello"
        assert comment.author_id == alice.id
        assert comment.author_username == "alice"
        assert comment.parent_id is None
        assert comment.score == 0

    @pytest.mark.asyncio
    async def test_ids_increase_in_insertion_order(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        first = await service.create_comment(alice, "first")
        second = await service.create_comment(alice, "second")

        assert second.id > first.id

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env, alice, bob):
        """A reply hangs off a top-level comment and keeps its label."""
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")

        reply = await service.create_comment(
            bob, "reply", parent_id=parent.id, replying_to="alice"
        )

        assert reply.parent_id == parent.id
        assert reply.replying_to == "alice"

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_fails(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.create_comment(alice, "orphan", parent_id=CommentId(99))

    @pytest.mark.asyncio
    async def test_reply_to_reply_fails(self, unit_env, alice, bob):
        """Threads are only one level deep."""
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")
        reply = await service.create_comment(bob, "reply", parent_id=parent.id)

        with pytest.raises(NotFoundError):
            await service.create_comment(alice, "nested", parent_id=reply.id)

    @pytest.mark.asyncio
    async def test_empty_content_fails(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await service.create_comment(alice, "")

    @pytest.mark.asyncio
    async def test_content_length_boundaries(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        comment = await service.create_comment(alice, "x" * 1000)
        assert len(comment.content) == 1000

        with pytest.raises(ValidationError):
            await service.create_comment(alice, "x" * 1001)

    @pytest.mark.asyncio
    async def test_failed_create_stores_nothing(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotFoundError):
            await service.create_comment(alice, "orphan", parent_id=CommentId(7))

        assert await repo.find_top_level() == []

    @pytest.mark.asyncio
    async def test_create_commits_transaction(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        unit_of_work = await unit_env.get(UnitOfWork)

        await service.create_comment(alice, "hello")

        assert unit_of_work.commits == 1


class TestListTopLevel:
    """Tests for listing comment threads."""

    @pytest.mark.asyncio
    async def test_empty_board(self, unit_env):
        service = await unit_env.get(CommentService)

        assert await service.list_top_level() == []

    @pytest.mark.asyncio
    async def test_lists_threads_oldest_first_with_replies(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(CommentService)
        first = await service.create_comment(alice, "first")
        second = await service.create_comment(bob, "second")
        reply_a = await service.create_comment(bob, "reply a", parent_id=first.id)
        reply_b = await service.create_comment(alice, "reply b", parent_id=first.id)

        # Act
        threads = await service.list_top_level()

        # Assert
        assert [c.id for c in threads] == [first.id, second.id]
        assert [r.id for r in threads[0].replies] == [reply_a.id, reply_b.id]
        assert threads[1].replies == []
        assert all(r.replies == [] for r in threads[0].replies)

    @pytest.mark.asyncio
    async def test_listing_is_served_from_cache(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        backend = await unit_env.get(CacheBackend)
        await service.create_comment(alice, "hello")

        await service.list_top_level()

        assert ALL_COMMENTS_KEY in backend.keys()

    @pytest.mark.asyncio
    async def test_new_comment_invalidates_listing(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        await service.create_comment(alice, "first")
        assert len(await service.list_top_level()) == 1

        await service.create_comment(alice, "second")

        assert len(await service.list_top_level()) == 2


class TestGetComment:
    """Tests for fetching a single comment."""

    @pytest.mark.asyncio
    async def test_get_comment_with_replies(self, unit_env, alice, bob):
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")
        reply = await service.create_comment(bob, "reply", parent_id=parent.id)

        fetched = await service.get_comment(parent.id)

        assert fetched.id == parent.id
        assert [r.id for r in fetched.replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_new_reply_invalidates_cached_parent(self, unit_env, alice, bob):
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")
        assert (await service.get_comment(parent.id)).replies == []

        await service.create_comment(bob, "reply", parent_id=parent.id)

        assert len((await service.get_comment(parent.id)).replies) == 1

    @pytest.mark.asyncio
    async def test_get_missing_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        backend = await unit_env.get(CacheBackend)

        with pytest.raises(NotFoundError):
            await service.get_comment(CommentId(42))

        assert comment_key(CommentId(42)) not in backend.keys()


class TestUpdateComment:
    """Tests for editing comments."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(alice, "before")

        updated = await service.update_comment(comment.id, alice.id, "after")

        assert updated.content == "after"
        assert updated.score == comment.score
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(self, unit_env, alice, bob):
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(alice, "mine")

        with pytest.raises(ForbiddenError):
            await service.update_comment(comment.id, bob.id, "hijacked")

        assert (await service.get_comment(comment.id)).content == "mine"

    @pytest.mark.asyncio
    async def test_update_missing_comment(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.update_comment(CommentId(5), alice.id, "anything")

    @pytest.mark.asyncio
    async def test_update_refreshes_cached_views(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(alice, "before")
        await service.get_comment(comment.id)
        await service.list_top_level()

        await service.update_comment(comment.id, alice.id, "after")

        assert (await service.get_comment(comment.id)).content == "after"
        assert (await service.list_top_level())[0].content == "after"

    @pytest.mark.asyncio
    async def test_updating_reply_refreshes_parent_view(self, unit_env, alice, bob):
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")
        reply = await service.create_comment(bob, "reply", parent_id=parent.id)
        await service.get_comment(parent.id)

        await service.update_comment(reply.id, bob.id, "edited")

        assert (await service.get_comment(parent.id)).replies[0].content == "edited"


class TestDeleteComment:
    """Tests for deleting comments."""

    @pytest.mark.asyncio
    async def test_delete_removes_comment(self, unit_env, alice):
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(alice, "bye")
        await service.get_comment(comment.id)

        await service.delete_comment(comment.id, alice.id)

        with pytest.raises(NotFoundError):
            await service.get_comment(comment.id)

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, unit_env, alice, bob):
        # Arrange
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")
        reply = await service.create_comment(bob, "reply", parent_id=parent.id)
        other = await service.create_comment(bob, "other")

        # Act
        await service.delete_comment(parent.id, alice.id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_comment(reply.id)
        assert [c.id for c in await service.list_top_level()] == [other.id]

    @pytest.mark.asyncio
    async def test_deleting_reply_keeps_parent(self, unit_env, alice, bob):
        service = await unit_env.get(CommentService)
        parent = await service.create_comment(alice, "parent")
        reply = await service.create_comment(bob, "reply", parent_id=parent.id)
        await service.get_comment(parent.id)

        await service.delete_comment(reply.id, bob.id)

        assert (await service.get_comment(parent.id)).replies == []

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env, alice, bob):
        service = await unit_env.get(CommentService)
        comment = await service.create_comment(alice, "mine")

        with pytest.raises(ForbiddenError):
            await service.delete_comment(comment.id, bob.id)

        assert (await service.get_comment(comment.id)).id == comment.id

    @pytest.mark.asyncio
    async def test_delete_missing_comment(self, unit_env, alice):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(3), alice.id)
