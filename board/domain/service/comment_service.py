"""Comment domain service."""

from collections import defaultdict

import logfire
from pydantic import TypeAdapter

from board.domain.error import ForbiddenError, NotFoundError, ValidationError
from board.domain.model.comment import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    Comment,
    NewComment,
)
from board.domain.repository import CommentRepository, UnitOfWork
from board.domain.value import CommentId, UserId, UserIdentity

from .base import Service
from .cache_service import ALL_COMMENTS_KEY, CacheService, comment_key

_COMMENT_ADAPTER = TypeAdapter(Comment)
_COMMENT_LIST_ADAPTER = TypeAdapter(list[Comment])


class CommentService(Service):
    """Domain service for comment threads.

    Every mutation commits through the unit of work and then invalidates
    the affected cache entries before returning.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        unit_of_work: UnitOfWork,
        cache_service: CacheService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            unit_of_work: Transaction boundary for the current request
            cache_service: Read-through cache
        """
        self.comment_repository = comment_repository
        self.unit_of_work = unit_of_work
        self.cache_service = cache_service

    async def create_comment(
        self,
        author: UserIdentity,
        content: str,
        parent_id: CommentId | None = None,
        replying_to: str | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply to one.

        Args:
            author: Authenticated author
            content: Sanitized comment content
            parent_id: Top-level comment being replied to (None for top-level)
            replying_to: Display name the reply addresses (rendering only)

        Returns:
            Created comment with score 0

        Raises:
            ValidationError: If content length is out of bounds
            NotFoundError: If parent is missing or is itself a reply
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=author.id,
            parent_id=parent_id,
        ):
            _check_content(content)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent comment not found", parent_id=parent_id)
                    raise NotFoundError("Comment", str(parent_id))
                if not parent.is_top_level:
                    logfire.warn(
                        "Parent comment is a reply",
                        parent_id=parent_id,
                        grandparent_id=parent.parent_id,
                    )
                    raise NotFoundError("Top-level comment", str(parent_id))

            try:
                new_comment = NewComment(
                    author_id=author.id,
                    author_username=author.username,
                    content=content,
                    parent_id=parent_id,
                    replying_to=replying_to,
                )
            except ValueError as e:
                raise ValidationError(str(e)) from e

            async with self.unit_of_work.transaction():
                comment = await self.comment_repository.create(new_comment)

            keys = [ALL_COMMENTS_KEY]
            if parent_id is not None:
                keys.append(comment_key(parent_id))
            await self.cache_service.invalidate(*keys)

            logfire.info(
                "Comment created",
                comment_id=comment.id,
                author_id=author.id,
                parent_id=parent_id,
            )
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment with its replies.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            return await self.cache_service.read_through(
                comment_key(comment_id),
                lambda: self._load_thread(comment_id),
                _COMMENT_ADAPTER,
            )

    async def list_top_level(self) -> list[Comment]:
        """List top-level comments in insertion order, replies attached."""
        with logfire.span("comment_service.list_top_level"):
            return await self.cache_service.read_through(
                ALL_COMMENTS_KEY, self._load_all_threads, _COMMENT_LIST_ADAPTER
            )

    async def update_comment(
        self, comment_id: CommentId, requester_id: UserId, content: str
    ) -> Comment:
        """Replace a comment's content.

        Args:
            comment_id: Comment ID
            requester_id: Authenticated user (must be the author)
            content: New sanitized content

        Returns:
            Updated comment with its replies

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
            ValidationError: If content length is out of bounds
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=comment_id,
            requester_id=requester_id,
        ):
            comment = await self.require_owned(comment_id, requester_id)
            _check_content(content)

            async with self.unit_of_work.transaction():
                updated = await self.comment_repository.update_content(
                    comment_id, content
                )
                if updated is None:
                    raise NotFoundError("Comment", str(comment_id))
                view = await self.with_replies(updated)

            await self.invalidate_thread(comment)

            logfire.info(
                "Comment updated", comment_id=comment_id, content_length=len(content)
            )
            return view

    async def delete_comment(self, comment_id: CommentId, requester_id: UserId) -> None:
        """Delete a comment, its replies and every vote on any of them.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment_id,
            requester_id=requester_id,
        ):
            comment = await self.require_owned(comment_id, requester_id)

            async with self.unit_of_work.transaction():
                deleted_ids = await self.comment_repository.delete_thread(comment_id)
                if not deleted_ids:
                    raise NotFoundError("Comment", str(comment_id))

            await self.invalidate_thread(comment, deleted_ids)

            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                deleted_count=len(deleted_ids),
            )

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Load a comment from the store, bypassing the cache.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=comment_id)
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def require_owned(self, comment_id: CommentId, requester_id: UserId) -> Comment:
        """Load a comment and check the requester authored it.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        comment = await self.require_comment(comment_id)
        if comment.author_id != requester_id:
            logfire.warn(
                "Comment mutation by non-author",
                comment_id=comment_id,
                author_id=comment.author_id,
                requester_id=requester_id,
            )
            raise ForbiddenError("comment", str(comment_id), str(requester_id))
        return comment

    async def adjust_score(self, comment_id: CommentId, delta: int) -> Comment:
        """Atomically add ``delta`` to a comment's score.

        Raises:
            NotFoundError: If the comment was deleted in the meantime
        """
        updated = await self.comment_repository.adjust_score(comment_id, delta)
        if updated is None:
            raise NotFoundError("Comment", str(comment_id))
        return updated

    async def with_replies(self, comment: Comment) -> Comment:
        """Attach replies to a top-level comment."""
        if not comment.is_top_level:
            return comment
        replies = await self.comment_repository.find_replies([comment.id])
        return comment.model_copy(update={"replies": replies})

    async def invalidate_thread(
        self, comment: Comment, removed_ids: list[CommentId] | None = None
    ) -> None:
        """Drop every cached view that embeds ``comment``.

        Args:
            comment: The mutated comment
            removed_ids: Comments deleted together with it (replies)
        """
        keys = {comment_key(comment.id), ALL_COMMENTS_KEY}
        if comment.parent_id is not None:
            keys.add(comment_key(comment.parent_id))
        for removed_id in removed_ids or []:
            keys.add(comment_key(removed_id))
        await self.cache_service.invalidate(*sorted(keys))

    async def _load_thread(self, comment_id: CommentId) -> Comment:
        comment = await self.require_comment(comment_id)
        return await self.with_replies(comment)

    async def _load_all_threads(self) -> list[Comment]:
        top_level = await self.comment_repository.find_top_level()
        if not top_level:
            return []

        replies = await self.comment_repository.find_replies(
            [comment.id for comment in top_level]
        )
        by_parent: dict[CommentId, list[Comment]] = defaultdict(list)
        for reply in replies:
            if reply.parent_id is not None:
                by_parent[reply.parent_id].append(reply)

        logfire.info(
            "Comment threads loaded",
            top_level_count=len(top_level),
            reply_count=len(replies),
        )
        return [
            comment.model_copy(update={"replies": by_parent.get(comment.id, [])})
            for comment in top_level
        ]


def _check_content(content: str) -> None:
    """Re-check content bounds at the persistence boundary."""
    if not CONTENT_MIN_LENGTH <= len(content) <= CONTENT_MAX_LENGTH:
        raise ValidationError(
            f"Comment content must be {CONTENT_MIN_LENGTH}-{CONTENT_MAX_LENGTH} characters"
        )
