"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import AliasChoices, BaseModel, Field

from board.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from board.domain.model.comment import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    REPLYING_TO_MAX_LENGTH,
)

from .dependencies import CurrentUser, MutatingUser

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Accepts both snake_case and camelCase field names.
    """

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    parent_id: int | None = Field(
        default=None, gt=0, validation_alias=AliasChoices("parent_id", "parentId")
    )
    replying_to: str | None = Field(
        default=None,
        max_length=REPLYING_TO_MAX_LENGTH,
        validation_alias=AliasChoices("replying_to", "replyingTo"),
    )


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    author: MutatingUser,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentResponse:
    """Create a top-level comment or a reply.

    Requires authentication. A reply's ``parent_id`` must reference a
    top-level comment.
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            author=author,
            content=request.content,
            parent_id=request.parent_id,
            replying_to=request.replying_to,
        )
    )


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    _: CurrentUser,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> list[CommentResponse]:
    """List top-level comments oldest first, each with its replies."""
    return await list_comments_use_case.execute()


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: int,
    _: CurrentUser,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentResponse:
    """Get one comment with its replies."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    user: MutatingUser,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> CommentResponse:
    """Replace a comment's content. Only the author may edit."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user.id, content=request.content
        )
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: int,
    user: MutatingUser,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> Response:
    """Delete a comment, its replies and all their votes. Only the author may delete."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user.id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
