"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from board.application.usecase.comment import CommentResponse
from board.application.usecase.vote import ApplyVoteRequest, ApplyVoteUseCase
from board.domain.value import VoteDirection

from .dependencies import MutatingUser

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting: ``{"vote": "up"}`` or ``{"vote": "down"}``."""

    vote: VoteDirection


@router.post("/comments/{comment_id}/vote", response_model=CommentResponse)
async def vote_comment(
    comment_id: int,
    voter: MutatingUser,
    request: VoteAPIRequest,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
) -> CommentResponse:
    """Vote a comment up or down.

    A first vote moves the score by one, switching direction moves it by
    two, and repeating the current direction is rejected with 400.
    """
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            comment_id=comment_id, user_id=voter.id, direction=request.vote
        )
    )
