"""Vote use cases."""

from .apply_vote import ApplyVoteRequest, ApplyVoteUseCase

__all__ = ["ApplyVoteRequest", "ApplyVoteUseCase"]
