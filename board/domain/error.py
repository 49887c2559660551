"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when credentials or an access token cannot be verified."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user attempts to mutate content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DuplicateVoteError(DomainError):
    """Raised when a user re-asserts a vote direction they already hold."""

    def __init__(self, comment_id: str, direction: str):
        self.comment_id = comment_id
        self.direction = direction
        super().__init__(f"You already voted {direction} on this comment")


class AlreadyExistsError(DomainError):
    """Raised when a unique field (username, email) is already taken."""

    pass


class StorageFailureError(DomainError):
    """Raised when the durable store is unavailable or times out.

    Callers may retry; the failed operation left no partial state behind.
    """

    pass


class CacheFailureError(DomainError):
    """Raised by cache backends when the cache cannot be reached.

    Never surfaced to callers: the cache service logs it and degrades to a
    miss or a no-op.
    """

    pass


class RateLimitExceededError(DomainError):
    """Raised when a client exceeds its mutation budget for the window."""

    def __init__(self, retry_after: int):
        self.retry_after = retry_after
        super().__init__("Too many requests, please try again later")
