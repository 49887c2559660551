"""Strongly typed identifiers for comment board entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. Identifiers are integers
assigned by the storage layer in insertion order.
"""

from typing import NewType

# Core domain entity identifiers
UserId = NewType("UserId", int)
CommentId = NewType("CommentId", int)
