"""
Domain entities for the Q&A bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Question:
    """A stored question owned by an account."""

    id: int
    title: str
    content: str
    tags: list[str] | None = None


@dataclass(frozen=True)
class NewQuestion:
    """A question that has not been persisted yet."""

    title: str
    content: str
    tags: list[str] | None = None


@dataclass(frozen=True)
class Answer:
    """A stored answer attached to a question."""

    id: int
    content: str
    question_id: int


@dataclass(frozen=True)
class NewAnswer:
    """An answer that has not been persisted yet."""

    content: str
    question_id: int


@dataclass(frozen=True)
class Account:
    """Login credentials for a registered account.

    Attributes:
        email: Unique e-mail address.
        password: Password hash when loaded from storage,
            plain text when supplied by a client.
        id: Database id, None before registration.
    """

    email: str
    password: str = field(repr=False)
    id: int | None = None


@dataclass(frozen=True)
class Session:
    """Decoded content of a valid session token."""

    account_id: int
    expires_at: int


@dataclass(frozen=True)
class Pagination:
    """Window over the question list.

    Attributes:
        limit: Maximum number of questions, None for all.
        offset: Number of questions to skip.
    """

    limit: int | None = None
    offset: int = 0
