"""
Pydantic schemas for Q&A API request/response validation.

These schemas define the API contract. A body that does not match
them is reported as a malformed body.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

TITLE_MAX_LEN = 255


class NewQuestionRequest(BaseModel):
    """Request schema for creating a question.

    Attributes:
        title: Question title.
        content: Question body.
        tags: Optional list of tags.
    """

    title: str = Field(..., max_length=TITLE_MAX_LEN)
    content: str
    tags: list[str] | None = None


class QuestionRequest(BaseModel):
    """Request schema for replacing a question."""

    id: int
    title: str = Field(..., max_length=TITLE_MAX_LEN)
    content: str
    tags: list[str] | None = None


class QuestionResponse(BaseModel):
    """A stored question in the response."""

    id: int
    title: str
    content: str
    tags: list[str] | None = None


class AccountRequest(BaseModel):
    """Credentials sent to registration and login."""

    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)
