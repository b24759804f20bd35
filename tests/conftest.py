"""
Shared fixtures for the Q&A test suite.

The HTTP tests run against the real application with the database,
the profanity API and the token secret replaced through FastAPI
dependency overrides. No real DB or network is needed.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from app.domain.qa.entities import (
    Account,
    Answer,
    NewAnswer,
    NewQuestion,
    Pagination,
    Question,
)
from app.domain.qa.errors import DatabaseQueryError, QuestionNotFound, WrongPassword
from app.domain.qa.ports import ContentFilterPort
from app.infrastructure.qa.tokens import JwtTokenService
from app.interfaces.qa.dependencies import (
    get_content_filter,
    get_store,
    get_token_service,
)
from app.main import app

TEST_SECRET = "test-secret-key-with-enough-bytes-for-hs256"


class FakeDriverError(Exception):
    """Stand-in for a DBAPI error exposing a SQLSTATE."""

    def __init__(self, message: str, sqlstate: str | int | None) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


def integrity_error(sqlstate: str | int | None, message: str = "constraint violated") -> IntegrityError:
    """Build the SQLAlchemy error a constraint violation surfaces as."""
    return IntegrityError("INSERT INTO accounts", {}, FakeDriverError(message, sqlstate))


class InMemoryStore:
    """In-memory replacement for the PostgreSQL store."""

    def __init__(self) -> None:
        self.questions: dict[int, tuple[Question, int]] = {}
        self.answers: list[Answer] = []
        self.accounts: dict[str, Account] = {}

    def get_questions(self, pagination: Pagination) -> list[Question]:
        ordered = [q for q, _ in sorted(self.questions.values(), key=lambda e: e[0].id)]
        end = None if pagination.limit is None else pagination.offset + pagination.limit
        return ordered[pagination.offset:end]

    def add_question(self, new_question: NewQuestion, account_id: int) -> Question:
        question = Question(
            id=len(self.questions) + 1,
            title=new_question.title,
            content=new_question.content,
            tags=new_question.tags,
        )
        self.questions[question.id] = (question, account_id)
        return question

    def update_question(self, question: Question, question_id: int, account_id: int) -> Question:
        if question_id not in self.questions:
            raise QuestionNotFound()
        self.questions[question_id] = (question, account_id)
        return question

    def delete_question(self, question_id: int, account_id: int) -> bool:
        self.questions.pop(question_id, None)
        return True

    def is_question_owner(self, question_id: int, account_id: int) -> bool:
        entry = self.questions.get(question_id)
        return entry is not None and entry[1] == account_id

    def add_answer(self, new_answer: NewAnswer, account_id: int) -> Answer:
        answer = Answer(
            id=len(self.answers) + 1,
            content=new_answer.content,
            question_id=new_answer.question_id,
        )
        self.answers.append(answer)
        return answer

    def add_account(self, account: Account) -> bool:
        if account.email in self.accounts:
            raise DatabaseQueryError(integrity_error("23505", "duplicate key value"))
        self.accounts[account.email] = Account(
            id=len(self.accounts) + 1, email=account.email, password=account.password
        )
        return True

    def get_account(self, email: str) -> Account:
        if email not in self.accounts:
            raise WrongPassword()
        return self.accounts[email]


class PassThroughFilter(ContentFilterPort):
    """Content filter that masks a single known word."""

    def censor(self, content: str) -> str:
        return content.replace("shoot", "*****")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(secret=TEST_SECRET)


@pytest.fixture
def client(store: InMemoryStore, token_service: JwtTokenService) -> Iterator[TestClient]:
    """TestClient wired to in-memory collaborators."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_content_filter] = lambda: PassThroughFilter()
    app.dependency_overrides[get_token_service] = lambda: token_service
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_header(token_service: JwtTokenService) -> dict[str, str]:
    return {"Authorization": token_service.issue(account_id=1)}
