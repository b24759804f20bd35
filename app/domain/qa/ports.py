"""
Port interfaces (ABCs) for the Q&A bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces and raise the errors
from app.domain.qa.errors on failure.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.qa.entities import (
    Account,
    Answer,
    NewAnswer,
    NewQuestion,
    Pagination,
    Question,
    Session,
)


class QuestionRepository(ABC):
    """Port for persisting and retrieving questions."""

    @abstractmethod
    def get_questions(self, pagination: Pagination) -> list[Question]:
        """Return questions ordered by id within the pagination window."""
        raise NotImplementedError

    @abstractmethod
    def add_question(self, new_question: NewQuestion, account_id: int) -> Question:
        """Persist a question on behalf of an account."""
        raise NotImplementedError

    @abstractmethod
    def update_question(
        self, question: Question, question_id: int, account_id: int
    ) -> Question:
        """Overwrite a question. Raises QuestionNotFound when absent."""
        raise NotImplementedError

    @abstractmethod
    def delete_question(self, question_id: int, account_id: int) -> bool:
        """Delete a question owned by the account."""
        raise NotImplementedError

    @abstractmethod
    def is_question_owner(self, question_id: int, account_id: int) -> bool:
        """Return True when the account created the question."""
        raise NotImplementedError


class AnswerRepository(ABC):
    """Port for persisting answers."""

    @abstractmethod
    def add_answer(self, new_answer: NewAnswer, account_id: int) -> Answer:
        """Persist an answer on behalf of an account."""
        raise NotImplementedError


class AccountRepository(ABC):
    """Port for persisting and retrieving accounts."""

    @abstractmethod
    def add_account(self, account: Account) -> bool:
        """Persist an account whose password is already hashed."""
        raise NotImplementedError

    @abstractmethod
    def get_account(self, email: str) -> Account:
        """Return the account for an e-mail. Raises WrongPassword when absent."""
        raise NotImplementedError


class ContentFilterPort(ABC):
    """Port for censoring user-submitted text."""

    @abstractmethod
    def censor(self, content: str) -> str:
        """Return the content with offensive words masked."""
        raise NotImplementedError


class PasswordHasherPort(ABC):
    """Port for hashing and verifying passwords."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash. Raises CredentialHashingError."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, encoded_hash: str, password: str) -> bool:
        """Return whether the password matches. Raises CredentialHashingError."""
        raise NotImplementedError


class TokenPort(ABC):
    """Port for issuing and decoding session tokens."""

    @abstractmethod
    def issue(self, account_id: int) -> str:
        """Return a signed token for the account."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> Session:
        """Decode a token. Raises CannotDecryptToken when invalid."""
        raise NotImplementedError
