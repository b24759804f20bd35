"""
Adapter: PostgreSQL store for questions, answers and accounts.

Implements QuestionRepository, AnswerRepository and AccountRepository.
Every SQLAlchemy failure is logged and re-raised as DatabaseQueryError
carrying the original exception, so the duplicate-key code of the
driver stays inspectable.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from app.domain.qa.entities import (
    Account,
    Answer,
    NewAnswer,
    NewQuestion,
    Pagination,
    Question,
)
from app.domain.qa.errors import DatabaseQueryError, QuestionNotFound, WrongPassword
from app.domain.qa.ports import AccountRepository, AnswerRepository, QuestionRepository

logger = logging.getLogger(__name__)


def _to_question(row: Row) -> Question:
    return Question(
        id=row.id,
        title=row.title,
        content=row.content,
        tags=list(row.tags) if row.tags is not None else None,
    )


class Store(QuestionRepository, AnswerRepository, AccountRepository):
    """Reads and writes Q&A data in PostgreSQL.

    Args:
        engine: SQLAlchemy engine bound to the Q&A database.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_questions(self, pagination: Pagination) -> list[Question]:
        """Return questions ordered by id.

        Args:
            pagination: Window to return. A None limit returns all rows.

        Returns:
            List of Question entities.
        """
        query = text(
            """
            SELECT id, title, content, tags
            FROM questions
            ORDER BY id
            LIMIT :limit
            OFFSET :offset
            """
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    query, {"limit": pagination.limit, "offset": pagination.offset}
                ).fetchall()
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch questions: %r", exc)
            raise DatabaseQueryError(exc) from exc

        return [_to_question(row) for row in rows]

    def is_question_owner(self, question_id: int, account_id: int) -> bool:
        query = text(
            "SELECT 1 FROM questions WHERE id = :id AND account_id = :account_id"
        )
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    query, {"id": question_id, "account_id": account_id}
                ).first()
        except SQLAlchemyError as exc:
            logger.error("Failed to check question owner: %r", exc)
            raise DatabaseQueryError(exc) from exc
        return row is not None

    def add_question(self, new_question: NewQuestion, account_id: int) -> Question:
        query = text(
            """
            INSERT INTO questions (title, content, tags, account_id)
            VALUES (:title, :content, :tags, :account_id)
            RETURNING id, title, content, tags
            """
        )
        params = {
            "title": new_question.title,
            "content": new_question.content,
            "tags": new_question.tags,
            "account_id": account_id,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(query, params).one()
        except SQLAlchemyError as exc:
            logger.error("Failed to insert question: %r", exc)
            raise DatabaseQueryError(exc) from exc

        logger.info("Question %d added by account %d", row.id, account_id)
        return _to_question(row)

    def update_question(
        self, question: Question, question_id: int, account_id: int
    ) -> Question:
        """Overwrite title, content and tags of an owned question.

        Raises:
            QuestionNotFound: If no question owned by the account has this id.
            DatabaseQueryError: If the update fails.
        """
        query = text(
            """
            UPDATE questions
            SET title = :title, content = :content, tags = :tags
            WHERE id = :id AND account_id = :account_id
            RETURNING id, title, content, tags
            """
        )
        params = {
            "title": question.title,
            "content": question.content,
            "tags": question.tags,
            "id": question_id,
            "account_id": account_id,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(query, params).first()
        except SQLAlchemyError as exc:
            logger.error("Failed to update question %d: %r", question_id, exc)
            raise DatabaseQueryError(exc) from exc

        if row is None:
            raise QuestionNotFound()
        return _to_question(row)

    def delete_question(self, question_id: int, account_id: int) -> bool:
        query = text("DELETE FROM questions WHERE id = :id AND account_id = :account_id")
        try:
            with self._engine.begin() as conn:
                conn.execute(query, {"id": question_id, "account_id": account_id})
        except SQLAlchemyError as exc:
            logger.error("Failed to delete question %d: %r", question_id, exc)
            raise DatabaseQueryError(exc) from exc
        return True

    def add_answer(self, new_answer: NewAnswer, account_id: int) -> Answer:
        query = text(
            """
            INSERT INTO answers (content, corresponding_question, account_id)
            VALUES (:content, :question_id, :account_id)
            RETURNING id, content, corresponding_question
            """
        )
        params = {
            "content": new_answer.content,
            "question_id": new_answer.question_id,
            "account_id": account_id,
        }
        try:
            with self._engine.begin() as conn:
                row = conn.execute(query, params).one()
        except SQLAlchemyError as exc:
            logger.error("Failed to insert answer: %r", exc)
            raise DatabaseQueryError(exc) from exc

        return Answer(id=row.id, content=row.content, question_id=row.corresponding_question)

    def add_account(self, account: Account) -> bool:
        """Insert an account. A taken e-mail surfaces as a unique violation."""
        query = text("INSERT INTO accounts (email, password) VALUES (:email, :password)")
        try:
            with self._engine.begin() as conn:
                conn.execute(query, {"email": account.email, "password": account.password})
        except SQLAlchemyError as exc:
            logger.error("Failed to insert account: %r", exc)
            raise DatabaseQueryError(exc) from exc
        return True

    def get_account(self, email: str) -> Account:
        """Return the stored account for an e-mail.

        Raises:
            WrongPassword: If no account uses this e-mail.
            DatabaseQueryError: If the lookup fails.
        """
        query = text("SELECT id, email, password FROM accounts WHERE email = :email")
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query, {"email": email}).first()
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch account: %r", exc)
            raise DatabaseQueryError(exc) from exc

        if row is None:
            raise WrongPassword()
        return Account(id=row.id, email=row.email, password=row.password)
