"""
Use cases: list, add, update and delete questions.

Submitted title and content pass through the content filter before
they are stored. Changes require the session's account to own the
question.
Failure cases: Unauthorized, QuestionNotFound, DatabaseQueryError,
External* errors from the content filter.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from app.domain.qa.entities import NewQuestion, Pagination, Question, Session
from app.domain.qa.errors import Unauthorized
from app.domain.qa.ports import ContentFilterPort, QuestionRepository

logger = logging.getLogger(__name__)


def _censor_title_and_content(
    content_filter: ContentFilterPort, title: str, content: str
) -> tuple[str, str]:
    """Censor both fields concurrently. A title failure is reported first."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        title_future = executor.submit(content_filter.censor, title)
        content_future = executor.submit(content_filter.censor, content)
        return title_future.result(), content_future.result()


class ListQuestionsUseCase:
    """Returns a page of questions."""

    def __init__(self, question_repo: QuestionRepository) -> None:
        self._question_repo = question_repo

    def execute(self, pagination: Pagination) -> list[Question]:
        logger.info(
            "Listing questions limit=%s offset=%d", pagination.limit, pagination.offset
        )
        return self._question_repo.get_questions(pagination)


class AddQuestionUseCase:
    """Censors and stores a new question for the session's account."""

    def __init__(
        self, question_repo: QuestionRepository, content_filter: ContentFilterPort
    ) -> None:
        self._question_repo = question_repo
        self._content_filter = content_filter

    def execute(self, session: Session, new_question: NewQuestion) -> Question:
        title, content = _censor_title_and_content(
            self._content_filter, new_question.title, new_question.content
        )
        censored = NewQuestion(title=title, content=content, tags=new_question.tags)
        return self._question_repo.add_question(censored, session.account_id)


class UpdateQuestionUseCase:
    """Censors and overwrites a question owned by the session's account."""

    def __init__(
        self, question_repo: QuestionRepository, content_filter: ContentFilterPort
    ) -> None:
        self._question_repo = question_repo
        self._content_filter = content_filter

    def execute(self, session: Session, question_id: int, question: Question) -> Question:
        """Run the update.

        Args:
            session: Authenticated caller.
            question_id: Id taken from the request path.
            question: New title, content and tags.

        Returns:
            The stored question.

        Raises:
            Unauthorized: If the caller does not own the question.
        """
        if not self._question_repo.is_question_owner(question_id, session.account_id):
            raise Unauthorized()

        title, content = _censor_title_and_content(
            self._content_filter, question.title, question.content
        )
        censored = Question(id=question_id, title=title, content=content, tags=question.tags)
        return self._question_repo.update_question(
            censored, question_id, session.account_id
        )


class DeleteQuestionUseCase:
    """Deletes a question owned by the session's account."""

    def __init__(self, question_repo: QuestionRepository) -> None:
        self._question_repo = question_repo

    def execute(self, session: Session, question_id: int) -> str:
        if not self._question_repo.is_question_owner(question_id, session.account_id):
            raise Unauthorized()

        self._question_repo.delete_question(question_id, session.account_id)
        logger.info("Question %d deleted by account %d", question_id, session.account_id)
        return f"Question {question_id} deleted"
