"""
Use case: Add an answer to a question.

Input: Session, NewAnswer
Output: Answer
Side effects: Calls the content filter, writes to the store.
Failure cases: DatabaseQueryError, External* errors from the content filter.
"""

from app.domain.qa.entities import Answer, NewAnswer, Session
from app.domain.qa.ports import AnswerRepository, ContentFilterPort


class AddAnswerUseCase:
    """Censors and stores an answer for the session's account."""

    def __init__(
        self, answer_repo: AnswerRepository, content_filter: ContentFilterPort
    ) -> None:
        self._answer_repo = answer_repo
        self._content_filter = content_filter

    def execute(self, session: Session, new_answer: NewAnswer) -> Answer:
        content = self._content_filter.censor(new_answer.content)
        censored = NewAnswer(content=content, question_id=new_answer.question_id)
        return self._answer_repo.add_answer(censored, session.account_id)
