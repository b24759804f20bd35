"""
Tests for the Q&A application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration and that failures propagate unchanged.
"""

from unittest.mock import MagicMock

import pytest

from app.application.qa.answers import AddAnswerUseCase
from app.application.qa.authentication import (
    LoginUseCase,
    RegisterUseCase,
    VerifySessionUseCase,
)
from app.application.qa.questions import (
    AddQuestionUseCase,
    DeleteQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from app.domain.qa.entities import (
    Account,
    Answer,
    NewAnswer,
    NewQuestion,
    Pagination,
    Question,
    Session,
)
from app.domain.qa.errors import (
    CannotDecryptToken,
    ExternalClientError,
    ExternalFailure,
    Unauthorized,
    WrongPassword,
)
from app.domain.qa.ports import (
    AccountRepository,
    AnswerRepository,
    ContentFilterPort,
    PasswordHasherPort,
    QuestionRepository,
    TokenPort,
)

SESSION = Session(account_id=7, expires_at=0)


@pytest.fixture
def question_repo() -> MagicMock:
    return MagicMock(spec=QuestionRepository)


@pytest.fixture
def content_filter() -> MagicMock:
    port = MagicMock(spec=ContentFilterPort)
    port.censor.side_effect = lambda text: text.upper()
    return port


class TestListQuestionsUseCase:
    """Tests for the ListQuestionsUseCase."""

    def test_delegates_pagination(self, question_repo) -> None:
        question_repo.get_questions.return_value = []
        ListQuestionsUseCase(question_repo).execute(Pagination(limit=2, offset=4))
        question_repo.get_questions.assert_called_once_with(Pagination(limit=2, offset=4))


class TestAddQuestionUseCase:
    """Tests for the AddQuestionUseCase."""

    def test_censors_title_and_content(self, question_repo, content_filter) -> None:
        use_case = AddQuestionUseCase(question_repo, content_filter)
        use_case.execute(SESSION, NewQuestion(title="title", content="body", tags=["a"]))

        question_repo.add_question.assert_called_once_with(
            NewQuestion(title="TITLE", content="BODY", tags=["a"]), 7
        )

    def test_filter_failure_propagates(self, question_repo, content_filter) -> None:
        error = ExternalClientError(ExternalFailure(401, "No API key"))
        content_filter.censor.side_effect = error

        with pytest.raises(ExternalClientError) as exc_info:
            AddQuestionUseCase(question_repo, content_filter).execute(
                SESSION, NewQuestion(title="t", content="c")
            )
        assert exc_info.value is error
        question_repo.add_question.assert_not_called()


class TestUpdateQuestionUseCase:
    """Tests for the UpdateQuestionUseCase."""

    def test_non_owner_is_unauthorized(self, question_repo, content_filter) -> None:
        question_repo.is_question_owner.return_value = False

        with pytest.raises(Unauthorized):
            UpdateQuestionUseCase(question_repo, content_filter).execute(
                SESSION, 3, Question(id=3, title="t", content="c")
            )
        content_filter.censor.assert_not_called()

    def test_owner_updates_censored_question(self, question_repo, content_filter) -> None:
        question_repo.is_question_owner.return_value = True
        question_repo.update_question.side_effect = lambda q, qid, aid: q

        result = UpdateQuestionUseCase(question_repo, content_filter).execute(
            SESSION, 3, Question(id=99, title="t", content="c")
        )

        assert result == Question(id=3, title="T", content="C")
        question_repo.update_question.assert_called_once_with(result, 3, 7)


class TestDeleteQuestionUseCase:
    """Tests for the DeleteQuestionUseCase."""

    def test_owner_deletes(self, question_repo) -> None:
        question_repo.is_question_owner.return_value = True
        message = DeleteQuestionUseCase(question_repo).execute(SESSION, 5)
        assert message == "Question 5 deleted"
        question_repo.delete_question.assert_called_once_with(5, 7)

    def test_non_owner_is_unauthorized(self, question_repo) -> None:
        question_repo.is_question_owner.return_value = False
        with pytest.raises(Unauthorized):
            DeleteQuestionUseCase(question_repo).execute(SESSION, 5)
        question_repo.delete_question.assert_not_called()


class TestAddAnswerUseCase:
    """Tests for the AddAnswerUseCase."""

    def test_censors_content(self, content_filter) -> None:
        answer_repo = MagicMock(spec=AnswerRepository)
        answer_repo.add_answer.return_value = Answer(id=1, content="HI", question_id=2)

        AddAnswerUseCase(answer_repo, content_filter).execute(
            SESSION, NewAnswer(content="hi", question_id=2)
        )

        answer_repo.add_answer.assert_called_once_with(NewAnswer(content="HI", question_id=2), 7)


class TestAuthenticationUseCases:
    """Tests for registration, login and session verification."""

    def test_register_stores_hash(self) -> None:
        repo = MagicMock(spec=AccountRepository)
        hasher = MagicMock(spec=PasswordHasherPort)
        hasher.hash.return_value = "$argon2id$hash"

        RegisterUseCase(repo, hasher).execute(Account(email="a@b.c", password="pw"))

        repo.add_account.assert_called_once_with(Account(email="a@b.c", password="$argon2id$hash"))

    def test_login_wrong_password(self) -> None:
        repo = MagicMock(spec=AccountRepository)
        repo.get_account.return_value = Account(id=1, email="a@b.c", password="$hash")
        hasher = MagicMock(spec=PasswordHasherPort)
        hasher.verify.return_value = False
        tokens = MagicMock(spec=TokenPort)

        with pytest.raises(WrongPassword):
            LoginUseCase(repo, hasher, tokens).execute(Account(email="a@b.c", password="nope"))
        tokens.issue.assert_not_called()

    def test_login_issues_token(self) -> None:
        repo = MagicMock(spec=AccountRepository)
        repo.get_account.return_value = Account(id=4, email="a@b.c", password="$hash")
        hasher = MagicMock(spec=PasswordHasherPort)
        hasher.verify.return_value = True
        tokens = MagicMock(spec=TokenPort)
        tokens.issue.return_value = "token"

        token = LoginUseCase(repo, hasher, tokens).execute(Account(email="a@b.c", password="pw"))

        assert token == "token"
        hasher.verify.assert_called_once_with("$hash", "pw")
        tokens.issue.assert_called_once_with(4)

    def test_verify_session_propagates_decrypt_failure(self) -> None:
        tokens = MagicMock(spec=TokenPort)
        tokens.verify.side_effect = CannotDecryptToken()
        with pytest.raises(CannotDecryptToken):
            VerifySessionUseCase(tokens).execute("garbage")
