"""
FastAPI router for the Q&A bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Failures are answered by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse

from app.application.qa.answers import AddAnswerUseCase
from app.application.qa.authentication import LoginUseCase, RegisterUseCase
from app.application.qa.pagination import extract_pagination
from app.application.qa.questions import (
    AddQuestionUseCase,
    DeleteQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from app.domain.qa.entities import Account, NewAnswer, NewQuestion, Question, Session
from app.interfaces.qa.dependencies import (
    get_add_answer_use_case,
    get_add_question_use_case,
    get_delete_question_use_case,
    get_list_questions_use_case,
    get_login_use_case,
    get_register_use_case,
    get_update_question_use_case,
    require_session,
)
from app.interfaces.qa.schemas import (
    AccountRequest,
    NewQuestionRequest,
    QuestionRequest,
    QuestionResponse,
)

router = APIRouter(tags=["qa"])


def _to_response(question: Question) -> QuestionResponse:
    return QuestionResponse(
        id=question.id,
        title=question.title,
        content=question.content,
        tags=question.tags,
    )


@router.get(
    "/questions",
    response_model=list[QuestionResponse],
    summary="List questions",
    description="Return all questions, or a window of them when limit and offset are given.",
)
def get_questions(
    request: Request,
    use_case: ListQuestionsUseCase = Depends(get_list_questions_use_case),
) -> list[QuestionResponse]:
    """List questions with optional pagination."""
    pagination = extract_pagination(dict(request.query_params))
    return [_to_response(q) for q in use_case.execute(pagination)]


@router.post("/questions", response_class=PlainTextResponse, summary="Add a question")
def add_question(
    body: NewQuestionRequest,
    session: Session = Depends(require_session),
    use_case: AddQuestionUseCase = Depends(get_add_question_use_case),
) -> str:
    """Store a censored question for the caller."""
    use_case.execute(
        session, NewQuestion(title=body.title, content=body.content, tags=body.tags)
    )
    return "Question added"


@router.put(
    "/questions/{question_id}",
    response_model=QuestionResponse,
    summary="Update a question",
)
def update_question(
    question_id: int,
    body: QuestionRequest,
    session: Session = Depends(require_session),
    use_case: UpdateQuestionUseCase = Depends(get_update_question_use_case),
) -> QuestionResponse:
    """Replace a question owned by the caller."""
    question = Question(id=body.id, title=body.title, content=body.content, tags=body.tags)
    return _to_response(use_case.execute(session, question_id, question))


@router.delete(
    "/questions/{question_id}",
    response_class=PlainTextResponse,
    summary="Delete a question",
)
def delete_question(
    question_id: int,
    session: Session = Depends(require_session),
    use_case: DeleteQuestionUseCase = Depends(get_delete_question_use_case),
) -> str:
    """Delete a question owned by the caller."""
    return use_case.execute(session, question_id)


@router.post("/answers", response_class=PlainTextResponse, summary="Add an answer")
def add_answer(
    content: str = Form(...),
    question_id: int = Form(...),
    session: Session = Depends(require_session),
    use_case: AddAnswerUseCase = Depends(get_add_answer_use_case),
) -> str:
    """Store a censored answer for the caller."""
    use_case.execute(session, NewAnswer(content=content, question_id=question_id))
    return "Answer added"


@router.post("/registration", response_model=bool, summary="Register an account")
def register(
    body: AccountRequest,
    use_case: RegisterUseCase = Depends(get_register_use_case),
) -> bool:
    """Create an account. A taken e-mail answers 422 "Account already exists"."""
    return use_case.execute(Account(email=body.email, password=body.password))


@router.post("/login", response_model=str, summary="Log in")
def login(
    body: AccountRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> str:
    """Exchange credentials for a session token."""
    return use_case.execute(Account(email=body.email, password=body.password))
