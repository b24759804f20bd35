"""
Dependency injection for the Q&A bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the Q&A context.
"""

from datetime import timedelta
from functools import lru_cache

import httpx
from fastapi import Depends, Header
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

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
from app.core.config import settings
from app.domain.qa.entities import Session
from app.domain.qa.errors import CannotDecryptToken
from app.domain.qa.ports import ContentFilterPort, TokenPort
from app.infrastructure.qa.passwords import Argon2PasswordHasher
from app.infrastructure.qa.profanity import ProfanityFilter
from app.infrastructure.qa.store import Store
from app.infrastructure.qa.tokens import JwtTokenService

BEARER_PREFIX = "bearer "


@lru_cache
def get_db_engine() -> Engine:
    """Build a SQLAlchemy engine from application settings."""
    return create_engine(settings.get_database_url(), pool_pre_ping=True)


@lru_cache
def get_http_client() -> httpx.Client:
    """Shared HTTP client for third-party APIs."""
    return httpx.Client(timeout=settings.external_api_timeout)


def get_store(engine: Engine = Depends(get_db_engine)) -> Store:
    return Store(engine=engine)


def get_content_filter(
    client: httpx.Client = Depends(get_http_client),
) -> ContentFilterPort:
    return ProfanityFilter(
        client=client,
        api_url=settings.bad_words_api_url,
        api_key=settings.bad_words_api_key or "",
        max_retries=settings.external_api_max_retries,
    )


def get_token_service() -> TokenPort:
    return JwtTokenService(
        secret=settings.token_secret or "",
        ttl=timedelta(days=settings.token_ttl_days),
    )


def require_session(
    authorization: str | None = Header(default=None),
    tokens: TokenPort = Depends(get_token_service),
) -> Session:
    """Resolve the caller's session from the Authorization header.

    Accepts either a bare token or a `Bearer <token>` value.

    Raises:
        CannotDecryptToken: If the header is missing or the token is invalid.
    """
    if not authorization:
        raise CannotDecryptToken()
    token = authorization
    if token.lower().startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):]
    return VerifySessionUseCase(tokens=tokens).execute(token.strip())


def get_list_questions_use_case(store: Store = Depends(get_store)) -> ListQuestionsUseCase:
    return ListQuestionsUseCase(question_repo=store)


def get_add_question_use_case(
    store: Store = Depends(get_store),
    content_filter: ContentFilterPort = Depends(get_content_filter),
) -> AddQuestionUseCase:
    return AddQuestionUseCase(question_repo=store, content_filter=content_filter)


def get_update_question_use_case(
    store: Store = Depends(get_store),
    content_filter: ContentFilterPort = Depends(get_content_filter),
) -> UpdateQuestionUseCase:
    return UpdateQuestionUseCase(question_repo=store, content_filter=content_filter)


def get_delete_question_use_case(
    store: Store = Depends(get_store),
) -> DeleteQuestionUseCase:
    return DeleteQuestionUseCase(question_repo=store)


def get_add_answer_use_case(
    store: Store = Depends(get_store),
    content_filter: ContentFilterPort = Depends(get_content_filter),
) -> AddAnswerUseCase:
    return AddAnswerUseCase(answer_repo=store, content_filter=content_filter)


def get_register_use_case(store: Store = Depends(get_store)) -> RegisterUseCase:
    return RegisterUseCase(account_repo=store, hasher=Argon2PasswordHasher())


def get_login_use_case(
    store: Store = Depends(get_store),
    tokens: TokenPort = Depends(get_token_service),
) -> LoginUseCase:
    return LoginUseCase(account_repo=store, hasher=Argon2PasswordHasher(), tokens=tokens)
