"""
Q&A Service: questions, answers and accounts over HTTP.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - qa: Questions, answers, registration/login, profanity filtering.

Layers:
    - domain: Entities, ports (ABCs) and the failure taxonomy.
    - application: Use cases and pagination.
    - infrastructure: Adapters (PostgreSQL, bad-words API, argon2, JWT).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (failure classification, CORS, logging).
"""
