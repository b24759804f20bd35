"""
Interfaces layer package.

Contains FastAPI routers and Pydantic schemas. Routes call use cases
and return responses; failures are left to the error handlers.
"""
