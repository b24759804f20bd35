"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Failure signals, classification and handlers
- Security middleware (headers, CORS policy)
- Logging configuration
"""
