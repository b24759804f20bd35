"""
Q&A bounded context: domain layer.

This module contains all domain logic for the Q&A context:
- Questions and answers
- Accounts and sessions
- The failure taxonomy shared by every layer
"""
