"""
Application layer package.

Contains use cases (one class, one execute method each) and request
parsing helpers. Depends on domain ports, never on infrastructure.
"""
