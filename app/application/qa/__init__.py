"""
Q&A bounded context: application layer (use cases).
"""
