"""
Q&A bounded context: infrastructure adapters.
"""
