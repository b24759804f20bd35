"""
Q&A bounded context: HTTP interface.
"""
