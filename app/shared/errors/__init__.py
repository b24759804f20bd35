"""
Shared error handling package.

Centralizes failure-to-HTTP mapping so that every failure signal of a
request is answered by a single classifier.
"""
