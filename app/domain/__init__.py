"""
Domain layer package.

Contains entities, port interfaces and the failure taxonomy every
other layer raises. No framework imports, no IO, no side effects.
"""
