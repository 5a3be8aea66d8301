"""
Application layer.

Use cases orchestrate domain objects and repository protocols. Each use
case is one business operation and one transaction.
"""
