"""Centralized exceptions for postindex."""


class PostIndexError(Exception):
    """Base exception for all postindex errors."""
