"""Centralized exceptions for the Pagesmith application."""


class PagesmithError(Exception):
    """Base exception for all Pagesmith errors."""
