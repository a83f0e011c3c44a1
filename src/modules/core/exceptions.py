"""Base domain exceptions shared by every module.

Module-specific exceptions subclass one of these two so the API layer
can tell request errors (400) from missing records (404).  Store
failures are ``pymongo.errors.PyMongoError`` and are never caught by
application code.
"""

from __future__ import annotations


class InvalidRequest(Exception):
    """The request cannot be served as given (malformed id, blocked delete)."""


class NotFound(Exception):
    """A well-formed identifier matched no record."""
