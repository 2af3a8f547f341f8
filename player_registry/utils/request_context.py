"""Utilities for working with request-scoped context metadata.

The application assigns a unique identifier to every inbound HTTP call. The
helpers below wrap the underlying ``ContextVar`` so middleware, exception
handlers and tests share one way of reading and resetting it.
"""

from __future__ import annotations

from contextvars import ContextVar, Token

__all__ = [
    "REQUEST_ID_CONTEXT",
    "clear_request_id",
    "get_request_id",
    "set_request_id",
]

# Each request handler runs in its own task, so the ``ContextVar`` isolates
# identifiers between concurrent requests.
REQUEST_ID_CONTEXT: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(request_id: str) -> Token[str]:
    """Persist the provided request identifier in the context variable.

    The returned token lets tests ``reset`` the context once their assertions
    finish; the middleware ignores it.
    """

    return REQUEST_ID_CONTEXT.set(request_id)


def get_request_id() -> str:
    """Retrieve the current request identifier (empty string when unset)."""

    return REQUEST_ID_CONTEXT.get()


def clear_request_id(token: Token[str] | None = None) -> None:
    """Reset the request identifier to its previous value or an empty string."""

    if token is not None:
        REQUEST_ID_CONTEXT.reset(token)
    else:
        REQUEST_ID_CONTEXT.set("")
