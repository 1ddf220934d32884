"""Exception hierarchy for xsrf.

All library exceptions inherit from XsrfException, so a caller can guard a
whole verification step with a single handler or target a specific failure.

Categories:
- ValidationException: structurally malformed input
- SecurityException: well-formed input rejected by a security check

Neither exception ever carries token bytes in its message or context.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class XsrfException(Exception):
    """Base exception for all xsrf errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "XSRF_INVALID_TOKEN").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Categories
# =============================================================================


class ValidationException(XsrfException):
    """Input validation failures."""


class SecurityException(XsrfException):
    """Input was well-formed but failed a security check."""


# =============================================================================
# Token Exceptions
# =============================================================================


class InvalidTokenException(ValidationException):
    """A token string is malformed.

    Raised for a wrong encoded length, characters outside the alphabet, bad
    padding or a wrong decoded byte count. Which check failed is deliberately
    not reported.
    """

    CODE = "XSRF_INVALID_TOKEN"

    def __init__(self, message: str = "invalid xsrf token", context: dict | None = None) -> None:
        super().__init__(message, code=self.CODE, context=context)


class TokenMismatchException(SecurityException):
    """A well-formed request token does not belong to the session token.

    Callers should reject the request, typically with an HTTP 403.
    """

    CODE = "XSRF_TOKEN_MISMATCH"

    def __init__(self, message: str = "xsrf token mismatch", context: dict | None = None) -> None:
        super().__init__(message, code=self.CODE, context=context)
