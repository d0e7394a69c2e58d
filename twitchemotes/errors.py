"""Errors raised by the fetch and decode operations.

Every failure surfaces as exactly one of :class:`IoFailure`,
:class:`DecodeFailure` or :class:`TransportFailure`. The underlying error is
kept on ``cause`` (and chained as ``__cause__``) so callers can inspect the
original httpx, pydantic or OS exception.
"""

import traceback

from twitchemotes.constants import ErrorDetails, ErrorKind


class EmoteApiError(Exception):
    """Abstract base, only the three subclasses below are ever raised."""

    kind: ErrorKind

    def __init__(self, cause: BaseException):
        if type(self) is EmoteApiError:
            raise TypeError(
                "EmoteApiError is abstract, raise IoFailure, DecodeFailure or TransportFailure"
            )
        super().__init__(f"{self.kind.value} failure: {type(cause).__name__}: {cause}")
        self.cause = cause
        self.__cause__ = cause

    def details(self) -> ErrorDetails:
        return {
            "type": type(self.cause).__name__,
            "message": str(self.cause),
            "args": self.cause.args,
            "traceback": "".join(traceback.format_exception(self.cause)),
        }


class IoFailure(EmoteApiError):
    """Reading a response body into memory failed."""

    kind = ErrorKind.Io


class DecodeFailure(EmoteApiError):
    """The payload is not JSON or does not match the expected schema."""

    kind = ErrorKind.Decode


class TransportFailure(EmoteApiError):
    """The HTTP request failed or returned a non-2xx status."""

    kind = ErrorKind.Transport
