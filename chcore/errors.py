"""Exceptions raised for errors reported by the server."""

from __future__ import annotations

from chcore.query import ExceptionInfo


class ServerException(RuntimeError):
    """The server answered a query with an exception."""

    def __init__(self, exception: ExceptionInfo) -> None:
        super().__init__(exception.display_text)
        self._exception = exception

    @property
    def code(self) -> int:
        """The server's error code."""
        return self._exception.code

    @property
    def exception(self) -> ExceptionInfo:
        """Full details of the server's exception."""
        return self._exception

    def __str__(self) -> str:
        return self._exception.display_text