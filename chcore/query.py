"""Queries, their settings and the events they receive."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

DataCallback = Callable[[Any], None]
CancelableDataCallback = Callable[[Any], bool]


@dataclass
class QuerySettings:
    """Settings of an individual query."""

    max_threads: int = 0
    """Maximum number of threads for query execution; 0 chooses automatically."""
    extremes: bool = False
    """Calculate minimum and maximum values of each column."""
    skip_unavailable_shards: bool = False
    """Silently skip unavailable shards."""
    output_format_write_statistics: bool = True
    """Write statistics about rows read, bytes, time elapsed and so on."""
    use_client_time_zone: bool = False
    """Interpret DateTime strings in the client's timezone."""


@dataclass
class ExceptionInfo:
    """An exception reported by the server."""

    code: int = 0
    name: str = ""
    display_text: str = ""
    stack_trace: str = ""
    nested: Optional["ExceptionInfo"] = None


@dataclass
class Profile:
    """Profiling information about a query."""

    rows: int = 0
    blocks: int = 0
    bytes: int = 0
    rows_before_limit: int = 0
    applied_limit: bool = False
    calculated_rows_before_limit: bool = False


@dataclass
class Progress:
    """Progress of query execution."""

    rows: int = 0
    bytes: int = 0
    total_rows: int = 0


ExceptionCallback = Callable[[ExceptionInfo], None]
ProgressCallback = Callable[[Progress], None]


class QueryEvents(ABC):
    """Receiver of everything the server sends back for a query."""

    @abstractmethod
    def data_received(self, block: Any) -> None:
        """Some data has been received."""

    @abstractmethod
    def data_received_cancelable(self, block: Any) -> bool:
        """Some data has been received; return False to cancel the query."""

    @abstractmethod
    def extremes_received(self, block: Any) -> None:
        """A block with extremes values has been received."""

    @abstractmethod
    def server_exception_received(self, exception: ExceptionInfo) -> None:
        """The server reported an exception."""

    @abstractmethod
    def profile_received(self, profile: Profile) -> None:
        """Profiling information has been received."""

    @abstractmethod
    def progress_received(self, progress: Progress) -> None:
        """Execution progress has been received."""

    @abstractmethod
    def finished(self) -> None:
        """All packets for the query were received."""

    @abstractmethod
    def totals_received(self, block: Any) -> None:
        """A block with totals values has been received."""


class Query(QueryEvents):
    """A query text with optional handlers for the server's replies.

    The ``on_*`` methods set a handler and return the query, so they chain.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._exception_cb: Optional[ExceptionCallback] = None
        self._progress_cb: Optional[ProgressCallback] = None
        self._select_cb: Optional[DataCallback] = None
        self._select_cancelable_cb: Optional[CancelableDataCallback] = None
        self._totals_cb: Optional[DataCallback] = None
        self._extremes_cb: Optional[DataCallback] = None
        self._profile: Optional[Profile] = None
        self._finished = False

    @property
    def text(self) -> str:
        """The query text."""
        return self._text

    @property
    def profile(self) -> Optional[Profile]:
        """The last profiling information received, if any."""
        return self._profile

    @property
    def is_finished(self) -> bool:
        """Whether the end of the query's replies has been received."""
        return self._finished

    def __repr__(self) -> str:
        return f"Query({self._text!r})"

    def on_data(self, callback: DataCallback) -> Query:
        """Set the handler for result data."""
        self._select_cb = callback
        return self

    def on_data_cancelable(self, callback: CancelableDataCallback) -> Query:
        """Set a handler for result data that may return False to cancel."""
        self._select_cancelable_cb = callback
        return self

    def on_exception(self, callback: ExceptionCallback) -> Query:
        """Set the handler for the server's exception."""
        self._exception_cb = callback
        return self

    def on_extremes(self, callback: DataCallback) -> Query:
        """Set the handler for extremes values."""
        self._extremes_cb = callback
        return self

    def on_progress(self, callback: ProgressCallback) -> Query:
        """Set the handler for execution progress."""
        self._progress_cb = callback
        return self

    def on_totals(self, callback: DataCallback) -> Query:
        """Set the handler for totals values."""
        self._totals_cb = callback
        return self

    def data_received(self, block: Any) -> None:
        if self._select_cb is not None:
            self._select_cb(block)

    def data_received_cancelable(self, block: Any) -> bool:
        if self._select_cancelable_cb is not None:
            return self._select_cancelable_cb(block)
        return True

    def extremes_received(self, block: Any) -> None:
        if self._extremes_cb is not None:
            self._extremes_cb(block)

    def server_exception_received(self, exception: ExceptionInfo) -> None:
        if self._exception_cb is not None:
            self._exception_cb(exception)

    def profile_received(self, profile: Profile) -> None:
        """Keep the profiling information for later inspection."""
        self._profile = profile

    def progress_received(self, progress: Progress) -> None:
        if self._progress_cb is not None:
            self._progress_cb(progress)

    def finished(self) -> None:
        """Mark the query as finished."""
        self._finished = True

    def totals_received(self, block: Any) -> None:
        if self._totals_cb is not None:
            self._totals_cb(block)