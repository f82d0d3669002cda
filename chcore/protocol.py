"""Packet codes, protocol flags and server error codes."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ServerCode(IntEnum):
    """Packet types that the server transmits."""

    HELLO = 0
    """Name, version, revision."""
    DATA = 1
    """A block of data, compressed or not."""
    EXCEPTION = 2
    """An exception raised during query execution."""
    PROGRESS = 3
    """Query execution progress: rows read, bytes read."""
    PONG = 4
    """Ping response."""
    END_OF_STREAM = 5
    """All packets were transmitted."""
    PROFILE_INFO = 6
    """A packet with profiling info."""
    TOTALS = 7
    """A block of data with totals."""
    EXTREMES = 8
    """A block of data with minimums and maximums."""


@unique
class ClientCode(IntEnum):
    """Packet types that the client transmits."""

    HELLO = 0
    """Name, version, revision, default database."""
    QUERY = 1
    """Query id, settings, stage, compression flag and query text."""
    DATA = 2
    """A block of data, compressed or not."""
    CANCEL = 3
    """Cancel the query execution."""
    PING = 4
    """Check that the connection to the server is alive."""


@unique
class CompressionState(IntEnum):
    """Whether compression must be used."""

    DISABLE = 0
    ENABLE = 1


@unique
class Stage(IntEnum):
    """Stage up to which a query must be executed."""

    COMPLETE = 2


@unique
class ErrorCode(IntEnum):
    """Error codes reported by the server."""

    CHECKSUM_DOESNT_MATCH = 40
    CANNOT_PARSE_DATETIME = 41
    UNKNOWN_FUNCTION = 46
    UNKNOWN_IDENTIFIER = 47
    TABLE_ALREADY_EXISTS = 57
    UNKNOWN_TABLE = 60
    SYNTAX_ERROR = 62
    UNKNOWN_DATABASE = 81
    DATABASE_ALREADY_EXISTS = 82
    UNKNOWN_PACKET_FROM_CLIENT = 99
    UNEXPECTED_PACKET_FROM_CLIENT = 101
    RECEIVED_DATA_FOR_WRONG_QUERY_ID = 103
    ENGINE_REQUIRED = 119
    READONLY = 164
    UNKNOWN_USER = 192
    WRONG_PASSWORD = 193
    REQUIRED_PASSWORD = 194
    IP_ADDRESS_NOT_ALLOWED = 195
    LIMIT_EXCEEDED = 290
    UNKNOWN_DATABASE_ENGINE = 336
    UNKNOWN_EXCEPTION = 1002