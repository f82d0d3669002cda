"""Column types, type-name parsing, query events, protocol codes and server errors for ClickHouse clients."""

__version__ = "0.1.0"
__all__ = ["errors", "protocol", "query", "type_parser", "types"]