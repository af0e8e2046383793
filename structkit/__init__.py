"""Classic data structures, thread-safe containers, concurrency helpers and a small JSON-like parser."""

__version__ = "0.1.0"