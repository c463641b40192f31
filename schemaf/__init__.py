"""Todo endpoint classes, typed todo queries, a clock sidecar endpoint and JSON logging."""

__version__ = "0.2.0"
__all__ = ["clock", "log", "queries", "todos"]