"""Client for the Telegraph publishing API, with HTML-to-node content conversion."""

__version__ = "0.1.0"

__all__ = ["account", "api", "client", "content", "demo", "errors", "models", "page", "request"]