"""A minimal HTTP server that parses requests and answers with a fixed reply."""

__version__ = "0.1.0"
__all__ = ["errors", "textutils", "messages", "parser", "server"]