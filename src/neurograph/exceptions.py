"""Errors raised while generating a knowledge graph."""


class GraphGenerationError(Exception):
    """Base class for failures that abort a generation attempt."""


class ConfigurationError(GraphGenerationError):
    """The API credential is missing."""


class UpstreamError(GraphGenerationError):
    """The chat completion API did not return a success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ParseError(GraphGenerationError):
    """The extraction output is not valid JSON for the expected shape."""
