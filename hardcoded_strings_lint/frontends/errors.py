"""Front-end error types."""


class SourceParseError(ValueError):
    """Input could not be turned into a syntax tree."""
