"""Exceptions raised by the analysis pipeline.

Callers that only need to know that an analysis failed catch ``AnalysisError``.
The subclasses exist so the cause can be logged and, where it matters (a
missing credential at startup), reported clearly.
"""


class AnalysisError(Exception):
    """Base exception for a failed transcript analysis."""
    pass


class ConfigurationError(AnalysisError):
    """A required setting (usually the API credential) is missing."""
    pass


class TransportError(AnalysisError):
    """The call to the model endpoint failed."""
    pass


class SchemaViolationError(AnalysisError):
    """The model response is not JSON or does not match the result contract."""
    pass


class EmptyTranscriptError(ValueError):
    """An empty or whitespace-only transcript was passed for analysis."""
    pass
