"""Failure taxonomy for the analysis pipeline.

Only `AnalysisFailure` and its subclasses cross the orchestrator boundary.
Image-stage failures never raise; they are folded into `ImageOutcome.unavailable()`
by `ai_vs_professions.image.service`.
"""


class AnalysisFailure(Exception):
    """Base class for every failure of the analysis stage."""


class TransportError(AnalysisFailure):
    """The request could not be sent or the service answered with an HTTP error."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class NoResponse(AnalysisFailure):
    """The service answered without any text payload."""


class ParseError(AnalysisFailure):
    """The text payload is not valid JSON."""


class SchemaMismatch(AnalysisFailure):
    """The JSON payload does not match the declared result shape."""
