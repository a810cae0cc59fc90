"""Error taxonomy shared by the extraction, model and parsing layers.

Each error is caught at the boundary where the fallible operation happens and
turned into empty-state data or an inline message; none of them is meant to
reach Streamlit's top-level handler.
"""
from __future__ import annotations


class ClauseLensError(Exception):
    """Base class for application errors."""


class ConfigurationMissing(ClauseLensError, ValueError):
    """No API credential is configured for the hosted model."""


class ExtractionFailure(ClauseLensError):
    """The uploaded file could not be turned into text."""

    def __init__(self, file_name: str, reason: str):
        super().__init__(f"{file_name}: {reason}")
        self.file_name = file_name
        self.reason = reason


class ModelRequestFailure(ClauseLensError):
    """The hosted model call failed (network, quota, blocked response...)."""


class ResponseParseFailure(ClauseLensError):
    """The model output was not the JSON document we asked for."""
