from __future__ import annotations


class QaPilotError(Exception):
    """Base class for errors raised by the pipeline."""


class GenerationError(QaPilotError):
    """The text provider was unavailable or returned nothing usable."""


class PlanCacheError(QaPilotError):
    """A cached plan file exists but cannot be read back."""


class SpecDiscoveryError(QaPilotError):
    """No runnable spec files were found for a suite."""
