"""Error types for gl-api.

Every failure that should end the process with exit code 1 derives from
``GlApiError``; ``cli.main`` logs it once and stops.
"""

from __future__ import annotations


class GlApiError(Exception):
    """Base class for all gl-api failures."""


class ArgumentError(GlApiError):
    """Malformed top-level flag, or a required setting is missing."""


class MissingMethodError(GlApiError):
    """No method name left after parsing the command line."""


class OperationError(GlApiError):
    """The API client rejected the call or the remote request failed."""


class ConfigurationError(GlApiError):
    """Unknown output format."""


class SerializationError(GlApiError):
    """The selected format could not encode the result."""
