"""Core package exports.

Exports configuration and error types. Runtime wiring lives in
`core.runtime` and is imported explicitly by the entrypoint.
"""

from .config import AppConfig
from .errors import ConfigurationError, InternalError

__all__ = ["AppConfig", "ConfigurationError", "InternalError"]
