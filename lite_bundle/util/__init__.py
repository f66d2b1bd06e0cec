"""Input and logging helpers."""

from .file_utils import read_source, resolve_source
from .log_utils import configure_logging

__all__ = ["read_source", "resolve_source", "configure_logging"]
