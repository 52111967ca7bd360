"""Core exporter functionality.

Provides:
- Finding events and template metadata
- Severity mapping to SARIF levels
- Exporter configuration and error taxonomy
"""

from .config import ExporterOptions, load_options
from .errors import (
    ConstructionError,
    ExportError,
    ExporterClosedError,
    FileCreationError,
    HomeDirectoryError,
    IngestionError,
    SerializationError,
)
from .output import FindingEvent, FindingInfo
from .severity import SarifLevel, event_level, sarif_level

__all__ = [
    "ExporterOptions",
    "load_options",
    "ConstructionError",
    "ExportError",
    "ExporterClosedError",
    "FileCreationError",
    "HomeDirectoryError",
    "IngestionError",
    "SerializationError",
    "FindingEvent",
    "FindingInfo",
    "SarifLevel",
    "event_level",
    "sarif_level",
]
