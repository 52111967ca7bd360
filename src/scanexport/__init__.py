"""SARIF export of security scan findings."""

from scanexport.core import ExporterOptions, FindingEvent, FindingInfo, load_options, sarif_level
from scanexport.exporters.sarif import SarifExporter

__all__ = [
    "ExporterOptions",
    "FindingEvent",
    "FindingInfo",
    "SarifExporter",
    "load_options",
    "sarif_level",
]
