"""Result exporters."""

from .sarif import SarifExporter

__all__ = ["SarifExporter"]
