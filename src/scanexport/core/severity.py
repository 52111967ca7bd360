"""Severity mapping from template severities to SARIF result levels.

Templates use a five step vocabulary (info, low, medium, high, critical)
while SARIF results only know note, warning and error.

Provides:
- SarifLevel: Enum of SARIF result levels
- sarif_level: Map a template severity string to a SARIF level
- event_level: Map the severity carried by a finding event
"""

from enum import Enum

from scanexport.core.output import FindingEvent


class SarifLevel(str, Enum):
    """SARIF result level."""

    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


SEVERITY_LEVELS: dict[str, SarifLevel] = {
    "info": SarifLevel.NOTE,
    "low": SarifLevel.WARNING,
    "medium": SarifLevel.WARNING,
    "high": SarifLevel.ERROR,
    "critical": SarifLevel.ERROR,
}


def sarif_level(severity: str | None) -> str:
    """Map a template severity to a SARIF level.

    Unknown or missing severities map to ``note``.

    Args:
        severity: Template severity, any case

    Returns:
        One of "note", "warning", "error"

    Example:
        >>> sarif_level("high")
        'error'
    """
    key = (severity or "").strip().lower()
    return SEVERITY_LEVELS.get(key, SarifLevel.NOTE).value


def event_level(event: FindingEvent) -> str:
    """SARIF level for the severity in a finding's template info."""
    return sarif_level(event.info.severity)
