"""SARIF 2.1.0 exporter.

Provides:
- SarifExporter: Thread-safe accumulating exporter
- build_finding, rule_id, template_url, host_hash: Identity helpers
- SarifReport, Run: Report object model
"""

from .exporter import SarifExporter
from .identity import build_finding, host_hash, rule_id, template_url
from .models import Run, SarifReport

__all__ = [
    "SarifExporter",
    "build_finding",
    "host_hash",
    "rule_id",
    "template_url",
    "Run",
    "SarifReport",
]
