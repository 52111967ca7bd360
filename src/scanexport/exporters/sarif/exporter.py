"""SARIF exporter for scan findings.

Accumulates findings from any number of producer threads into a single
SARIF run and writes the report once, on close, if anything was found.
"""

import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from scanexport.core.config import ExporterOptions
from scanexport.core.errors import (
    ConstructionError,
    ExporterClosedError,
    FileCreationError,
    HomeDirectoryError,
    IngestionError,
    SerializationError,
)
from scanexport.core.output import FindingEvent
from scanexport.exporters.sarif.identity import build_finding
from scanexport.exporters.sarif.models import Run, SarifReport

logger = structlog.get_logger()

TOOL_NAME = "nuclei"
TOOL_INFORMATION_URI = "https://github.com/projectdiscovery/nuclei"
TEMPLATES_DIRECTORY = "nuclei-templates"


def default_template_root() -> Path:
    """Local templates checkout under the current user's home directory.

    Raises:
        HomeDirectoryError: If the home directory cannot be resolved
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as e:
        raise HomeDirectoryError(f"could not get home dir: {e}") from e
    return home / TEMPLATES_DIRECTORY


class SarifExporter:
    """Export findings to a SARIF report.

    One exporter owns one run. ``export`` may be called concurrently;
    ``close`` must be called exactly once, after the last ``export``.

    Example:
        >>> with SarifExporter(load_options("results.sarif")) as exporter:
        ...     exporter.export(event)
    """

    def __init__(self, options: ExporterOptions):
        """Create the report, the active run and resolve the template root.

        Args:
            options: Exporter configuration

        Raises:
            HomeDirectoryError: If the home directory cannot be resolved
            ConstructionError: If the SARIF report cannot be created
        """
        self.options = options
        if options.template_root is not None:
            self.template_root = options.template_root
        else:
            self.template_root = default_template_root()

        try:
            self.report = SarifReport()
            self.run = Run.new(TOOL_NAME, TOOL_INFORMATION_URI)
        except ValidationError as e:
            raise ConstructionError(f"could not create sarif exporter: {e}") from e

        self._lock = threading.Lock()
        self._closed = False

        logger.debug(
            "sarif_exporter_created",
            file=str(options.file),
            template_root=str(self.template_root),
            per_host_rules=options.per_host_rules,
        )

    def export(self, event: FindingEvent | Mapping[str, Any]) -> None:
        """Record a finding in the active run.

        The rule for the finding is added, or overwritten if a rule with
        the same id exists, then a result referencing it is appended.

        Args:
            event: Finding event, or a raw mapping in scanner JSON form

        Raises:
            IngestionError: If the finding was rejected; nothing was recorded
            ExporterClosedError: If the exporter was already closed
        """
        try:
            if not isinstance(event, FindingEvent):
                event = FindingEvent.model_validate(event)
            rule, result = build_finding(
                event,
                self.template_root,
                artifact_uri=self.options.artifact_uri,
                per_host=self.options.per_host_rules,
            )
        except ValidationError as e:
            logger.warning("sarif_finding_rejected", error=str(e))
            raise IngestionError(f"invalid finding event: {e}") from e
        except IngestionError as e:
            logger.warning("sarif_finding_rejected", template_id=event.template_id, error=str(e))
            raise

        with self._lock:
            if self._closed:
                raise ExporterClosedError("sarif exporter is already closed")
            self.run.add_rule(rule)
            self.run.add_result(result)

    def close(self) -> Path | None:
        """Attach the run to the report and write it out.

        Nothing is written when no finding was recorded.

        Returns:
            Path of the written report, or None when the run was empty

        Raises:
            FileCreationError: If the output file cannot be created
            SerializationError: If the report cannot be encoded or written
            ExporterClosedError: If the exporter was already closed
        """
        with self._lock:
            if self._closed:
                raise ExporterClosedError("sarif exporter is already closed")
            self._closed = True

            self.report.add_run(self.run)
            if not self.run.results:
                logger.info("sarif_export_skipped", reason="no results")
                return None

            path = Path(self.options.file)
            # Encode first so a failure leaves an existing report untouched.
            try:
                payload = self.report.to_json()
            except (ValueError, TypeError) as e:
                logger.error("sarif_serialization_failed", file=str(path), error=str(e))
                raise SerializationError(f"could not encode sarif report for {path}: {e}") from e

            try:
                fp = open(path, "w", encoding="utf-8")
            except OSError as e:
                logger.error("sarif_output_create_failed", file=str(path), error=str(e))
                raise FileCreationError(f"could not create sarif output file {path}: {e}") from e

            with fp:
                try:
                    fp.write(payload)
                except (ValueError, OSError) as e:
                    logger.error("sarif_serialization_failed", file=str(path), error=str(e))
                    raise SerializationError(f"could not write sarif report to {path}: {e}") from e

            logger.info(
                "sarif_report_written",
                file=str(path),
                rules=len(self.run.rules),
                results=len(self.run.results),
            )
            return path

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "SarifExporter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None and not self._closed:
            self.close()
