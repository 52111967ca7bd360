"""Configuration for the SARIF exporter.

Options are plain Pydantic models. ``load_options`` fills the values that
come from the environment, so the exporter itself never reads globals.

Provides:
- ExporterOptions: Pydantic model with exporter settings
- load_options: Factory that builds options from the environment
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field

# Set by CI runners to the checkout path of the running action.
ACTION_PATH_ENV = "github.action_path"


class ExporterOptions(BaseModel):
    """Settings for the SARIF exporter.

    Attributes:
        file: Destination the SARIF report is written to
        artifact_uri: Artifact URI used for results whose event carries no location
        per_host_rules: Key rules by template and host (legacy) instead of template only
        template_root: Local templates checkout (defaults to ~/nuclei-templates)
    """

    file: Path
    artifact_uri: str = Field(default="")
    per_host_rules: bool = Field(default=True)
    template_root: Path | None = Field(default=None)


def load_options(file: str | Path, **overrides) -> ExporterOptions:
    """Build exporter options from the environment.

    ``artifact_uri`` defaults to the CI action path variable when set, which
    is what older report consumers expect to see as the artifact location.

    Args:
        file: Destination path for the report
        **overrides: Explicit values that win over the environment

    Returns:
        Populated ExporterOptions instance
    """
    values = {"artifact_uri": os.getenv(ACTION_PATH_ENV, "")}
    values.update(overrides)
    return ExporterOptions(file=file, **values)
