"""Rule identity and description building for SARIF results.

Turns a finding event into the SARIF rule and result that describe it.
Nothing here touches exporter state, so a finding that fails to build is
simply not recorded.
"""

import hashlib
import os
from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from scanexport.core.errors import IngestionError
from scanexport.core.output import FindingEvent
from scanexport.core.reporting import markdown_description
from scanexport.core.severity import event_level
from scanexport.exporters.sarif.models import (
    ArtifactLocation,
    Location,
    Message,
    MultiformatMessageString,
    PhysicalLocation,
    Region,
    ReportingDescriptor,
    Result,
)

TEMPLATES_REPOSITORY = "https://github.com/projectdiscovery/nuclei-templates"
TEMPLATES_BASE_URL = TEMPLATES_REPOSITORY + "/blob/master"

HOST_FINGERPRINT = "hostHash/v1"


def host_hash(host: str) -> str:
    """Stable hex digest of a host, used as identity material only.

    Lone surrogates are hashed as-is; the finding is rejected later when
    its text cannot be encoded.
    """
    return hashlib.sha1(host.encode("utf-8", "surrogatepass")).hexdigest()


def rule_id(template_id: str, host: str, per_host: bool = True) -> str:
    """Rule identity for a finding.

    With ``per_host`` (the default) every template/host pair gets its own
    rule, so the same template against two hosts yields two rule ids.

    Args:
        template_id: Template that produced the finding
        host: Target the template matched against
        per_host: Fold the host hash into the rule id

    Returns:
        ``"<template_id>-<sha1(host)>"`` or ``template_id``
    """
    if not per_host:
        return template_id
    return f"{template_id}-{host_hash(host)}"


def template_url(template_path: str, template_root: Path | str) -> str:
    """Link to a template in the public templates repository.

    Returns an empty string for templates outside the local checkout.

    Example:
        >>> template_url("/home/u/nuclei-templates/cves/x.yaml", "/home/u/nuclei-templates")
        'https://github.com/projectdiscovery/nuclei-templates/blob/master/cves/x.yaml'
    """
    root = str(template_root).rstrip(os.sep)
    if not template_path or not template_path.startswith(root + os.sep):
        return ""
    return TEMPLATES_BASE_URL + template_path[len(root):].replace(os.sep, "/")


def build_rule(event: FindingEvent, template_root: Path | str, per_host: bool = True) -> ReportingDescriptor:
    """Build the SARIF rule describing a finding's template."""
    help_text = markdown_description(event)
    return ReportingDescriptor(
        id=rule_id(event.template_id, event.host, per_host),
        short_description=MultiformatMessageString(text=event.info.name or ""),
        full_description=MultiformatMessageString(text=event.info.description or ""),
        help=MultiformatMessageString(text=help_text, markdown=help_text),
        help_uri=template_url(event.template_path, template_root) or None,
    )


def build_result(event: FindingEvent, rule: ReportingDescriptor, artifact_uri: str = "", per_host: bool = True) -> Result:
    """Build the SARIF result pointing at ``rule``.

    Findings are host scoped, so the region is a fixed 1:1 placeholder.
    The artifact URI is the event's own location when it has one.
    """
    physical = PhysicalLocation(
        artifact_location=ArtifactLocation(uri=event.location or artifact_uri),
        region=Region(start_line=1, start_column=1, end_line=1, end_column=1),
    )
    return Result(
        rule_id=rule.id,
        level=event_level(event),
        message=Message(text=event.host),
        locations=[Location(message=Message(text=event.host), physical_location=physical)],
        partial_fingerprints=None if per_host else {HOST_FINGERPRINT: host_hash(event.host)},
    )


def build_finding(
    event: FindingEvent,
    template_root: Path | str,
    artifact_uri: str = "",
    per_host: bool = True,
) -> tuple[ReportingDescriptor, Result]:
    """Build the rule and result for a finding.

    Raises:
        IngestionError: If the SARIF model rejects the finding
    """
    try:
        rule = build_rule(event, template_root, per_host)
        result = build_result(event, rule, artifact_uri, per_host)
        # Reject text the report encoder would choke on at close time.
        rule.model_dump_json()
        result.model_dump_json()
    except ValidationError as e:
        raise IngestionError(f"could not build sarif result for {event.template_id!r}: {e}") from e
    except (PydanticSerializationError, UnicodeError) as e:
        raise IngestionError(f"sarif result for {event.template_id!r} cannot be encoded: {e}") from e
    return rule, result
