"""Finding events produced by the scanning engine.

Typed models for the result events an exporter consumes. Scanners emit
JSON with dashed keys (``template-id``, ``matched-at``); both the dashed
aliases and the Python field names are accepted.

Provides:
- FindingInfo: Template metadata attached to a finding
- FindingEvent: A single finding against a host
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _string_or_none(value: Any) -> str | None:
    """Keep string values, treat anything else as absent."""
    return value if isinstance(value, str) else None


def _string_list(value: Any) -> list[str]:
    """Normalize a comma separated string or list into a list of strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return []


class FindingInfo(BaseModel):
    """Template metadata for a finding.

    Every field is optional. Values that are not strings are dropped
    instead of failing validation, so a malformed template never hides
    the finding itself.

    Attributes:
        name: Human readable template name
        description: Long form description of the issue
        severity: Template severity (info, low, medium, high, critical)
        remediation: How to fix the issue
        author: Template authors
        tags: Template tags
        reference: Reference URLs
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    severity: str | None = None
    remediation: str | None = None
    author: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    reference: list[str] = Field(default_factory=list)

    @field_validator("name", "description", "severity", "remediation", mode="before")
    @classmethod
    def _drop_non_strings(cls, value: Any) -> str | None:
        return _string_or_none(value)

    @field_validator("author", "tags", "reference", mode="before")
    @classmethod
    def _split_lists(cls, value: Any) -> list[str]:
        return _string_list(value)


class FindingEvent(BaseModel):
    """A security finding reported by the scanning engine.

    Attributes:
        host: Target the template matched against
        template_id: Identifier of the template that produced the finding
        template_path: Absolute path of the template file on disk
        info: Template metadata
        type: Protocol type of the request (http, dns, network, ...)
        matched_at: Exact URL or address the match happened at
        matcher_name: Name of the matcher that fired
        extracted_results: Values pulled out by extractors
        ip: Resolved IP address of the host
        request: Raw request sent
        response: Raw response received
        curl_command: curl command reproducing the request
        timestamp: When the finding was produced
        location: Artifact location reported for the finding (empty if unknown)
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    host: str
    template_id: str = Field(alias="template-id")
    template_path: str = Field(default="", alias="template-path")
    info: FindingInfo = Field(default_factory=FindingInfo)
    type: str = ""
    matched_at: str = Field(default="", alias="matched-at")
    matcher_name: str = Field(default="", alias="matcher-name")
    extracted_results: list[str] = Field(default_factory=list, alias="extracted-results")
    ip: str = ""
    request: str = ""
    response: str = ""
    curl_command: str = Field(default="", alias="curl-command")
    timestamp: str = ""
    location: str = ""

    @field_validator("info", mode="before")
    @classmethod
    def _info_mapping(cls, value: Any) -> Any:
        return value if value is not None else {}
